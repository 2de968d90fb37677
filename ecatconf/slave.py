"""Data model. Slaves as discovered on the bus and the per slave
configuration tree which ends up in the generated document.
"""
from typing import Dict, Iterator, List, NamedTuple, Optional


GENERIC: str = 'generic'
"""Driver type for slaves handled by the generic PDO driver."""

BASIC_CIA402: str = 'basic_cia402'
"""Driver type for otherwise unknown CiA 402 drives."""

IN: str = 'in'
"""Sync manager direction slave -> master."""

OUT: str = 'out'
"""Sync manager direction master -> slave."""


def sdo_key(index: int, subindex: int) -> str:
    """Object dictionary mapping key.

    Example:
        >>> sdo_key(0x6502, 0)
        '0x6502:00'
    """
    return f'0x{index:04x}:{subindex:02x}'


class Slave:

    """EtherCAT slave identity as reported by ``ethercat -v slaves``."""

    def __init__(self, master: str, slave: str, vendorId: str = '', productId: str = '',
            revision: str = '', deviceName: str = ''):
        self.master = master
        self.slave = slave
        self.vendorId = vendorId
        self.productId = productId
        self.revision = revision
        self.deviceName = deviceName

        self.sdos: Dict[str, str] = {}
        """Object dictionary key (see :func:`sdo_key`) -> declared data type."""

    def has_sdo(self, key: str) -> bool:
        """Check if the slave's object dictionary has a given entry."""
        return bool(self.sdos.get(key.lower()))

    def __str__(self):
        return f'{type(self).__name__}(master={self.master}, slave={self.slave}, {self.deviceName!r})'

    def __repr__(self):
        return (
            f'{type(self).__name__}({self.master!r}, {self.slave!r}, vendorId={self.vendorId!r}, '
            f'productId={self.productId!r}, revision={self.revision!r}, deviceName={self.deviceName!r})'
        )


class ModParam(NamedTuple):

    """Driver specific module parameter."""

    name: str
    value: str


class PdoEntry:

    """Single mapped object inside a PDO. Index and subindex are hex strings
    without ``0x`` prefix (like in the generated document).
    """

    def __init__(self, index: str, subindex: str, bitLen: int, pinName: str = '',
            pinType: str = '', label: str = ''):
        self.index = index
        self.subindex = subindex
        self.bitLen = bitLen
        self.pinName = pinName
        self.pinType = pinType
        self.label = label

    def __repr__(self):
        return f'{type(self).__name__}({self.index}:{self.subindex}, {self.bitLen} bit, {self.pinName!r}, {self.pinType!r})'


class Pdo:

    """Process data object."""

    def __init__(self, index: str, label: str = ''):
        self.index = index
        self.label = label
        self.entries: List[PdoEntry] = []

    def __repr__(self):
        return f'{type(self).__name__}({self.index}, {self.label!r}, {len(self.entries)} entries)'


class SyncManager:

    """Directional channel for PDOs. Direction from the master's point of view."""

    def __init__(self, index: str, direction: Optional[str] = None):
        self.index = index
        self.direction = direction
        self.pdos: List[Pdo] = []

    def __repr__(self):
        return f'{type(self).__name__}({self.index}, {self.direction!r}, {len(self.pdos)} PDOs)'


class SlaveConfig:

    """Inferred configuration for a single slave."""

    def __init__(self, idx: str, driverType: str, name: str):
        self.idx = idx
        self.type = driverType
        self.name = name
        self.vid: Optional[str] = None
        self.pid: Optional[str] = None
        self.comment: str = ''
        self.modParams: List[ModParam] = []
        self.syncManagers: List[SyncManager] = []

    def entries(self) -> Iterator[PdoEntry]:
        """Iterate over all PDO entries of the slave."""
        for sm in self.syncManagers:
            for pdo in sm.pdos:
                yield from pdo.entries

    def __repr__(self):
        return f'{type(self).__name__}({self.idx!r}, {self.type!r}, {self.name!r})'


class Master:

    """EtherCAT master with its slaves in discovery order."""

    def __init__(self, idx: str):
        self.idx = idx
        self.slaves: List[SlaveConfig] = []

    def __repr__(self):
        return f'{type(self).__name__}({self.idx!r}, {len(self.slaves)} slaves)'
