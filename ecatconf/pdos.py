"""PDO topology builder. Parses the ``ethercat pdos`` listing of a slave into
sync managers, PDOs and PDO entries with inferred pin names and types.

Example input::

    SM2: PhysAddr 0x1100, DefaultSize    0, ControlRegister 0x64, Enable 1
      RxPDO 0x1600 "Outputs"
        PDO entry 0x6040:00, 16 bit, "Controlword"
        PDO entry 0x0000:00,  8 bit, ""
    SM3: PhysAddr 0x1180, DefaultSize    0, ControlRegister 0x20, Enable 1
      TxPDO 0x1a00 "Inputs"
        PDO entry 0x6041:00, 16 bit, "Statusword"
"""
import re
from typing import List, Optional

from ecatconf.coe.definitions import infer_pin_type, is_flagged
from ecatconf.logging import get_logger
from ecatconf.pins import default_pin_name, normalize_pin_name
from ecatconf.scraping import LineRule, scrape
from ecatconf.slave import IN, OUT, Pdo, PdoEntry, Slave, SyncManager
from ecatconf.tool import IntrospectionSource
from ecatconf.utils import strip_hex_prefix


SM_RE = re.compile(r'^SM([0-9]+): PhysAddr (0x[0-9a-f]+).*')
PDO_RE = re.compile(r'^  ([RT]xPDO) (0x[0-9a-f]+) "(.*)"')
ENTRY_RE = re.compile(r'^    PDO entry (0x[0-9a-f]+):([0-9a-f]+), +([0-9]+) bit, "(.*)"')

GAP_INDEX: str = '0000'
"""PDO entries with this index are padding."""

PDO_DIRECTIONS = {
    'RxPDO': OUT,
    'TxPDO': IN,
}
"""PDO kind -> sync manager direction (master's point of view)."""

# Guessed directions for sync managers without any PDOs. Can not be derived
# from the listing.
DEFAULT_DIRECTIONS = {
    '0': IN,
    '1': OUT,
}

LOGGER = get_logger(name=__name__, parent=None)


class PdoBuilder:

    """Single pass over the PDO listing. Keeps a cursor on the current sync
    manager and PDO.
    """

    def __init__(self, slave: Slave):
        self.slave = slave
        self.syncManagers: List[SyncManager] = []
        self.sm: Optional[SyncManager] = None
        self.pdo: Optional[Pdo] = None

    def on_sync_manager(self, match):
        index = strip_hex_prefix(match[1])
        self.sm = SyncManager(index, DEFAULT_DIRECTIONS.get(index))
        self.pdo = None
        self.syncManagers.append(self.sm)

    def on_pdo(self, match):
        if self.sm is None:
            LOGGER.warning('%s: PDO %s outside of sync manager', self.slave, match[2])
            return

        self.pdo = Pdo(strip_hex_prefix(match[2]), label=match[3])
        self.sm.pdos.append(self.pdo)
        self.sm.direction = PDO_DIRECTIONS[match[1]]

    def on_entry(self, match):
        if self.pdo is None:
            LOGGER.warning('%s: PDO entry %s:%s outside of PDO', self.slave, match[1], match[2])
            return

        index = strip_hex_prefix(match[1])
        if index == GAP_INDEX:
            return

        subindex = match[2]
        bitLen = int(match[3])
        label = match[4]
        if label:
            pinName = normalize_pin_name(label)
        else:
            pinName = default_pin_name(index, subindex)

        dataType = self.slave.sdos.get(f'0x{index}:{subindex}'.lower(), '')
        pinType = infer_pin_type(dataType, bitLen)
        if is_flagged(pinType):
            LOGGER.warning('%s: no pin type for %s:%s (%r). Needs manual review', self.slave, index, subindex, dataType)

        # Label is consumed by the pin name
        self.pdo.entries.append(PdoEntry(index, subindex, bitLen, pinName, pinType))

    def rules(self) -> List[LineRule]:
        return [
            LineRule(SM_RE, self.on_sync_manager),
            LineRule(PDO_RE, self.on_pdo),
            LineRule(ENTRY_RE, self.on_entry),
        ]

    def parse(self, text: str) -> List[SyncManager]:
        scrape(text, self.rules())
        return self.syncManagers


def parse_pdos(text: str, slave: Slave) -> List[SyncManager]:
    """Parse PDO listing of slave.

    Args:
        text: Output of ``ethercat pdos``.
        slave: Slave with probed object dictionary (for data types).

    Returns:
        Sync managers in listing order.
    """
    return PdoBuilder(slave).parse(text)


def build_pdos(source: IntrospectionSource, slave: Slave) -> List[SyncManager]:
    """Query and parse PDO layout of slave."""
    return parse_pdos(source.pdos(slave.master, slave.slave), slave)
