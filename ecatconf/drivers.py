"""Driver type resolver. Slaves with a dedicated lcec driver are looked up in
the static driver table (``drivers.yaml``, generated from the device
documentation). Otherwise unknown slaves fall back to ``basic_cia402`` if they
look like a CiA 402 drive or ``generic`` if not.

Note:
    The driver table has some duplicate (vendor id, product code) pairs
    (device variants sharing the same identity). The first record in file
    order wins.
"""
import pkgutil
from typing import Iterator, List, NamedTuple, Optional

import ruamel.yaml

from ecatconf.sdos import is_cia402
from ecatconf.slave import BASIC_CIA402, GENERIC, Slave


DRIVER_TABLE_RESOURCE: str = 'drivers.yaml'
"""Package resource with the static driver table."""


class Driver(NamedTuple):

    """Driver table record."""

    type: str
    vid: str
    pid: str


class DriverTable:

    """Read-only ordered collection of driver records."""

    def __init__(self, drivers: Optional[List[Driver]] = None):
        self.drivers: List[Driver] = list(drivers or [])

    @classmethod
    def loads(cls, string: str) -> 'DriverTable':
        """Load table from YAML string."""
        yaml = ruamel.yaml.YAML(typ='safe')
        data = yaml.load(string) or {}
        drivers = [
            Driver(str(rec['type']), str(rec['vid']).lower(), str(rec['pid']).lower())
            for rec in data.get('drivers', [])
        ]
        return cls(drivers)

    @classmethod
    def default(cls) -> 'DriverTable':
        """Driver table shipped with the package."""
        data = pkgutil.get_data('ecatconf', DRIVER_TABLE_RESOURCE)
        return cls.loads(data.decode())

    def lookup(self, vendorId: str, productId: str) -> Optional[str]:
        """Driver type of first exact (vendor id, product code) match. None if
        there is no such driver.
        """
        vid = vendorId.lower()
        pid = productId.lower()
        for driver in self.drivers:
            if driver.vid == vid and driver.pid == pid:
                return driver.type

        return None

    def __iter__(self) -> Iterator[Driver]:
        return iter(self.drivers)

    def __len__(self):
        return len(self.drivers)


def infer_type(slave: Slave, table: Optional[DriverTable] = None, useTable: bool = True) -> str:
    """Determine driver type for slave. Object dictionary has to be probed
    beforehand (see :func:`ecatconf.sdos.read_sdos`).

    Args:
        slave: Slave to resolve.
        table: Driver table. Packaged table by default.
        useTable: If False every slave is either ``generic`` or
            ``basic_cia402``.

    Returns:
        Driver type name.
    """
    if useTable:
        if table is None:
            table = DriverTable.default()

        driverType = table.lookup(slave.vendorId, slave.productId)
        if driverType is not None:
            return driverType

    if is_cia402(slave):
        return BASIC_CIA402

    return GENERIC
