"""Bus topology reader. Parses the verbose slave listing of the ``ethercat``
tool into :class:`ecatconf.slave.Slave` identity records.

Example input::

    === Master 0, Slave 0 ===
    Device: Main
    State: PREOP
    ...
    Identity:
      Vendor Id:       0x00000002
      Product code:    0x044c2c52
      Revision number: 0x00110000
      Serial number:   0x00000000
    ...
      Device name: EK1100 EtherCAT-Koppler (2A E-Bus)
"""
import re
from typing import List, Optional

from ecatconf.logging import get_logger
from ecatconf.scraping import LineRule, scrape
from ecatconf.slave import Slave
from ecatconf.tool import IntrospectionSource


BOUNDARY_RE = re.compile(r'^=== Master ([0-9]+), Slave ([0-9]+) ===$')
VENDOR_RE = re.compile(r'^  Vendor Id: +(0x[0-9a-fA-F]+)')
PRODUCT_RE = re.compile(r'^  Product code: +(0x[0-9a-fA-F]+)')
REVISION_RE = re.compile(r'^  Revision number: +(0x[0-9a-fA-F]+)')
DEVICE_NAME_RE = re.compile(r'^  Device name: (.*)')

LOGGER = get_logger(name=__name__, parent=None)


class TopologyReader:

    """Collects slaves while scraping. A slave is closed by its device name
    line. Devices without device name field get closed by the next boundary
    line or by the end of the input.
    """

    def __init__(self):
        self.slaves: List[Slave] = []
        self.current: Optional[Slave] = None

    def close(self):
        """Append current slave (if any)."""
        if self.current is not None:
            self.slaves.append(self.current)
            self.current = None

    def on_boundary(self, match):
        if self.current is not None:
            LOGGER.info('%s has no device name', self.current)
            self.close()

        self.current = Slave(master=match[1], slave=match[2])

    def on_vendor(self, match):
        if self.current is not None:
            self.current.vendorId = match[1]

    def on_product(self, match):
        if self.current is not None:
            self.current.productId = match[1]

    def on_revision(self, match):
        if self.current is not None:
            self.current.revision = match[1]

    def on_device_name(self, match):
        if self.current is not None:
            self.current.deviceName = match[1]
            self.close()

    def rules(self) -> List[LineRule]:
        return [
            LineRule(BOUNDARY_RE, self.on_boundary),
            LineRule(VENDOR_RE, self.on_vendor),
            LineRule(PRODUCT_RE, self.on_product),
            LineRule(REVISION_RE, self.on_revision),
            LineRule(DEVICE_NAME_RE, self.on_device_name),
        ]

    def parse(self, text: str) -> List[Slave]:
        """Parse slave listing.

        Args:
            text: Output of ``ethercat -v slaves``.

        Returns:
            Slaves in discovery order.
        """
        scrape(text, self.rules())
        self.close()
        return self.slaves


def parse_slaves(text: str) -> List[Slave]:
    """Parse verbose slave listing into slave records."""
    return TopologyReader().parse(text)


def read_slaves(source: IntrospectionSource) -> List[Slave]:
    """Query bus topology. Failing to do so is fatal
    (:class:`ecatconf.error.IntrospectionError` propagates).
    """
    slaves = parse_slaves(source.slaves())
    LOGGER.info('Found %d slaves', len(slaves))
    return slaves
