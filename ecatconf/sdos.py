"""Object dictionary prober. Fills :attr:`ecatconf.slave.Slave.sdos` from the
``ethercat sdos`` listing and answers CiA 402 questions about it.

Example input::

    SDO 0x6040, "Controlword"
      0x6040:00, rwrwrw, uint16, 16 bit, "Controlword"
"""
import re
from typing import Dict

from ecatconf.coe.cia402_definitions import (
    CONTROLWORD,
    MAX_CHANNELS,
    STATUSWORD,
    SUPPORTED_DRIVE_MODES,
    SUPPORTED_DRIVE_MODES_OFFSET,
    channel_base,
)
from ecatconf.logging import get_logger
from ecatconf.scraping import LineRule, scrape
from ecatconf.slave import Slave, sdo_key
from ecatconf.tool import IntrospectionSource


SDO_RE = re.compile(r'^  (0x[0-9a-fA-F]{4}:[0-9a-fA-F]{2}), [rw-]+, ([^,]+),')

CIA402_REQUIRED = (
    sdo_key(CONTROLWORD, 0),
    sdo_key(STATUSWORD, 0),
    sdo_key(SUPPORTED_DRIVE_MODES, 0),
)
"""Objects every CiA 402 drive has."""

CHANNEL_MARKERS = tuple(
    sdo_key(channel_base(channel) + SUPPORTED_DRIVE_MODES_OFFSET, 0)
    for channel in range(MAX_CHANNELS)
)
"""Supported drive modes object of each channel ('0x6502:00', '0x6d02:00',
...).
"""

LOGGER = get_logger(name=__name__, parent=None)


def parse_sdos(text: str) -> Dict[str, str]:
    """Parse object dictionary listing.

    Args:
        text: Output of ``ethercat sdos``.

    Returns:
        Lower case key -> declared data type.
    """
    sdos = {}

    def on_sdo(match):
        sdos[match[1].lower()] = match[2]

    scrape(text, [LineRule(SDO_RE, on_sdo)])
    return sdos


def read_sdos(source: IntrospectionSource, slave: Slave) -> Dict[str, str]:
    """Probe object dictionary of slave and store it on the slave."""
    slave.sdos = parse_sdos(source.sdos(slave.master, slave.slave))
    LOGGER.debug('%s has %d object dictionary entries', slave, len(slave.sdos))
    return slave.sdos


def is_cia402(slave: Slave) -> bool:
    """Check if slave looks like a CiA 402 drive (controlword, statusword and
    supported drive modes present).
    """
    return all(slave.has_sdo(key) for key in CIA402_REQUIRED)


def cia_channels(slave: Slave) -> int:
    """Number of CiA 402 channels (axes). Counts supported drive mode objects
    from channel 0 and stops at the first missing one.
    """
    channels = 0
    for key in CHANNEL_MARKERS:
        if not slave.has_sdo(key):
            break

        channels += 1

    return channels
