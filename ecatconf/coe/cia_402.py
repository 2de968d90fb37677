"""CiA 402 capability synthesizer. Generates the ``<modParam>`` settings which
tell the lcec CiA 402 drivers which optional features to enable for an
otherwise unknown drive.

This is not as good as a device specific driver (no device specific options)
but should be usable in most cases.
"""
from typing import List

from ecatconf.coe.cia402_definitions import (
    CHANNELS_PARAM,
    COMPANION_PARAMS,
    OPTIONAL_FEATURES,
    SUPPORTED_DRIVE_MODES_OFFSET,
    SUPPORTED_MODE_BITS,
    channel_base,
)
from ecatconf.error import RegisterValueError
from ecatconf.logging import get_logger
from ecatconf.sdos import cia_channels
from ecatconf.slave import ModParam, Slave, sdo_key
from ecatconf.tool import IntrospectionSource


TRUE: str = 'true'

LOGGER = get_logger(name=__name__, parent=None)


def parse_register(text: str) -> int:
    """Parse ``ethercat upload`` output. First token is the value (hex or
    decimal).

    Example:
        >>> parse_register('0x03ed 1005\\n')
        1005
    """
    tokens = text.split()
    if not tokens:
        raise RegisterValueError('Empty register upload output')

    try:
        return int(tokens[0], 0)
    except ValueError as err:
        raise RegisterValueError(f'Can not parse register value {tokens[0]!r}') from err


def read_supported_drive_modes(source: IntrospectionSource, slave: Slave, channel: int = 0) -> int:
    """Read supported drive modes bitmask of a channel."""
    index = channel_base(channel) + SUPPORTED_DRIVE_MODES_OFFSET
    return parse_register(source.upload(slave.master, slave.slave, index, 0))


def mode_params(supportedModes: int) -> List[ModParam]:
    """Enable modParams for every supported drive mode bit.

    Example:
        >>> [mp.name for mp in mode_params(0b1010100001)]
        ['enablePP', 'enableHM', 'enableCSP', 'enableCST']
    """
    return [
        ModParam(f'enable{mb.mode}', TRUE)
        for mb in SUPPORTED_MODE_BITS
        if supportedModes & (1 << mb.bit)
    ]


def feature_params(slave: Slave, channel: int = 0) -> List[ModParam]:
    """Enable modParams for all optional CiA 402 objects present in the
    slave's object dictionary.
    """
    base = channel_base(channel)
    params = []
    for feature in OPTIONAL_FEATURES:
        if not slave.has_sdo(sdo_key(base + feature.offset, feature.subindex)):
            continue

        params.append(ModParam(feature.name, TRUE))
        if feature.name in COMPANION_PARAMS:
            params.append(ModParam(*COMPANION_PARAMS[feature.name]))

    return params


def cia_enable_mod_params(source: IntrospectionSource, slave: Slave) -> List[ModParam]:
    """Synthesize CiA 402 modParams for all channels of slave. For multi axis
    drives parameter names get prefixed with ``ch1``, ``ch2``, ... and the
    number of channels is reported as well.

    Args:
        source: Introspection source for reading the supported drive modes.
        slave: Slave with probed object dictionary.

    Returns:
        ModParams in emission order.
    """
    channels = cia_channels(slave)
    LOGGER.debug('%s has %d CiA 402 channels', slave, channels)
    params = []
    if channels > 1:
        params.append(ModParam(CHANNELS_PARAM, str(channels)))

    for channel in range(channels):
        supportedModes = read_supported_drive_modes(source, slave, channel)
        LOGGER.debug('%s channel %d supported drive modes: 0x%x', slave, channel, supportedModes)
        channelParams = mode_params(supportedModes) + feature_params(slave, channel)
        if channels > 1:
            prefix = f'ch{channel + 1}'
            channelParams = [ModParam(prefix + mp.name, mp.value) for mp in channelParams]

        params.extend(channelParams)

    return params
