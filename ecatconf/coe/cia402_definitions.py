"""CiA 402 object dictionary addresses and the capability tables used for
enabling optional driver features.
"""
from typing import NamedTuple, Tuple


CONTROLWORD: int = 0x6040
"""Controlword. :hex:"""

STATUSWORD: int = 0x6041
"""Statusword. :hex:"""

SUPPORTED_DRIVE_MODES: int = 0x6502
"""Supported operating modes for drive. :hex:"""

SUPPORTED_DRIVE_MODES_OFFSET: int = 0x502
"""Supported drive modes relative to the channel base. :hex:"""

PROFILE_BASE: int = 0x6000
"""First CiA 402 object of channel 0. :hex:"""

CHANNEL_OFFSET: int = 0x800
"""Address stride between the CiA 402 objects of consecutive channels. :hex:"""

MAX_CHANNELS: int = 8
"""Maximum number of channels (axes) we look for."""

DIGITAL_CHANNELS: int = 16
"""Default number of digital in / out pins for CiA 402 digital IO."""


def channel_base(channel: int) -> int:
    """Base address of a channel's CiA 402 objects (0-indexed channel).

    Example:
        >>> hex(channel_base(1))
        '0x6800'
    """
    return PROFILE_BASE + CHANNEL_OFFSET * channel


class OperationModeBit(NamedTuple):

    """Bit in :data:`SUPPORTED_DRIVE_MODES` and the mode tag enabled by it."""

    bit: int
    mode: str


SUPPORTED_MODE_BITS: Tuple[OperationModeBit, ...] = (
    OperationModeBit(0, 'PP'),  # Profile position
    OperationModeBit(1, 'VL'),  # Velocity
    OperationModeBit(2, 'PV'),  # Profile velocity
    OperationModeBit(3, 'TQ'),  # Profile torque
    # Bit 4 reserved
    OperationModeBit(5, 'HM'),  # Homing
    OperationModeBit(6, 'IP'),  # Interpolated position
    OperationModeBit(7, 'CSP'),  # Cyclic synchronous position
    OperationModeBit(8, 'CSV'),  # Cyclic synchronous velocity
    OperationModeBit(9, 'CST'),  # Cyclic synchronous torque
)
"""Supported drive modes bits in ascending order."""


class OptionalFeature(NamedTuple):

    """Optional CiA 402 object. Offset relative to :func:`channel_base`."""

    name: str
    offset: int
    subindex: int


# Objects which are mandatory if the device supports the corresponding mode
# (e.g. actual position) are not listed.
OPTIONAL_FEATURES: Tuple[OptionalFeature, ...] = (
    OptionalFeature('enableActualCurrent', 0x78, 0),
    OptionalFeature('enableActualFollowingError', 0xf4, 0),
    OptionalFeature('enableActualTorque', 0x77, 0),
    OptionalFeature('enableActualVelocitySensor', 0x69, 0),
    OptionalFeature('enableActualVoltage', 0x79, 0),
    OptionalFeature('enableControlEffort', 0xfa, 0),
    OptionalFeature('enableDemandVL', 0x43, 0),
    OptionalFeature('enableDigitalInput', 0xfd, 0),
    OptionalFeature('enableDigitalOutput', 0xfe, 1),
    OptionalFeature('enableErrorCode', 0x3f, 0),
    OptionalFeature('enableFollowingErrorTimeout', 0x66, 0),
    OptionalFeature('enableFollowingErrorWindow', 0x65, 0),
    OptionalFeature('enableHomeAccel', 0x9a, 0),
    OptionalFeature('enableInterpolationTimePeriod', 0xc2, 1),
    OptionalFeature('enableMaximumAcceleration', 0xc6, 0),
    OptionalFeature('enableMaximumCurrent', 0x73, 0),
    OptionalFeature('enableMaximumDeceleration', 0xc6, 0),
    OptionalFeature('enableMaximumMotorRPM', 0x80, 0),
    OptionalFeature('enableMaximumSlippage', 0xf8, 0),
    OptionalFeature('enableMaximumTorque', 0x72, 0),
    OptionalFeature('enableMotorRatedCurrent', 0x75, 0),
    OptionalFeature('enableMotorRatedTorque', 0x76, 0),
    OptionalFeature('enablePolarity', 0x7e, 0),
    OptionalFeature('enablePositionDemand', 0x62, 0),
    OptionalFeature('enablePositioningTime', 0x68, 0),
    OptionalFeature('enablePositioningWindow', 0x67, 0),
    OptionalFeature('enableProbeStatus', 0xb9, 0),
    OptionalFeature('enableProfileAccel', 0x83, 0),
    OptionalFeature('enableProfileDecel', 0x84, 0),
    OptionalFeature('enableProfileEndVelocity', 0x82, 0),
    OptionalFeature('enableProfileMaxVelocity', 0x7f, 0),
    OptionalFeature('enableProfileVelocity', 0x81, 0),
    OptionalFeature('enableTargetTorque', 0x71, 0),
    OptionalFeature('enableTargetVL', 0x42, 0),
    OptionalFeature('enableTorqueDemand', 0x74, 0),
    OptionalFeature('enableTorqueProfileType', 0x88, 0),
    OptionalFeature('enableTorqueSlope', 0x87, 0),
    OptionalFeature('enableVLAccel', 0x48, 0),
    OptionalFeature('enableVLDecel', 0x49, 0),
    OptionalFeature('enableVLMaximum', 0x46, 2),
    OptionalFeature('enableVLMinimum', 0x46, 1),
    OptionalFeature('enableVelocityDemand', 0x6b, 0),
    OptionalFeature('enableVelocityErrorTime', 0x6e, 0),
    OptionalFeature('enableVelocityErrorWindow', 0x6d, 0),
    OptionalFeature('enableVelocitySensorSelector', 0x6a, 0),
    OptionalFeature('enableVelocityThresholdTime', 0x70, 0),
    OptionalFeature('enableVelocityThresholdWindow', 0x6f, 0),
)
"""Optional CiA 402 objects -> enable modParam name."""

COMPANION_PARAMS = {
    'enableDigitalInput': ('digitalInChannels', str(DIGITAL_CHANNELS)),
    'enableDigitalOutput': ('digitalOutChannels', str(DIGITAL_CHANNELS)),
}
"""Additional modParam emitted next to some enabled features."""

CHANNELS_PARAM: str = 'ciaChannels'
"""ModParam name for the number of channels of multi axis drives."""
