"""CoE data types as reported by the ``ethercat`` tool and their HAL pin
type counterparts.
"""
from typing import Dict


BIT: str = 'bit'
U32: str = 'u32'
S32: str = 's32'
U64: str = 'u64'
S64: str = 's64'
FLOAT_IEEE: str = 'float-ieee'
FLOAT_DOUBLE_IEEE: str = 'float-double-ieee'

BLANK: str = 'BLANK'
"""Pin type marker for entries without declared data type. Needs manual
review.
"""

UNMAPPABLE_PREFIX: str = 'unmappable:'
"""Pin type marker prefix for data types we can not map onto a pin type."""

INTEGER_PIN_TYPES: Dict[str, str] = {
    'uint8': U32,
    'uint16': U32,
    'uint32': U32,
    'int8': S32,
    'int16': S32,
    'int32': S32,
    # Not supported by lcec yet but LinuxCNC knows them
    'uint64': U64,
    'int64': S64,
}
"""Integer data type -> pin type."""

FLOAT_TYPES = {'float', 'double'}
BOOL_TYPE = 'bool'


def is_flagged(pinType: str) -> bool:
    """Check if pin type needs manual review."""
    return pinType == BLANK or pinType.startswith(UNMAPPABLE_PREFIX)


def infer_pin_type(dataType: str, bitLen: int) -> str:
    """Pick pin type for a PDO entry.

    Args:
        dataType: Declared object dictionary data type (may be empty).
        bitLen: Bit length of the PDO entry.

    Returns:
        Pin type. Or :data:`BLANK` / ``unmappable:<type>`` markers.

    Example:
        >>> infer_pin_type('uint16', 16)
        'u32'

        >>> infer_pin_type('uint16', 1)
        'bit'
    """
    if bitLen < 8:
        return BIT

    if dataType in INTEGER_PIN_TYPES:
        return INTEGER_PIN_TYPES[dataType]

    if dataType == BOOL_TYPE:
        return BIT if bitLen == 1 else U32

    if dataType in FLOAT_TYPES:
        return FLOAT_IEEE if bitLen == 32 else FLOAT_DOUBLE_IEEE

    if not dataType:
        return BLANK

    return UNMAPPABLE_PREFIX + dataType
