"""Miscellaneous helpers."""
import collections
from typing import Any, Generator, Iterable


def update_dict_recursively(dct: dict, other: dict, default_factory: type = None) -> dict:
    """Update dictionary recursively in-place.

    Args:
        dct: Dictionary to update.
        other: Other dict to go through.
        default_factory: Default factory for intermediate dicts.

    Returns:
        Mutated input dictionary (for recursive calls).

    Example:
        >>> cfg = {'General': {'USE_TYPE_TABLE': True, 'GENERIC_PDOS': True}}
        ... update_dict_recursively(cfg, {'General': {'GENERIC_PDOS': False}})
        ... print(cfg['General'])
        {'USE_TYPE_TABLE': True, 'GENERIC_PDOS': False}
    """
    if default_factory is None:
        default_factory = type(dct)

    for k, v in other.items():
        if isinstance(v, collections.abc.Mapping):
            dct[k] = update_dict_recursively(dct.get(k, default_factory()), v)
        else:
            dct[k] = v

    return dct


def strip_hex_prefix(text: str) -> str:
    """Hex number without its ``0x`` prefix.

    Example:
        >>> strip_hex_prefix('0x1a00')
        '1a00'
    """
    return text.replace('0x', '')


def duplicates(iterable: Iterable) -> Generator[Any, None, None]:
    """Iterate over elements occurring more than once. Each reported once in
    order of first appearance.

    Example:
        >>> list(duplicates(['a', 'b', 'a', 'c', 'b', 'a']))
        ['a', 'b']
    """
    counts = collections.Counter(iterable)
    for item, count in counts.items():
        if count > 1:
            yield item
