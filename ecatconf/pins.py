"""HAL pin naming. Pin names are derived from PDO entry labels and have to be
unique within a slave.
"""
import re

from ecatconf.logging import get_logger
from ecatconf.slave import SlaveConfig
from ecatconf.utils import duplicates


PIN_RE = re.compile('[^a-z0-9]+')
"""Everything matching gets replaced by a single ``-`` in pin names."""

LOGGER = get_logger(name=__name__, parent=None)


def normalize_pin_name(text: str) -> str:
    """Lower case text and collapse every run of non alphanumeric characters
    to a hyphen.

    Example:
        >>> normalize_pin_name('Status Word 1')
        'status-word-1'
    """
    return PIN_RE.sub('-', text.lower())


def default_pin_name(index: str, subindex: str) -> str:
    """Pin name for entries without label.

    Example:
        >>> default_pin_name('6041', '00')
        'pin-6041-00'
    """
    return f'pin-{index}-{subindex}'


def _number_remaining_duplicates(config: SlaveConfig):
    """Last resort for names still colliding after prefixing (e.g. twice the
    same label inside one PDO). Later occurrences get a running number which
    skips names already taken by other entries.
    """
    remaining = set(duplicates(entry.pinName for entry in config.entries()))
    if not remaining:
        return

    taken = {entry.pinName for entry in config.entries()}
    seen = set()
    for entry in config.entries():
        name = entry.pinName
        if name not in remaining:
            continue

        if name not in seen:
            seen.add(name)
            continue

        number = 2
        while f'{name}-{number}' in taken:
            number += 1

        newName = f'{name}-{number}'
        LOGGER.warning('Pin name %r still not unique. Using %r', name, newName)
        entry.pinName = newName
        taken.add(newName)


def fixup_pin_names(config: SlaveConfig):
    """Disambiguate colliding pin names of a slave in-place. Every duplicate
    gets prefixed with the last word of its PDO label (or the sync manager
    direction if the label is not made of multiple words).
    """
    duplicateNames = set(duplicates(entry.pinName for entry in config.entries()))
    if not duplicateNames:
        return

    for sm in config.syncManagers:
        for pdo in sm.pdos:
            words = pdo.label.split(' ')
            if len(words) > 1:
                prefix = words[-1]
            else:
                prefix = sm.direction or ''

            for entry in pdo.entries:
                if entry.pinName in duplicateNames:
                    newName = normalize_pin_name(f'{prefix} {entry.pinName}'.strip())
                    LOGGER.debug('Renaming duplicate pin %r -> %r', entry.pinName, newName)
                    entry.pinName = newName

    _number_remaining_duplicates(config)
