"""Rule based scraping of line-oriented text produced by the ``ethercat``
command line tool.

Each :class:`LineRule` pairs a compiled regular expression with a handler.
:func:`scrape` walks over the text once and calls the handler of the first
rule matching a given line. Lines without a matching rule are ignored.

Example:
    >>> found = []
    ... rules = [LineRule(re.compile(r'^SM([0-9]+):'), lambda m: found.append(m[1]))]
    ... scrape('SM0: PhysAddr 0x1000\\nfoo\\nSM1: PhysAddr 0x1080', rules)
    ... found
    ['0', '1']
"""
import re
from typing import Callable, Iterable, NamedTuple


class LineRule(NamedTuple):

    """Line pattern and what to do with it."""

    pattern: re.Pattern
    """Compiled regex, matched from the start of the line."""

    handler: Callable[[re.Match], None]
    """Called with the match object."""


def scrape(text: str, rules: Iterable[LineRule]) -> int:
    """Feed every line of text to the first matching rule.

    Args:
        text: Tool output.
        rules: Ordered rules. Earlier rules take precedence.

    Returns:
        Number of matched lines.
    """
    rules = list(rules)
    matched = 0
    for line in text.splitlines():
        for rule in rules:
            match = rule.pattern.match(line)
            if match:
                rule.handler(match)
                matched += 1
                break

    return matched
