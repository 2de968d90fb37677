"""Loading config files. Currently supported are:
    - YAML
    - TOML
    - INI
    - JSON

All formats get mapped onto plain nested dictionaries so they can be merged
into :data:`ecatconf.configuration.CONFIG`.

Example:
    >>> loads_config('General:\\n  USE_TYPE_TABLE: false\\n', 'yaml')
    {'General': {'USE_TYPE_TABLE': False}}
"""
import io
import json
import os
from typing import Any, Callable, Dict, Union

import configobj
import ruamel.yaml
import tomlkit


def guess_config_format(filepath: str) -> str:
    """Guess config format from file extension.

    Args:
        filepath: Path to guess from.

    Returns:
        Config format.

    Example:
        >>> guess_config_format('this/is/it.json')
        'json'
    """
    _, ext = os.path.splitext(filepath)
    return ext[1:].lower()


def parse_string(string: str) -> Union[str, object]:
    """Try to parse some JSON data from string. INI values are untyped."""
    for ctor in [int, float]:
        try:
            return ctor(string)
        except ValueError:
            pass

    try:
        return json.loads(string)
    except json.JSONDecodeError:
        pass

    return string


def _parse_section(section) -> dict:
    """Convert configobj section to dict with parsed values."""
    dct = {}
    for key, value in section.items():
        if isinstance(value, configobj.Section):
            dct[key] = _parse_section(value)
        elif isinstance(value, list):
            dct[key] = [parse_string(v) for v in value]
        else:
            dct[key] = parse_string(value)

    return dct


def _loads_yaml(string: str) -> dict:
    yaml = ruamel.yaml.YAML(typ='safe')
    data = yaml.load(string)
    if data is None:
        return {}

    return data


def _loads_toml(string: str) -> dict:
    return tomlkit.loads(string).unwrap()


def _loads_ini(string: str) -> dict:
    buf = io.StringIO(string)
    return _parse_section(configobj.ConfigObj(buf))


def _loads_json(string: str) -> dict:
    return json.loads(string)


LOADERS: Dict[str, Callable[[str], Dict[str, Any]]] = {
    'yaml': _loads_yaml,
    'yml': _loads_yaml,
    'toml': _loads_toml,
    'ini': _loads_ini,
    'json': _loads_json,
}
"""Config format -> loader function."""


def loads_config(string: str, configFormat: str) -> dict:
    """Load config from string.

    Args:
        string: Config file content.
        configFormat: One of :data:`LOADERS`.

    Returns:
        Config dictionary.
    """
    if configFormat not in LOADERS:
        raise ValueError(f'No config implementation for {configFormat}!')

    return LOADERS[configFormat](string)


def load_config(filepath: str) -> dict:
    """Load config file. Format is guessed from the file extension."""
    with open(filepath) as fp:
        return loads_config(fp.read(), guess_config_format(filepath))
