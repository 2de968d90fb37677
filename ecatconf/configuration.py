"""Ecatconf configuration and default values. Searches the *current working
directory* for an ``ecatconf.yaml`` (or ``.toml``, ``.ini``, ``.json``)
configuration file. If present default configuration values get updated.

Notes:
  - Command line options take precedence over these values.
"""
import logging
import os
from typing import Dict, Any

from ecatconf.configs import load_config
from ecatconf.utils import update_dict_recursively


CONFIG: Dict[str, Any] = {
    'General': {
        'USE_TYPE_TABLE': True,  # Match slaves against the built-in driver table.
        'EXTRA_CIA_MODPARAMS': False,  # CiA 402 modParams for all CiA 402 slaves, not only basic_cia402.
        'GENERIC_PDOS': True,  # Build PDO trees for generic slaves.
        'DEVICE_NAME_PREFIX': 'D',  # Prefix for synthesized slave names (D1, D2, ...).
    },
    'Ethercat': {
        'COMMAND': 'ethercat',  # IgH ethercat command line tool.
    },
    'Logging': {
        'LEVEL': logging.WARNING,
        'DIRECTORY': None,
        'FILENAME': 'ecatconf.log',
    }
}
"""Global ecatconf default configuration."""

for fp in [
    os.path.join(os.getcwd(), 'ecatconf.yaml'),
    os.path.join(os.getcwd(), 'ecatconf.toml'),
    os.path.join(os.getcwd(), 'ecatconf.ini'),
    os.path.join(os.getcwd(), 'ecatconf.json'),
]:
    if os.path.exists(fp):
        update_dict_recursively(CONFIG, load_config(fp))
