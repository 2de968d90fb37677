import unittest

from ecatconf.configs import LOADERS, guess_config_format, loads_config, parse_string
from ecatconf.utils import update_dict_recursively


YAML_SAMPLE = """General:
  USE_TYPE_TABLE: false  # Everything generic / basic_cia402
  DEVICE_NAME_PREFIX: Drive
Ethercat:
  COMMAND: /opt/etherlab/bin/ethercat
"""

TOML_SAMPLE = """[General]
USE_TYPE_TABLE = false # Everything generic / basic_cia402
DEVICE_NAME_PREFIX = "Drive"

[Ethercat]
COMMAND = "/opt/etherlab/bin/ethercat"
"""

INI_SAMPLE = """[General]
USE_TYPE_TABLE = false
DEVICE_NAME_PREFIX = Drive
[Ethercat]
COMMAND = /opt/etherlab/bin/ethercat
"""

JSON_SAMPLE = """{
    "General": {
        "USE_TYPE_TABLE": false,
        "DEVICE_NAME_PREFIX": "Drive"
    },
    "Ethercat": {
        "COMMAND": "/opt/etherlab/bin/ethercat"
    }
}"""

EXPECTED = {
    'General': {
        'USE_TYPE_TABLE': False,
        'DEVICE_NAME_PREFIX': 'Drive',
    },
    'Ethercat': {
        'COMMAND': '/opt/etherlab/bin/ethercat',
    },
}


class TestHelpers(unittest.TestCase):
    def test_guess_config_format(self):
        self.assertEqual(guess_config_format('ecatconf.yaml'), 'yaml')
        self.assertEqual(guess_config_format('some/dir/ecatconf.TOML'), 'toml')
        self.assertEqual(guess_config_format('ecatconf'), '')

    def test_parse_string(self):
        self.assertEqual(parse_string('42'), 42)
        self.assertEqual(parse_string('0.5'), .5)
        self.assertIs(parse_string('true'), True)
        self.assertEqual(parse_string('ethercat'), 'ethercat')

    def test_all_formats_have_a_loader(self):
        for fmt in ['yaml', 'yml', 'toml', 'ini', 'json']:
            self.assertIn(fmt, LOADERS)


class TestLoadsConfig(unittest.TestCase):
    def test_yaml(self):
        self.assertEqual(loads_config(YAML_SAMPLE, 'yaml'), EXPECTED)

    def test_toml(self):
        self.assertEqual(loads_config(TOML_SAMPLE, 'toml'), EXPECTED)

    def test_ini(self):
        self.assertEqual(loads_config(INI_SAMPLE, 'ini'), EXPECTED)

    def test_json(self):
        self.assertEqual(loads_config(JSON_SAMPLE, 'json'), EXPECTED)

    def test_empty_yaml(self):
        self.assertEqual(loads_config('', 'yaml'), {})

    def test_unknown_format(self):
        with self.assertRaises(ValueError):
            loads_config('', 'xml')

    def test_updating_defaults(self):
        defaults = {
            'General': {'USE_TYPE_TABLE': True, 'GENERIC_PDOS': True, 'DEVICE_NAME_PREFIX': 'D'},
            'Ethercat': {'COMMAND': 'ethercat'},
        }

        update_dict_recursively(defaults, loads_config(YAML_SAMPLE, 'yaml'))

        self.assertEqual(defaults['General'], {
            'USE_TYPE_TABLE': False, 'GENERIC_PDOS': True, 'DEVICE_NAME_PREFIX': 'Drive',
        })
        self.assertEqual(defaults['Ethercat']['COMMAND'], '/opt/etherlab/bin/ethercat')


if __name__ == '__main__':
    unittest.main()
