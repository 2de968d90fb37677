import unittest

from ecatconf.coe.cia_402 import (
    cia_enable_mod_params, feature_params, mode_params, parse_register,
)
from ecatconf.coe.cia402_definitions import OPTIONAL_FEATURES, SUPPORTED_MODE_BITS
from ecatconf.error import RegisterValueError
from ecatconf.slave import ModParam, Slave
from ecatconf.tool import IntrospectionSource


class UploadSource(IntrospectionSource):

    """Answers register uploads only."""

    def __init__(self, registers):
        self.registers = registers
        self.requests = []

    def slaves(self):
        raise NotImplementedError

    def sdos(self, master, slave):
        raise NotImplementedError

    def upload(self, master, slave, index, subindex):
        self.requests.append((index, subindex))
        return self.registers[index]

    def pdos(self, master, slave):
        raise NotImplementedError


def slave_with(*keys):
    slave = Slave('0', '3')
    slave.sdos = {key: 'uint32' for key in keys}
    return slave


def names(params):
    return [mp.name for mp in params]


class TestParseRegister(unittest.TestCase):
    def test_first_token_is_the_value(self):
        self.assertEqual(parse_register('0x000003ed 1005\n'), 0x3ed)
        self.assertEqual(parse_register('42'), 42)

    def test_garbage_is_an_error(self):
        with self.assertRaises(RegisterValueError):
            parse_register('Failed to upload SDO')

        with self.assertRaises(RegisterValueError):
            parse_register('')


class TestModeParams(unittest.TestCase):
    def test_bit_4_is_not_used(self):
        self.assertEqual([mb.bit for mb in SUPPORTED_MODE_BITS], [0, 1, 2, 3, 5, 6, 7, 8, 9])
        self.assertEqual(mode_params(1 << 4), [])

    def test_all_modes(self):
        self.assertEqual(names(mode_params(0b1111111111)), [
            'enablePP', 'enableVL', 'enablePV', 'enableTQ', 'enableHM',
            'enableIP', 'enableCSP', 'enableCSV', 'enableCST',
        ])

    def test_values_are_true(self):
        self.assertEqual(mode_params(0b1), [ModParam('enablePP', 'true')])


class TestFeatureParams(unittest.TestCase):
    def test_feature_table(self):
        self.assertEqual(len(OPTIONAL_FEATURES), 47)

    def test_only_present_objects_are_enabled(self):
        slave = slave_with('0x6077:00', '0x6046:02')

        self.assertEqual(names(feature_params(slave)), ['enableActualTorque', 'enableVLMaximum'])

    def test_digital_io_comes_with_channel_count(self):
        slave = slave_with('0x60fd:00', '0x60fe:01')

        self.assertEqual(feature_params(slave), [
            ModParam('enableDigitalInput', 'true'),
            ModParam('digitalInChannels', '16'),
            ModParam('enableDigitalOutput', 'true'),
            ModParam('digitalOutChannels', '16'),
        ])

    def test_wrong_subindex_does_not_count(self):
        self.assertEqual(feature_params(slave_with('0x60fe:00')), [])

    def test_shared_object(self):
        slave = slave_with('0x60c6:00')

        self.assertEqual(names(feature_params(slave)), ['enableMaximumAcceleration', 'enableMaximumDeceleration'])

    def test_second_channel_uses_offset_addresses(self):
        slave = slave_with('0x6077:00', '0x6877:00', '0x6878:00')

        self.assertEqual(names(feature_params(slave, channel=1)), ['enableActualCurrent', 'enableActualTorque'])


class TestCiaEnableModParams(unittest.TestCase):
    def test_single_channel_has_no_prefix(self):
        slave = slave_with('0x6040:00', '0x6041:00', '0x6502:00', '0x6077:00')
        source = UploadSource({0x6502: '0x0000000d 13\n'})

        params = cia_enable_mod_params(source, slave)

        self.assertEqual(names(params), ['enablePP', 'enablePV', 'enableTQ', 'enableActualTorque'])
        self.assertEqual(source.requests, [(0x6502, 0)])

    def test_multiple_channels_are_prefixed(self):
        slave = slave_with('0x6502:00', '0x6d02:00', '0x6077:00')
        source = UploadSource({
            0x6502: '0x00000001 1\n',
            0x6d02: '0x00000080 128\n',
        })

        params = cia_enable_mod_params(source, slave)

        self.assertEqual(params, [
            ModParam('ciaChannels', '2'),
            ModParam('ch1enablePP', 'true'),
            ModParam('ch1enableActualTorque', 'true'),
            ModParam('ch2enableCSP', 'true'),
        ])
        self.assertEqual(source.requests, [(0x6502, 0), (0x6d02, 0)])

    def test_no_channels_no_params(self):
        source = UploadSource({})

        self.assertEqual(cia_enable_mod_params(source, slave_with('0x6040:00')), [])
        self.assertEqual(source.requests, [])


if __name__ == '__main__':
    unittest.main()
