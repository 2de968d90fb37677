import unittest

from ecatconf.topology import parse_slaves, DEVICE_NAME_RE, BOUNDARY_RE


SLAVES = """=== Master 0, Slave 0 ===
Device: Main
State: PREOP
Flag: +
Identity:
  Vendor Id:       0x00000002
  Product code:    0x044c2c52
  Revision number: 0x00110000
  Serial number:   0x00000000
General:
  Group: Coupler
  Image name: 
  Order number: EK1100
  Device name: EK1100 EtherCAT-Koppler (2A E-Bus)
=== Master 0, Slave 1 ===
Device: Main
State: PREOP
Identity:
  Vendor Id:       0x00000a88
  Product code:    0x0a880002
  Revision number: 0x00000002
=== Master 1, Slave 0 ===
Identity:
  Vendor Id:       0x0000066f
  Product code:    0x60380004
  Revision number: 0x00010000
General:
  Device name: MADHT1505BA1
"""


class TestRegexes(unittest.TestCase):
    def test_boundary(self):
        match = BOUNDARY_RE.match('=== Master 12, Slave 345 ===')

        self.assertEqual(match.groups(), ('12', '345'))
        self.assertIsNone(BOUNDARY_RE.match('=== Master 0, Slave 1 === '))

    def test_device_name_can_be_empty(self):
        self.assertEqual(DEVICE_NAME_RE.match('  Device name: ')[1], '')


class TestParseSlaves(unittest.TestCase):
    def test_identity_fields(self):
        first = parse_slaves(SLAVES)[0]

        self.assertEqual(first.master, '0')
        self.assertEqual(first.slave, '0')
        self.assertEqual(first.vendorId, '0x00000002')
        self.assertEqual(first.productId, '0x044c2c52')
        self.assertEqual(first.revision, '0x00110000')
        self.assertEqual(first.deviceName, 'EK1100 EtherCAT-Koppler (2A E-Bus)')

    def test_slave_without_device_name_is_closed_by_next_boundary(self):
        slaves = parse_slaves(SLAVES)

        self.assertEqual([(s.master, s.slave) for s in slaves], [('0', '0'), ('0', '1'), ('1', '0')])
        self.assertEqual(slaves[1].vendorId, '0x00000a88')
        self.assertEqual(slaves[1].deviceName, '')

    def test_slave_without_device_name_at_end_of_input_is_kept(self):
        text = SLAVES + '=== Master 1, Slave 1 ===\n  Vendor Id:       0x00000001\n'

        slaves = parse_slaves(text)

        self.assertEqual(len(slaves), 4)
        self.assertEqual(slaves[-1].vendorId, '0x00000001')

    def test_no_slaves(self):
        self.assertEqual(parse_slaves(''), [])
        self.assertEqual(parse_slaves('  Vendor Id:       0x00000001\n'), [])


if __name__ == '__main__':
    unittest.main()
