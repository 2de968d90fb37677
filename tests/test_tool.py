import os
import shutil
import tempfile
import unittest

from ecatconf.error import IntrospectionError
from ecatconf.tool import CapturedTool, EthercatTool


class TestEthercatTool(unittest.TestCase):
    def test_missing_executable(self):
        tool = EthercatTool('/nonexistent/bin/ethercat')

        with self.assertRaises(IntrospectionError):
            tool.slaves()

    @unittest.skipUnless(shutil.which('false'), 'needs false')
    def test_non_zero_exit_status(self):
        with self.assertRaises(IntrospectionError):
            EthercatTool('false').sdos('0', '1')

    @unittest.skipUnless(shutil.which('echo'), 'needs echo')
    def test_command_lines(self):
        tool = EthercatTool('echo')

        self.assertEqual(tool.sdos('0', '3'), '-m 0 sdos -p 3\n')
        self.assertEqual(tool.pdos('1', '2'), '-m 1 pdos -p 2\n')
        self.assertEqual(tool.upload('0', '3', 0x6d02, 0), '-m 0 upload -p 3 0x6d02 0\n')


class TestCapturedTool(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.tool = CapturedTool(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, filename, content):
        with open(os.path.join(self.tmpdir.name, filename), 'w') as fp:
            fp.write(content)

    def test_file_names(self):
        self.write('slaves.txt', 'slaves')
        self.write('sdos-0-3.txt', 'sdos')
        self.write('pdos-0-3.txt', 'pdos')
        self.write('upload-0-3-0x6502-0.txt', '0x00000001 1')

        self.assertEqual(self.tool.slaves(), 'slaves')
        self.assertEqual(self.tool.sdos('0', '3'), 'sdos')
        self.assertEqual(self.tool.pdos('0', '3'), 'pdos')
        self.assertEqual(self.tool.upload('0', '3', 0x6502, 0), '0x00000001 1')

    def test_missing_capture(self):
        with self.assertRaises(IntrospectionError):
            self.tool.sdos('0', '1')


if __name__ == '__main__':
    unittest.main()
