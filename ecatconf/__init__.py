"""EtherCAT bus introspection to LinuxCNC-EtherCAT configuration generator."""


__author__ = 'lcec'
__version__ = '0.3.0'
