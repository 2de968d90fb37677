"""Command line interface. Generates a LinuxCNC-EtherCAT configuration from
the live bus and writes it to stdout.

Example:
    $ python -m ecatconf > ethercat-conf.xml
    $ python -m ecatconf --no-typedb --captured ./capture
"""
import argparse
import logging
import sys

from ecatconf import __version__
from ecatconf.configuration import CONFIG
from ecatconf.context import BuildContext, Options
from ecatconf.error import EcatConfError
from ecatconf.generator import generate
from ecatconf.logging import get_logger, setup_logging
from ecatconf.tool import CapturedTool, EthercatTool


LOGGER = get_logger('cli')


def cli(argv=None) -> argparse.Namespace:
    """Command line interface."""
    general = CONFIG['General']
    parser = argparse.ArgumentParser(
        prog='ecatconf',
        description='Create a LinuxCNC-EtherCAT XML config from the devices on the EtherCAT bus',
    )
    parser.add_argument('--typedb', action=argparse.BooleanOptionalAction,
                        default=general['USE_TYPE_TABLE'],
                        help="Use the built-in list of supported EtherCAT device types. If not, all devices will be 'generic' or 'basic_cia402'")
    parser.add_argument('--extra-cia-modparams', action=argparse.BooleanOptionalAction,
                        default=general['EXTRA_CIA_MODPARAMS'],
                        help="Add CiA 402 <modParam>s to all CiA 402 devices, not just 'basic_cia402'")
    parser.add_argument('--generic-pdos', action=argparse.BooleanOptionalAction,
                        default=general['GENERIC_PDOS'],
                        help='Attempt to build PDOs for generic devices')
    parser.add_argument('--ethercat', default=CONFIG['Ethercat']['COMMAND'],
                        help='ethercat command line tool')
    parser.add_argument('--captured', metavar='DIRECTORY', default=None,
                        help='Read captured ethercat tool output from directory instead of querying the bus')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='More log output (-vv for debug)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = cli(argv)
    level = CONFIG['Logging']['LEVEL']
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG

    setup_logging(level)

    if args.captured:
        source = CapturedTool(args.captured)
    else:
        source = EthercatTool(args.ethercat)

    options = Options(
        useTypeTable=args.typedb,
        extraCiaModParams=args.extra_cia_modparams,
        genericPdos=args.generic_pdos,
    )
    LOGGER.info('Generating config from %s with %s', source, options)
    try:
        document = generate(source, BuildContext(options))
    except EcatConfError as err:
        LOGGER.error('%s', err)
        return 1

    sys.stdout.write(document)
    return 0


if __name__ == '__main__':
    sys.exit(main())
