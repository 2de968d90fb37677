"""Configuration generation pipeline. For every slave in discovery order:

1. Probe object dictionary
2. Resolve driver type
3. Synthesize CiA 402 modParams (``basic_cia402`` or on request)
4. Build PDO tree (``generic``)
5. Deduplicate pin names

Then serialize everything at once. Any introspection failure aborts the run
before anything gets written.
"""
from typing import Optional

from ecatconf.coe.cia_402 import cia_enable_mod_params
from ecatconf.context import BuildContext
from ecatconf.document import dumps
from ecatconf.drivers import infer_type
from ecatconf.logging import get_logger
from ecatconf.pdos import build_pdos
from ecatconf.pins import fixup_pin_names
from ecatconf.sdos import is_cia402, read_sdos
from ecatconf.slave import BASIC_CIA402, GENERIC, Slave, SlaveConfig
from ecatconf.topology import read_slaves
from ecatconf.tool import IntrospectionSource


IDENTIFIED_TYPES = {GENERIC, BASIC_CIA402}
"""Driver types which need vid / pid in the config. Dedicated drivers know
their identity already.
"""

LOGGER = get_logger(name=__name__, parent=None)


def configure_slave(source: IntrospectionSource, slave: Slave, ctx: BuildContext) -> SlaveConfig:
    """Infer configuration of a single slave.

    Args:
        source: Introspection source.
        slave: Slave identity record.
        ctx: Build context.

    Returns:
        Slave configuration.
    """
    read_sdos(source, slave)
    options = ctx.options
    driverType = infer_type(slave, ctx.table, options.useTypeTable)
    config = SlaveConfig(slave.slave, driverType, ctx.next_name())
    LOGGER.info('%s -> %s', slave, driverType)

    if driverType == BASIC_CIA402 or (options.extraCiaModParams and is_cia402(slave)):
        config.modParams.extend(cia_enable_mod_params(source, slave))

    if driverType in IDENTIFIED_TYPES:
        config.vid = slave.vendorId or None
        config.pid = slave.productId or None
        config.comment = slave.deviceName

    if driverType == GENERIC and options.genericPdos:
        config.syncManagers = build_pdos(source, slave)

    fixup_pin_names(config)
    return config


def generate(source: IntrospectionSource, ctx: Optional[BuildContext] = None) -> str:
    """Generate configuration document for the whole bus.

    Args:
        source: Introspection source.
        ctx: Build context. Fresh one with default options if not given.

    Returns:
        XML document.
    """
    if ctx is None:
        ctx = BuildContext()

    for slave in read_slaves(source):
        ctx.add(slave.master, configure_slave(source, slave, ctx))

    return dumps(ctx.master_list())
