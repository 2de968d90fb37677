"""Build context threaded through the generation pipeline. Holds the options
and the state accumulated over all slaves of one run.
"""
import itertools
from typing import Dict, List, Optional

from ecatconf.configuration import CONFIG
from ecatconf.drivers import DriverTable
from ecatconf.slave import Master, SlaveConfig


_GENERAL = CONFIG['General']


class Options:

    """Generation options.

    Attributes:
        useTypeTable: Match slaves against the static driver table. If False
            every slave is either ``generic`` or ``basic_cia402``.
        extraCiaModParams: Add CiA 402 modParams to all CiA 402 slaves, not
            just ``basic_cia402`` ones.
        genericPdos: Build PDO trees for ``generic`` slaves.
    """

    def __init__(self,
            useTypeTable: bool = _GENERAL['USE_TYPE_TABLE'],
            extraCiaModParams: bool = _GENERAL['EXTRA_CIA_MODPARAMS'],
            genericPdos: bool = _GENERAL['GENERIC_PDOS'],
        ):
        self.useTypeTable = useTypeTable
        self.extraCiaModParams = extraCiaModParams
        self.genericPdos = genericPdos

    def __repr__(self):
        return (
            f'{type(self).__name__}(useTypeTable={self.useTypeTable}, '
            f'extraCiaModParams={self.extraCiaModParams}, genericPdos={self.genericPdos})'
        )


class BuildContext:

    """Options, driver table, master grouping and device name sequence of a
    single run.
    """

    def __init__(self,
            options: Optional[Options] = None,
            table: Optional[DriverTable] = None,
            namePrefix: str = _GENERAL['DEVICE_NAME_PREFIX'],
        ):
        if options is None:
            options = Options()

        if table is None and options.useTypeTable:
            table = DriverTable.default()

        self.options = options
        self.table = table
        self.namePrefix = namePrefix
        self.masters: Dict[str, Master] = {}
        self.sequence = itertools.count(1)

    def next_name(self) -> str:
        """Synthesize next device name (D1, D2, ...)."""
        return f'{self.namePrefix}{next(self.sequence)}'

    def add(self, master: str, config: SlaveConfig):
        """Append slave config to its master group."""
        if master not in self.masters:
            self.masters[master] = Master(master)

        self.masters[master].slaves.append(config)

    def master_list(self) -> List[Master]:
        return list(self.masters.values())
