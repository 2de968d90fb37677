"""Sources of bus introspection text. :class:`EthercatTool` queries the live
bus through the IgH ``ethercat`` command line tool. :class:`CapturedTool`
replays dumps captured earlier (e.g. on the machine with the bus) from a
directory.

Every request is blocking. Any failure raises an
:class:`ecatconf.error.IntrospectionError` which aborts the whole run.
"""
import abc
import os
import subprocess
from typing import List

from ecatconf.configuration import CONFIG
from ecatconf.error import IntrospectionError
from ecatconf.logging import get_logger


_COMMAND = CONFIG['Ethercat']['COMMAND']


class IntrospectionSource(abc.ABC):

    """Provider for the different ``ethercat`` tool outputs."""

    @abc.abstractmethod
    def slaves(self) -> str:
        """Verbose bus topology listing (``ethercat -v slaves``)."""

    @abc.abstractmethod
    def sdos(self, master: str, slave: str) -> str:
        """Object dictionary listing of a slave (``ethercat sdos``)."""

    @abc.abstractmethod
    def upload(self, master: str, slave: str, index: int, subindex: int) -> str:
        """Read a single object dictionary value (``ethercat upload``)."""

    @abc.abstractmethod
    def pdos(self, master: str, slave: str) -> str:
        """Sync manager / PDO listing of a slave (``ethercat pdos``)."""


class EthercatTool(IntrospectionSource):

    """Runs the ``ethercat`` command line tool."""

    def __init__(self, command: str = _COMMAND):
        """
        Args:
            command: Path or name of the ethercat executable.
        """
        self.command = command
        self.logger = get_logger('EthercatTool')

    def run(self, *args: str) -> str:
        """Run tool with arguments and return its stdout.

        Raises:
            IntrospectionError: If the tool could not be started or exited
                with a non-zero status.
        """
        cmd: List[str] = [self.command, *args]
        self.logger.debug('Running %s', ' '.join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=True,
            )
        except FileNotFoundError as err:
            raise IntrospectionError(f'{self.command!r} not found. Is the EtherCAT master installed?') from err
        except subprocess.CalledProcessError as err:
            msg = (err.stderr or '').strip()
            raise IntrospectionError(f'{" ".join(cmd)!r} failed with exit status {err.returncode}: {msg}') from err
        except OSError as err:
            raise IntrospectionError(f'Could not run {" ".join(cmd)!r}: {err}') from err

        return proc.stdout

    def slaves(self):
        return self.run('-v', 'slaves')

    def sdos(self, master, slave):
        return self.run('-m', master, 'sdos', '-p', slave)

    def upload(self, master, slave, index, subindex):
        return self.run('-m', master, 'upload', '-p', slave, f'0x{index:04x}', str(subindex))

    def pdos(self, master, slave):
        return self.run('-m', master, 'pdos', '-p', slave)

    def __str__(self):
        return f'{type(self).__name__}({self.command!r})'


class CapturedTool(IntrospectionSource):

    """Replays captured tool output from a directory.

    Expected files (one per request)::

        slaves.txt
        sdos-<master>-<slave>.txt
        pdos-<master>-<slave>.txt
        upload-<master>-<slave>-0x<index>-<subindex>.txt

    Example:
        Capturing on the target machine::

            ethercat -v slaves > slaves.txt
            ethercat -m 0 sdos -p 3 > sdos-0-3.txt
            ethercat -m 0 pdos -p 3 > pdos-0-3.txt
            ethercat -m 0 upload -p 3 0x6502 0 > upload-0-3-0x6502-0.txt
    """

    def __init__(self, directory: str):
        self.directory = directory

    def read(self, filename: str) -> str:
        """Read captured file.

        Raises:
            IntrospectionError: Missing or unreadable capture.
        """
        filepath = os.path.join(self.directory, filename)
        try:
            with open(filepath) as fp:
                return fp.read()
        except OSError as err:
            raise IntrospectionError(f'Could not read capture {filepath!r}: {err}') from err

    def slaves(self):
        return self.read('slaves.txt')

    def sdos(self, master, slave):
        return self.read(f'sdos-{master}-{slave}.txt')

    def upload(self, master, slave, index, subindex):
        return self.read(f'upload-{master}-{slave}-0x{index:04x}-{subindex}.txt')

    def pdos(self, master, slave):
        return self.read(f'pdos-{master}-{slave}.txt')

    def __str__(self):
        return f'{type(self).__name__}({self.directory!r})'
