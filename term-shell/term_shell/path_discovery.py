"""PATH discovery: turn executable files on the search path into commands.

Each directory is scanned non-recursively. Every regular, executable file
becomes a ``PathCommand`` whose name is the filename with its last extension
stripped (``run.sh`` -> ``run``, ``tool.tar.gz`` -> ``tool.tar``). A
directory that cannot be scanned is skipped; discovery never aborts startup.
"""

import logging
import os
import subprocess
import sys
from typing import Iterator, List, Optional, TYPE_CHECKING

from .command import Command

if TYPE_CHECKING:
    from .context import SessionContext

logger = logging.getLogger(__name__)

SANDBOX_FLAG = '--trs-sandbox'

PATH_COMMAND_DOCUMENTATION = """\
This command is a file located on the filesystem.

custom-options:
  --trs-sandbox: run the command without any environment variables.
                 The flag itself is not passed to the command."""


def command_name_for(filename: str) -> str:
    """
    Derive a command name from a file name.

    Strips everything from the last ``.`` on. A name that would end up
    empty (``.hidden``) is kept verbatim.

    Examples:
        >>> command_name_for('run.sh')
        'run'
        >>> command_name_for('archive.tar.gz')
        'archive.tar'
        >>> command_name_for('deploy')
        'deploy'
    """
    filename = os.path.basename(filename)
    stem, dot, _ = filename.rpartition('.')
    if dot and stem:
        return stem
    return filename


def _windows_executable(name: str) -> bool:
    extensions = os.environ.get('PATHEXT', '.COM;.EXE;.BAT;.CMD').lower().split(';')
    return os.path.splitext(name)[1].lower() in extensions


def is_executable(entry: os.DirEntry) -> bool:
    """Check that a directory entry is a regular file the user may execute."""
    try:
        if not entry.is_file():
            return False
    except OSError:
        return False
    if sys.platform == 'win32':
        return _windows_executable(entry.name)
    return os.access(entry.path, os.X_OK)


class PathCommand(Command):
    """
    Command proxying an executable file found on the search path.

    Executing it spawns the file as a child process that inherits the
    shell's stdin/stdout/stderr, waits for it, and reports the exit status.
    A non-zero status or a failed spawn is reported, never raised.
    """

    def __init__(self, location: str, name: Optional[str] = None):
        self._location = location
        self._name = name or command_name_for(location)

    @property
    def name(self) -> str:
        return self._name

    @property
    def documentation(self) -> Optional[str]:
        return PATH_COMMAND_DOCUMENTATION

    @property
    def is_builtin(self) -> bool:
        return False

    @property
    def file_location(self) -> Optional[str]:
        return self._location

    def build_invocation(self, args: List[str]):
        """
        Split raw arguments into the child's argv and environment.

        Returns:
            Tuple of (argv, env). ``env`` is ``{}`` when the sandbox flag was
            given, otherwise ``None`` (inherit the shell's environment).
        """
        argv = [self._location]
        env = None
        for arg in args:
            if arg == SANDBOX_FLAG:
                env = {}
                continue
            argv.append(arg)
        return argv, env

    def execute(self, ctx: 'SessionContext', args: List[str]) -> None:
        argv, env = self.build_invocation(args)
        logger.debug("spawning %s (sandboxed=%s)", argv, env is not None)

        # the child writes to the real terminal, anything buffered goes first
        sys.stdout.flush()
        try:
            completed = subprocess.run(argv, env=env, cwd=ctx.cwd)
            status = completed.returncode
            if status < 0:
                # killed by a signal, no exit code
                status = -1
        except OSError as e:
            print(f"failed to execute command ({e})")
            status = -1

        logger.debug("%s exited with status %d", self._name, status)
        print(f"{self._name} exited with status ({status})")


def iter_search_path(value: Optional[str] = None) -> Iterator[str]:
    """Yield the non-empty directories of a PATH-style string."""
    if value is None:
        value = os.environ.get('PATH', '')
    for directory in value.split(os.pathsep):
        if directory:
            yield directory


def discover_directory(directory: str) -> List[PathCommand]:
    """
    Build commands for every executable file directly inside a directory.

    Args:
        directory: Directory to scan (not recursed into)

    Returns:
        Commands in directory-listing order; empty when the directory cannot
        be opened
    """
    commands = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if is_executable(entry):
                    commands.append(PathCommand(entry.path))
    except OSError as e:
        logger.debug("skipping search path entry %r: %s", directory, e)
        return []
    return commands


def discover_search_path(value: Optional[str] = None) -> List[PathCommand]:
    """
    Discover commands across every directory of the search path.

    Args:
        value: PATH-style string; defaults to the ``PATH`` environment variable

    Returns:
        Commands in search-path order
    """
    commands = []
    for directory in iter_search_path(value):
        commands.extend(discover_directory(directory))
    logger.info("discovered %d commands on the search path", len(commands))
    return commands
