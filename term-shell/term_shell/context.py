"""
SessionContext - the shared mutable state every command runs against.

The shell owns a single instance and passes it explicitly to each
``execute`` call. Commands read and mutate it in place; execution is
strictly sequential, so no locking is involved.
"""

import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO, TYPE_CHECKING

from .path_manager import PathManager
from .settings import Settings

if TYPE_CHECKING:
    from .registry import CommandRegistry


@dataclass
class SessionContext:
    """
    Session state handed to every command execution.

    This provides commands with access to:
    - Current working directory (through ``paths``)
    - Display settings
    - Input history
    - The command registry (for help, man and where)
    - The quit flag checked by the loop after every dispatch

    Example:
        >>> ctx = SessionContext(paths=PathManager('/tmp'))
        >>> ctx.resolve_path('file.txt')
        '/tmp/file.txt'
        >>> ctx.request_quit()
        >>> ctx.should_quit
        True
    """

    paths: PathManager
    settings: Settings = field(default_factory=Settings)
    history: List[str] = field(default_factory=list)
    commands: Optional['CommandRegistry'] = None
    user_name: Optional[str] = None
    should_quit: bool = False

    # None means the live sys.stdout / sys.stderr at write time
    stdout: Optional[TextIO] = None
    stderr: Optional[TextIO] = None

    @property
    def cwd(self) -> str:
        return self.paths.cwd

    def resolve_path(self, path: str) -> str:
        """Resolve a path against the session's working directory."""
        return self.paths.resolve_path(path)

    def change_directory(self, path: str) -> str:
        """
        Change the session's working directory.

        Raises:
            ShellIOError: If the target is not an existing directory
        """
        return self.paths.change_directory(path)

    def request_quit(self) -> None:
        self.should_quit = True

    def write(self, text: str, end: str = '\n') -> None:
        stream = self.stdout or sys.stdout
        stream.write(text + end)

    def write_error(self, text: str, end: str = '\n') -> None:
        stream = self.stderr or sys.stderr
        stream.write(text + end)

    def __repr__(self):
        return (
            f"SessionContext(cwd={self.cwd!r}, "
            f"history={len(self.history)}, "
            f"should_quit={self.should_quit})"
        )
