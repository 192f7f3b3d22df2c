"""Command registry: ordered storage, lookup and dispatch.

This module provides the CommandRegistry class which handles:
- Storing builtin and PATH-discovered commands in registration order
- Looking up commands by name (first registered wins)
- Tokenizing a raw input line and dispatching it
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple, TYPE_CHECKING

from .command import Command
from .exceptions import CommandError, CommandNotFoundError, ShellError
from .path_discovery import discover_search_path

if TYPE_CHECKING:
    from .context import SessionContext

logger = logging.getLogger(__name__)


def tokenize(raw_line: str) -> Tuple[str, List[str]]:
    """
    Split one input line into a command name and its arguments.

    The line is split on single spaces and each token is trimmed, so
    repeated spaces produce empty arguments.

    Examples:
        >>> tokenize('ls -a src')
        ('ls', ['-a', 'src'])
        >>> tokenize('pwd')
        ('pwd', [])
    """
    parts = [part.strip() for part in raw_line.split(' ')]
    return parts[0], parts[1:]


class CommandRegistry:
    """Registry of every command the shell can run.

    Builtins are registered first and PATH-discovered commands after them,
    so a builtin always shadows an executable with the same name. The
    registry is only appended to during startup.
    """

    def __init__(self, commands: Iterable[Command] = ()):
        self._commands: List[Command] = []
        for command in commands:
            self.register(command)

    def register(self, command: Command) -> None:
        """Append a command. Names are not checked for uniqueness."""
        self._commands.append(command)

    def register_all(self, commands: Iterable[Command]) -> None:
        for command in commands:
            self.register(command)

    def register_path(self, value: Optional[str] = None) -> int:
        """
        Append every command discovered on the search path.

        Args:
            value: PATH-style string; defaults to the ``PATH`` environment variable

        Returns:
            Number of commands added
        """
        discovered = discover_search_path(value)
        self.register_all(discovered)
        return len(discovered)

    def lookup(self, name: str) -> Optional[Command]:
        """
        Find the first registered command with exactly this name.

        Args:
            name: Command name (case-sensitive)

        Returns:
            The command, or None if nothing matches
        """
        for command in self._commands:
            if command.name == name:
                return command
        return None

    def dispatch(self, ctx: 'SessionContext', name: str, args: List[str]) -> None:
        """
        Resolve a command by name and execute it.

        Raises:
            CommandNotFoundError: If no command has this name
            ShellError: Whatever the command itself raises, unchanged
            CommandError: If the command fails with a non-shell exception
        """
        command = self.lookup(name)
        if command is None:
            raise CommandNotFoundError(name)

        logger.debug("dispatching %r with args %r", name, args)
        try:
            command.execute(ctx, args)
        except ShellError:
            raise
        except Exception as e:
            logger.exception("command %r failed", name)
            raise CommandError(e) from e

    def try_dispatch(self, ctx: 'SessionContext', raw_line: str) -> None:
        """
        Tokenize a raw input line and dispatch it.

        An empty line prints a blank line and succeeds without dispatching.
        """
        if not raw_line:
            ctx.write('')
            return

        name, args = tokenize(raw_line)
        self.dispatch(ctx, name, args)

    def builtins(self) -> List[Command]:
        return [command for command in self._commands if command.is_builtin]

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None

    def __repr__(self) -> str:
        return f"CommandRegistry({len(self._commands)} commands)"
