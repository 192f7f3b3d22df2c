"""
Command abstraction shared by builtin and PATH-discovered commands.

The registry stores ``Command`` instances without caring which kind it
holds. A builtin is native logic running inside the shell; a PATH command
(see ``path_discovery.PathCommand``) proxies a spawned child process.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import SessionContext

NO_DESCRIPTION = "No description"
NO_DOCUMENTATION = "this command has no documentation."

CommandFunc = Callable[['SessionContext', List[str]], None]


class Command(ABC):
    """Contract every command satisfies.

    ``execute`` returns nothing on success and raises a ``ShellError``
    subclass on failure. The context is only valid for the duration of the
    call; commands must not keep a reference to it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Dispatch key; stable and non-empty."""

    @property
    def short_description(self) -> Optional[str]:
        return None

    @property
    def documentation(self) -> Optional[str]:
        return None

    @property
    def is_builtin(self) -> bool:
        return True

    @property
    def file_location(self) -> Optional[str]:
        return None

    @abstractmethod
    def execute(self, ctx: 'SessionContext', args: List[str]) -> None:
        """Run the command against the session context."""

    def describe(self) -> str:
        """Short description, or the listing placeholder when there is none."""
        return self.short_description or NO_DESCRIPTION

    def manual(self) -> str:
        """Documentation, or the manual placeholder when there is none."""
        return self.documentation or NO_DOCUMENTATION

    def __repr__(self):
        kind = "builtin" if self.is_builtin else self.file_location
        return f"{type(self).__name__}({self.name!r}, {kind})"


class BuiltinCommand(Command):
    """
    Builtin command backed by a plain function.

    The function receives ``(ctx, args)``. When no documentation is given
    explicitly, the function's docstring is used.

    Example:
        >>> def cmd_hello(ctx, args):
        ...     \"\"\"Usage: hello\"\"\"
        ...     ctx.write("hello")
        >>> cmd = BuiltinCommand('hello', cmd_hello, "say hello")
        >>> cmd.documentation
        'Usage: hello'
    """

    def __init__(self, name: str, func: CommandFunc,
                 description: Optional[str] = None,
                 documentation: Optional[str] = None):
        if not name:
            raise ValueError("command name must not be empty")
        self._name = name
        self._func = func
        self._description = description
        if documentation is None and func.__doc__:
            documentation = inspect.cleandoc(func.__doc__)
        self._documentation = documentation

    @property
    def name(self) -> str:
        return self._name

    @property
    def short_description(self) -> Optional[str]:
        return self._description

    @property
    def documentation(self) -> Optional[str]:
        return self._documentation

    def execute(self, ctx: 'SessionContext', args: List[str]) -> None:
        self._func(ctx, args)
