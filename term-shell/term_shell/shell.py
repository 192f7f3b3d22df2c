"""
Shell - startup wiring and the interactive execution loop.

Startup order matters: builtins are registered before the search path is
scanned, so a builtin always shadows an executable of the same name.
"""

import logging
import os
from typing import Optional

from .commands import load_all_commands
from .context import SessionContext
from .exceptions import ShellError, ShellInitError
from .input import LineReader
from .path_manager import PathManager
from .prompt import build_prompt
from .registry import CommandRegistry
from .settings import Settings, current_user_name, load_settings

logger = logging.getLogger(__name__)


class Shell:
    """
    Interactive command shell.

    Args:
        search_path: PATH-style string to discover commands from; defaults
            to the ``PATH`` environment variable
        discover_path: If False, only builtins are registered
        settings: Display settings; loaded from disk when omitted
        reader: Line reader; a prompt_toolkit-backed one when omitted

    Raises:
        ShellInitError: If the initial working directory cannot be determined
    """

    def __init__(self, search_path: Optional[str] = None, discover_path: bool = True,
                 settings: Optional[Settings] = None,
                 reader: Optional[LineReader] = None):
        try:
            initial_cwd = os.getcwd()
        except OSError as e:
            raise ShellInitError(f"cannot determine the working directory: {e}")

        self.commands = CommandRegistry(load_all_commands())
        builtin_count = len(self.commands)
        if discover_path:
            self.commands.register_path(search_path)
        logger.info("registered %d builtins and %d search path commands",
                    builtin_count, len(self.commands) - builtin_count)

        self.reader = reader or LineReader()
        self.context = SessionContext(
            paths=PathManager(initial_cwd),
            settings=settings if settings is not None else load_settings(),
            history=self.reader.history,
            commands=self.commands,
            user_name=current_user_name(),
        )

    def execute(self, line: str) -> bool:
        """
        Dispatch one line, reporting any error.

        Returns:
            True if the line ran without error
        """
        try:
            self.commands.try_dispatch(self.context, line)
        except ShellError as e:
            logger.info("command failed: %s", e)
            self.context.write_error(f"ERROR: {e}")
            return False
        except KeyboardInterrupt:
            self.context.write('')
            return False
        return True

    def read_line(self) -> Optional[str]:
        """
        Prompt for one line.

        Returns:
            The line, or None when it was discarded with Ctrl-C
        """
        try:
            return self.reader.get(build_prompt(self.context))
        except KeyboardInterrupt:
            self.context.write('')
            return None
        except EOFError:
            self.context.request_quit()
            return None

    def run(self) -> int:
        """Run the read-eval-print loop until a command requests quit."""
        while not self.context.should_quit:
            line = self.read_line()
            if line is None:
                continue
            self.execute(line)
        return 0
