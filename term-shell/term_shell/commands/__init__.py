"""
Builtin command registration and discovery.

Each builtin lives in its own module under this package and registers
itself with the ``@register_command`` decorator. ``load_all_commands()``
imports every module and returns the builtins in a stable order, ready to
be pushed into a ``CommandRegistry`` before PATH discovery runs.
"""

import logging
from typing import List, Optional

from ..command import BuiltinCommand, CommandFunc

logger = logging.getLogger(__name__)

_COMMANDS: List[BuiltinCommand] = []


def register_command(name: str, description: Optional[str] = None):
    """
    Decorator to register a builtin command function.

    The function's docstring becomes the command's documentation.

    Args:
        name: Command name
        description: One-line description shown by ``help``

    Example:
        @register_command('clear', "clear the terminal")
        def cmd_clear(ctx, args):
            ...
    """
    def decorator(func: CommandFunc) -> CommandFunc:
        _COMMANDS.append(BuiltinCommand(name, func, description))
        return func
    return decorator


def get_builtin(name: str) -> Optional[BuiltinCommand]:
    """
    Get a registered builtin by name.

    Args:
        name: The command name to look up

    Returns:
        The builtin command, or None if not found
    """
    for command in _COMMANDS:
        if command.name == name:
            return command
    return None


def load_all_commands() -> List[BuiltinCommand]:
    """
    Import all command modules and return the registered builtins.

    Importing a module runs its ``@register_command`` decorators; modules
    already imported are not registered twice.
    """
    import importlib
    import os
    import pkgutil

    package_dir = os.path.dirname(__file__)

    for _, module_name, _ in pkgutil.iter_modules([package_dir]):
        if module_name != 'base':  # helpers, not a command
            try:
                importlib.import_module(f'.{module_name}', package=__name__)
            except Exception as e:
                # Log but don't fail if a command module has issues
                import sys
                logger.exception("failed to load command module %s", module_name)
                print(f"Warning: Failed to load command module {module_name}: {e}", file=sys.stderr)

    return sorted(_COMMANDS, key=lambda command: command.name)


__all__ = ['register_command', 'get_builtin', 'load_all_commands']
