"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and keep error reporting consistent.
"""

from typing import List, Optional

from ..exceptions import CommandNotFoundError, ShellIOError, TooFewArgumentsError
from ..flags import FlagSet, parse_flags, positional_args


def split_args(args: List[str]) -> tuple:
    """
    Split command arguments into flags and positional arguments.

    Args:
        args: Raw argument tokens

    Returns:
        Tuple of (FlagSet, positional_args)

    Example:
        >>> flags, paths = split_args(['src', '-la'])
        >>> flags.has_flag('a'), paths
        (True, ['src'])
    """
    return parse_flags(args), positional_args(args)


def validate_arg_count(command: str, positional: List[str], min_args: int,
                       usage: str = "") -> None:
    """
    Require at least ``min_args`` positional arguments.

    Args:
        command: Command name for the error message
        positional: Positional (non-flag) arguments
        min_args: Minimum required arguments
        usage: Usage string appended to the error

    Raises:
        TooFewArgumentsError: If fewer arguments were given
    """
    if len(positional) >= min_args:
        return

    noun = "argument" if min_args == 1 else "arguments"
    expected = f"expected at least {min_args} {noun}, got {len(positional)}"
    if usage:
        expected += f" (usage: {usage})"
    raise TooFewArgumentsError(command, expected)


def resolve_command(ctx, name: str):
    """
    Look up a command in the session's registry.

    Raises:
        CommandNotFoundError: If no command has this name
    """
    command = ctx.commands.lookup(name) if ctx.commands is not None else None
    if command is None:
        raise CommandNotFoundError(name)
    return command


def io_error(error: OSError, path: Optional[str] = None) -> ShellIOError:
    """
    Wrap an OSError for re-raising.

    Example:
        try:
            os.rmdir(path)
        except OSError as e:
            raise io_error(e, path)
    """
    return ShellIOError(error, path or error.filename)


__all__ = [
    'FlagSet',
    'split_args',
    'validate_arg_count',
    'resolve_command',
    'io_error',
]
