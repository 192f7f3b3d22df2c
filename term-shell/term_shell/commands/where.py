"""
WHERE command - show where a command lives.
"""

from . import register_command
from .base import resolve_command, split_args, validate_arg_count


@register_command('where', "show the file a command runs")
def cmd_where(ctx, args):
    """
    Print the file location of a command found on the search path.

    Usage: where <command>

    Builtins have no file; they are reported as builtin. A builtin shadows
    any executable of the same name, so that executable is never reported.
    """
    _, positional = split_args(args)
    validate_arg_count('where', positional, 1, usage="where <command>")

    command = resolve_command(ctx, positional[0])
    if command.is_builtin:
        ctx.write(f"{command.name} is a builtin command")
    else:
        ctx.write(command.file_location)
