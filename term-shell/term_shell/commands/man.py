"""
MAN command - show a command's documentation.
"""

from . import register_command
from .base import resolve_command, split_args, validate_arg_count


@register_command('man', "show the documentation of a command")
def cmd_man(ctx, args):
    """
    Print the long-form documentation of a command.

    Usage: man <command>
    """
    _, positional = split_args(args)
    validate_arg_count('man', positional, 1, usage="man <command>")

    command = resolve_command(ctx, positional[0])
    ctx.write(command.manual())
