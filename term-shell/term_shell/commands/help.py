"""
HELP command - list registered commands.
"""

from . import register_command
from .base import split_args


@register_command('help', "display help information, including commands")
def cmd_help(ctx, args):
    """
    List every registered command with its short description.

    Usage: help [-b]

    Options:
      -b  only list builtin commands
    """
    flags, _ = split_args(args)
    if ctx.commands is None:
        return

    commands = ctx.commands.builtins() if flags.has_flag('b') else ctx.commands
    for command in commands:
        ctx.write(f"{command.name} - {command.describe()}")
