"""
CD command - change directory.
"""

from . import register_command
from .base import split_args


@register_command('cd', "change the working directory")
def cmd_cd(ctx, args):
    """
    Change the session's working directory.

    Usage: cd [path]

    With no path, goes to the home directory. ``~`` expands to the home
    directory and relative paths resolve against the current directory.
    """
    _, positional = split_args(args)
    target = positional[0] if positional else ctx.paths.home()
    ctx.change_directory(target)
