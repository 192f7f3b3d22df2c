"""
MKDIR command - create directories.
"""

import os

from . import register_command
from .base import io_error, split_args, validate_arg_count


@register_command('mkdir', "create directories")
def cmd_mkdir(ctx, args):
    """
    Create one or more directories.

    Usage: mkdir <path>... [-p]

    Options:
      -p  create missing parents, no error if the directory exists
    """
    flags, paths = split_args(args)
    validate_arg_count('mkdir', paths, 1, usage="mkdir <path>... [-p]")

    for path in paths:
        target = ctx.resolve_path(path)
        try:
            if flags.has_flag('p'):
                os.makedirs(target, exist_ok=True)
            else:
                os.mkdir(target)
        except OSError as e:
            raise io_error(e, path)
