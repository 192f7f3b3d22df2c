"""
RMDIR command - remove directories.
"""

import os
import shutil

from . import register_command
from .base import io_error, split_args, validate_arg_count


@register_command('rmdir', "remove directories")
def cmd_rmdir(ctx, args):
    """
    Remove one or more empty directories.

    Usage: rmdir <path>... [-r]

    Options:
      -r  remove the directory and everything below it
    """
    flags, paths = split_args(args)
    validate_arg_count('rmdir', paths, 1, usage="rmdir <path>... [-r]")

    for path in paths:
        target = ctx.resolve_path(path)
        try:
            if flags.has_flag('r'):
                if os.path.islink(target) or os.path.isfile(target):
                    raise NotADirectoryError(20, "Not a directory", path)
                shutil.rmtree(target)
            else:
                os.rmdir(target)
        except OSError as e:
            raise io_error(e, path)
