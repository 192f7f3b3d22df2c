"""
LS command - list directory contents.
"""

import os

from . import register_command
from .base import io_error, split_args


def format_entry(entry: os.DirEntry, long_format: bool) -> str:
    """Format one directory entry; directories get a trailing slash."""
    try:
        is_dir = entry.is_dir()
    except OSError:
        is_dir = False
    name = entry.name + ('/' if is_dir else '')

    if not long_format:
        return name

    try:
        size = entry.stat().st_size
    except OSError:
        size = 0
    if entry.is_symlink():
        kind = 'l'
    elif is_dir:
        kind = 'd'
    else:
        kind = '-'
    return f"{kind} {size:>10} {name}"


@register_command('ls', "list the contents of a directory")
def cmd_ls(ctx, args):
    """
    List directory contents, sorted by name.

    Usage: ls [path] [-a] [-l]

    Options:
      -a  include entries whose names start with '.'
      -l  long format: type (d/l/-), size in bytes, name
    """
    flags, positional = split_args(args)
    path = positional[0] if positional else ''
    target = ctx.resolve_path(path)
    show_hidden = flags.has_flag('a')
    long_format = flags.has_flag('l')

    if os.path.isfile(target):
        ctx.write(os.path.basename(target))
        return

    try:
        with os.scandir(target) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise io_error(e, path or target)

    for entry in entries:
        if entry.name.startswith('.') and not show_hidden:
            continue
        ctx.write(format_entry(entry, long_format))
