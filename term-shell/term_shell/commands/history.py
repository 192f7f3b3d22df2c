"""
HISTORY command - show entered lines.
"""

from . import register_command


@register_command('history', "view your command history")
def cmd_history(ctx, args):
    """
    Print every line entered this session, oldest first.

    Usage: history
    """
    for line in ctx.history:
        ctx.write(line)
