"""
CLEAR command - clear the terminal.
"""

from . import register_command

CLEAR_SEQUENCE = '\x1b[2J\x1b[1;1H'


@register_command('clear', "clear the terminal")
def cmd_clear(ctx, args):
    """
    Clear the screen and move the cursor to the top-left corner.

    Usage: clear
    """
    ctx.write(CLEAR_SEQUENCE, end='')
