"""
EXIT command - leave the shell.
"""

from . import register_command


@register_command('exit', "exit the shell")
def cmd_exit(ctx, args):
    """
    Set the quit flag; the shell stops after this command returns.

    Usage: exit
    """
    ctx.request_quit()
