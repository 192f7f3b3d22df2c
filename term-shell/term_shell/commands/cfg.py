"""
CFG command - view and change display settings.
"""

from . import register_command
from .base import split_args
from ..exceptions import CustomError, TooFewArgumentsError
from ..settings import Color

# flag -> (settings attribute, label); checked in this order, first match wins
COLOR_FLAGS = (
    ('p', 'path_color', 'path'),
    ('u', 'user_name_color', 'user name'),
    ('b', 'git_branch_color', 'git branch'),
)


def parse_component(value: str) -> int:
    """Parse one color component, which must be an integer in 0..255."""
    try:
        component = int(value)
    except ValueError:
        raise CustomError(f"color component '{value}' is not a number")
    if not 0 <= component <= 255:
        raise CustomError(f"color component '{value}' is not in 0..255")
    return component


def color_before(args, flag: str) -> Color:
    """
    Read the three color components placed right before the token holding ``flag``.

    Example:
        ['20', '255', '247', '-p'] -> Color(20, 255, 247)
    """
    for index, arg in enumerate(args):
        if arg.startswith('-') and flag in arg[1:]:
            break
    if index < 3:
        raise TooFewArgumentsError(
            'cfg', f"expected <r> <g> <b> before -{flag}")
    r, g, b = (parse_component(value) for value in args[index - 3:index])
    return Color(r, g, b)


def show_settings(ctx):
    settings = ctx.settings
    for _, attribute, label in COLOR_FLAGS:
        color = getattr(settings, attribute)
        ctx.write(f"{label} color: {color.paint(str(color))}")
    ctx.write(f"show user name: {'yes' if settings.show_user_name else 'no'}")


@register_command('cfg', "view or change your settings")
def cmd_cfg(ctx, args):
    """
    View or change display settings.

    Usage: cfg [<r> <g> <b> -p|-u|-b] [-n|-N] [-r] [-s]

    Options:
      -p  set the path color from the three components before the flag
      -u  set the user name color from the three components before the flag
      -b  set the git branch color from the three components before the flag
      -n  show the user name in the prompt
      -N  hide the user name in the prompt
      -r  reset every setting to its default
      -s  save the settings to disk

    Only one color is changed per invocation; when several color flags are
    given, the first of -p, -u, -b wins. Components are integers in 0..255.
    With no arguments, the current settings are printed.
    """
    args = [arg for arg in args if arg]
    if not args:
        show_settings(ctx)
        return

    flags, _ = split_args(args)
    settings = ctx.settings

    if flags.has_flag('r'):
        settings.reset()

    for flag, attribute, _ in COLOR_FLAGS:
        if flags.has_flag(flag):
            setattr(settings, attribute, color_before(args, flag))
            break

    if flags.has_flag('n'):
        settings.show_user_name = True
    elif flags.has_flag('N'):
        settings.show_user_name = False

    if flags.has_flag('s'):
        path = settings.save()
        ctx.write_error(f"saved to: {path}")
