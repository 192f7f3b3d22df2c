"""Prompt rendering: ``<cwd>[@<user>][(<branch>)]> `` in the configured colors."""

import logging
import os
from typing import Optional

from .context import SessionContext

logger = logging.getLogger(__name__)

PROMPT_SUFFIX = '> '


def read_git_branch(directory: str) -> Optional[str]:
    """
    Read the checked-out branch from ``<directory>/.git/HEAD``.

    Only the directory itself is checked, not its parents. A HEAD file of
    the form ``ref: refs/heads/<branch>`` yields the last path segment;
    anything else (missing, detached, unreadable or not UTF-8) yields None.
    """
    head = os.path.join(directory, '.git', 'HEAD')
    try:
        with open(head, encoding='utf-8') as f:
            contents = f.read()
    except (OSError, ValueError):
        return None

    parts = contents.split(':')
    if len(parts) != 2:
        return None
    branch = parts[1].strip().split('/')[-1]
    return branch or None


def build_prompt(ctx: SessionContext) -> str:
    """Render the prompt for the current session state."""
    settings = ctx.settings
    prompt = settings.path_color.paint(ctx.cwd)

    if settings.show_user_name and ctx.user_name:
        prompt += f"@{settings.user_name_color.paint(ctx.user_name)}"

    branch = read_git_branch(ctx.cwd)
    if branch:
        prompt += f"({settings.git_branch_color.paint(branch)})"

    return prompt + PROMPT_SUFFIX
