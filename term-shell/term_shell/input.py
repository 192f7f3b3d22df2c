"""Interactive line reader backed by prompt_toolkit."""

from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import InMemoryHistory


class LineReader:
    """
    Reads one line per prompt and records it in the session history.

    The history list is shared with the session context so the ``history``
    builtin sees every entered line. Up/down arrow recall comes from the
    prompt_toolkit session's in-memory history.

    Args:
        history: List to append entered lines to
        session: Prompt session to read from (created when omitted)
    """

    def __init__(self, history: Optional[List[str]] = None,
                 session: Optional[PromptSession] = None):
        self.history = history if history is not None else []
        self._session = session

    @property
    def session(self) -> PromptSession:
        # created lazily, a PromptSession needs a terminal
        if self._session is None:
            self._session = PromptSession(history=InMemoryHistory())
        return self._session

    def get(self, prompt: str) -> str:
        """
        Show the prompt and return the entered line without its newline.

        Raises:
            KeyboardInterrupt: On Ctrl-C
            EOFError: On Ctrl-D / end of input
        """
        line = self.session.prompt(ANSI(prompt))
        self.history.append(line)
        return line
