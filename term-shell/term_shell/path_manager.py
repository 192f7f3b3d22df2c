"""Working directory management for term-shell.

This module provides the PathManager class which handles:
- Current working directory tracking for the session
- Path resolution (relative to absolute, ``~`` expansion)
- Validated directory changes
"""

import os

from .exceptions import ShellIOError


class PathManager:
    """Manages the session's working directory.

    The shell process itself never calls ``os.chdir``; the session cwd is
    tracked here and handed to commands and spawned children explicitly.

    Attributes:
        cwd: Current working directory (absolute, normalized)
    """

    def __init__(self, initial_cwd: str):
        """Initialize the path manager.

        Args:
            initial_cwd: Initial working directory (made absolute)
        """
        self.cwd = os.path.normpath(os.path.abspath(initial_cwd))

    def resolve_path(self, path: str) -> str:
        """Resolve a relative or absolute path to an absolute path.

        Args:
            path: Path to resolve; empty means the cwd

        Returns:
            Absolute normalized path

        Examples:
            resolve_path('/foo/bar') -> '/foo/bar'
            resolve_path('bar') with cwd='/foo' -> '/foo/bar'
            resolve_path('../baz') with cwd='/foo/bar' -> '/foo/baz'
            resolve_path('~/docs') -> '/home/user/docs'
        """
        if not path:
            return self.cwd
        path = os.path.expanduser(path)
        if os.path.isabs(path):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(self.cwd, path))

    def change_directory(self, path: str) -> str:
        """Change the current working directory.

        Args:
            path: New directory path (relative, absolute or ``~``-prefixed)

        Returns:
            The new working directory

        Raises:
            ShellIOError: If the target does not exist or is not a directory
        """
        target = self.resolve_path(path)
        if not os.path.exists(target):
            raise ShellIOError(FileNotFoundError(2, "No such file or directory"), path)
        if not os.path.isdir(target):
            raise ShellIOError(NotADirectoryError(20, "Not a directory"), path)
        self.cwd = target
        return self.cwd

    def home(self) -> str:
        return os.path.expanduser('~')
