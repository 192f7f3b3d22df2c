"""
Pytest configuration and shared fixtures for term-shell tests.

This module provides reusable test fixtures for:
- An isolated home/config directory
- Session contexts rooted in a temporary working directory
- Registries populated with builtins
- Executable files for search path discovery
"""

import os
import stat

import pytest

from term_shell.command import BuiltinCommand
from term_shell.commands import load_all_commands
from term_shell.context import SessionContext
from term_shell.path_manager import PathManager
from term_shell.registry import CommandRegistry


# ============================================================================
# Helper Functions
# ============================================================================

def make_executable(directory, name: str, body: str = "#!/bin/sh\nexit 0\n",
                    executable: bool = True):
    """
    Create a script file in ``directory``.

    Returns:
        pathlib.Path of the created file
    """
    path = directory / name
    path.write_text(body)
    mode = 0o755 if executable else 0o644
    os.chmod(path, mode)
    return path


class RecordingCommand(BuiltinCommand):
    """Builtin that records every call instead of doing anything."""

    def __init__(self, name: str, description=None, documentation=None):
        self.calls = []
        super().__init__(name, self._record, description, documentation)

    def _record(self, ctx, args):
        self.calls.append((ctx, list(args)))


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """
    Point HOME (and APPDATA) at an empty temporary directory.

    Keeps settings and log files of the developer running the tests out of
    reach.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.setenv('APPDATA', str(home))
    return home


@pytest.fixture
def workdir(tmp_path):
    """
    Provides a working directory with some entries.

    Layout:
        work/
          notes.txt
          .hidden
          src/
            main.py
    """
    work = tmp_path / "work"
    work.mkdir()
    (work / "notes.txt").write_text("hello\n")
    (work / ".hidden").write_text("")
    (work / "src").mkdir()
    (work / "src" / "main.py").write_text("print('hi')\n")
    return work


@pytest.fixture
def registry():
    """Registry holding every builtin and nothing from the search path."""
    return CommandRegistry(load_all_commands())


@pytest.fixture
def session(workdir, registry):
    """
    Provides a SessionContext rooted at ``workdir`` with builtins registered.

    Output goes to the live sys.stdout / sys.stderr, so tests read it with
    ``capsys``.
    """
    return SessionContext(
        paths=PathManager(str(workdir)),
        commands=registry,
        user_name='tester',
    )


@pytest.fixture
def bin_dir(tmp_path):
    """
    Provides a directory of executables for discovery tests.

    Contains executable ``run.sh``, ``tool.tar.gz`` and ``deploy``, a
    non-executable ``readme.txt`` and a subdirectory ``nested``.
    """
    directory = tmp_path / "bin"
    directory.mkdir()
    make_executable(directory, "run.sh")
    make_executable(directory, "tool.tar.gz")
    make_executable(directory, "deploy")
    make_executable(directory, "readme.txt", executable=False)
    nested = directory / "nested"
    nested.mkdir()
    os.chmod(nested, stat.S_IRWXU)
    return directory
