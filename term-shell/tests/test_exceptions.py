"""Tests for the shell error taxonomy."""

import errno

import pytest

from term_shell.exceptions import (
    CommandError,
    CommandNotFoundError,
    CustomError,
    ShellError,
    ShellInitError,
    ShellIOError,
    TooFewArgumentsError,
)


class TestErrorMessages:
    """Test how each error kind renders"""

    def test_not_found_carries_name(self):
        """Test NotFound keeps the attempted name"""
        error = CommandNotFoundError('missing_cmd')
        assert error.name == 'missing_cmd'
        assert str(error) == "NotFound: the command missing_cmd does not exist."
        assert error.exit_code == 127

    def test_too_few_arguments(self):
        """Test TooFewArguments renders the expectation"""
        error = TooFewArgumentsError('mkdir', 'expected at least 1 argument, got 0')
        assert str(error) == "TooFewArguments: mkdir: expected at least 1 argument, got 0"
        assert error.command == 'mkdir'

    def test_io_error_uses_os_description(self):
        """Test IoError renders the OS error description with the path"""
        os_error = FileNotFoundError(errno.ENOENT, "No such file or directory", "x")
        error = ShellIOError(os_error, 'x')
        assert str(error) == "IoError: x: No such file or directory"
        assert error.error is os_error

    def test_io_error_without_path(self):
        """Test IoError without a path"""
        error = ShellIOError(PermissionError(errno.EACCES, "Permission denied"))
        assert str(error) == "IoError: Permission denied"

    def test_custom_error(self):
        """Test Custom errors carry their free-form message"""
        error = CustomError("bad color")
        assert str(error) == "Error: bad color"
        assert error.detail == "bad color"

    def test_command_error_wraps_rendered_message(self):
        """Test CommandError carries another error's message"""
        inner = ValueError("boom")
        error = CommandError(inner)
        assert str(error) == "CommandErr: boom"
        assert error.error is inner

    def test_command_error_wraps_shell_error(self):
        """Test CommandError can re-label a shell error"""
        error = CommandError(CommandNotFoundError('x'))
        assert str(error) == "CommandErr: NotFound: the command x does not exist."


class TestHierarchy:
    """Test every error is catchable as ShellError"""

    @pytest.mark.parametrize('error', [
        CommandNotFoundError('x'),
        TooFewArgumentsError('x', 'y'),
        ShellIOError(OSError("x")),
        CustomError('x'),
        CommandError(ValueError('x')),
        ShellInitError('x'),
    ])
    def test_is_shell_error(self, error):
        """Test the error derives from ShellError"""
        assert isinstance(error, ShellError)
        with pytest.raises(ShellError):
            raise error
