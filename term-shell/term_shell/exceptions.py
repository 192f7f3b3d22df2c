"""
Exception hierarchy for term-shell.

Every failure a command can produce is raised as a ``ShellError`` subclass.
The registry propagates them unchanged and the execution loop reports them
as ``ERROR: <message>`` before prompting again.

Usage:
    from term_shell.exceptions import ShellError, TooFewArgumentsError

    def cmd_man(ctx, args):
        if not args:
            raise TooFewArgumentsError("man", "expected a command name")

    try:
        registry.try_dispatch(ctx, line)
    except ShellError as e:
        print(f"ERROR: {e}", file=sys.stderr)
"""

from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    Attributes:
        message: Rendered error message (what ``str()`` returns)
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


class CommandNotFoundError(ShellError):
    """
    Raised by dispatch when no registered command has the given name.

    Example:
        raise CommandNotFoundError("missing_cmd")
    """

    def __init__(self, name: str):
        message = f"NotFound: the command {name} does not exist."
        super().__init__(message, exit_code=127)
        self.name = name


class TooFewArgumentsError(ShellError):
    """
    Raised when a command receives fewer positional arguments than it needs.

    Example:
        raise TooFewArgumentsError("mkdir", "expected at least 1 path")
    """

    def __init__(self, command: str, expected: str):
        message = f"TooFewArguments: {command}: {expected}"
        super().__init__(message, exit_code=2)
        self.command = command
        self.expected = expected


class ShellIOError(ShellError):
    """
    Raised when a filesystem or process operation fails.

    Wraps the underlying ``OSError`` and renders its OS-level description.

    Example:
        try:
            os.mkdir(path)
        except OSError as e:
            raise ShellIOError(e, path)
    """

    def __init__(self, error: OSError, path: Optional[str] = None):
        description = error.strerror or str(error)
        if path:
            message = f"IoError: {path}: {description}"
        else:
            message = f"IoError: {description}"
        super().__init__(message)
        self.error = error
        self.path = path


class CustomError(ShellError):
    """
    Raised for command-specific validation failures.

    Example:
        raise CustomError("color component '300' is not in 0..255")
    """

    def __init__(self, message: str):
        super().__init__(f"Error: {message}")
        self.detail = message


class CommandError(ShellError):
    """
    Carries another error's rendered message.

    Used when a command surfaces a failure that is not part of this
    hierarchy (or re-labels one that is).

    Example:
        except json.JSONDecodeError as e:
            raise CommandError(e)
    """

    def __init__(self, error: BaseException):
        super().__init__(f"CommandErr: {error}")
        self.error = error


class ShellInitError(ShellError):
    """
    Raised when the shell cannot start (e.g. the working directory is gone).

    This is the only error that ends the process.
    """
    pass
