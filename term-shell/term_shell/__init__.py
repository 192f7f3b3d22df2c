"""term-shell: an interactive shell unifying builtins and search path commands."""

__version__ = '0.1.0'
