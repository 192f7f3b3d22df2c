"""Single-character flag parsing shared by every command.

Any argument starting with ``-`` is a flag token and every character after
the dash is a separate switch, so ``-cU`` sets both ``c`` and ``U``. Flags
carry no values. Non-flag tokens stay available to the command as
positional arguments.
"""

from typing import FrozenSet, Iterable, List

FLAG_PREFIX = '-'


class FlagSet:
    """Set of single-character switches extracted from one invocation.

    Read-only after construction.

    Example:
        >>> flags = FlagSet.from_args(['src', '-la', '-h'])
        >>> flags.has_flag('l'), flags.has_flag('h'), flags.has_flag('r')
        (True, True, False)
    """

    def __init__(self, flags: Iterable[str] = ()):
        self._flags: FrozenSet[str] = frozenset(flags)

    @classmethod
    def from_args(cls, args: Iterable[str]) -> 'FlagSet':
        found = set()
        for arg in args:
            if arg.startswith(FLAG_PREFIX):
                # a bare "-" contributes nothing
                found.update(arg[len(FLAG_PREFIX):])
        return cls(found)

    def has_flag(self, flag: str) -> bool:
        return flag in self._flags

    def __contains__(self, flag: str) -> bool:
        return flag in self._flags

    def __iter__(self):
        return iter(sorted(self._flags))

    def __len__(self) -> int:
        return len(self._flags)

    def __eq__(self, other) -> bool:
        if isinstance(other, FlagSet):
            return self._flags == other._flags
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._flags)

    def __repr__(self) -> str:
        return f"FlagSet({''.join(sorted(self._flags))!r})"


def parse_flags(args: Iterable[str]) -> FlagSet:
    """
    Parse an argument list into a FlagSet.

    Args:
        args: Raw argument tokens of one invocation

    Returns:
        FlagSet with every character that followed a dash
    """
    return FlagSet.from_args(args)


def positional_args(args: Iterable[str]) -> List[str]:
    """
    Return the non-empty arguments that are not flag tokens, in order.

    Empty tokens come from repeated or trailing spaces and are skipped.

    Example:
        >>> positional_args(['a', '-x', '', 'b'])
        ['a', 'b']
    """
    return [arg for arg in args if arg and not arg.startswith(FLAG_PREFIX)]
