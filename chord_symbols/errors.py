"""Exceptions raised by the strict chord parsing path.

All errors subclass :class:`ValueError` so callers that already guard
against bad notation with ``except ValueError`` keep working.
"""


class UnrecognizedChordError(ValueError):
    """A chord symbol could not be turned into a chord.

    Parameters
    ----------
    name : str
        The offending input string.
    reason : str
        Human readable description of the failure.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Unrecognized chord {name!r}: {reason}")


class MalformedRootError(UnrecognizedChordError):
    """The symbol does not start with a valid pitch class spelling."""


class MalformedBassError(UnrecognizedChordError):
    """The text after the bass separator is not a valid pitch class spelling."""
