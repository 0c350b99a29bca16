"""Errors raised when a host/port string cannot be parsed."""

from typing import Self


class HostPortPairError(ValueError):
    """
    The base class of all host/port parsing errors.

    All errors indicate malformed input; none are transient. This derives from
    ValueError so that parsing functions can be used directly as argparse type
    callables.

    Subclasses pass their constructor arguments, unformatted, up to the base
    constructor so that copying and pickling can rebuild them from args; the message
    is produced by __str__.
    """

    __slots__ = ()


class NoPortError(HostPortPairError):
    """Raised if the input contains no colon separating the host from the port."""

    __slots__ = ()

    def __init__(self: Self) -> None:
        """Construct a new NoPortError."""
        super().__init__()

    def __str__(self: Self) -> str:
        """Return the error message."""
        return "no port"


class InvalidCharacterInDomainError(HostPortPairError):
    """Raised if a domain name contains a character outside the permitted set."""

    __slots__ = {
        "position": "The zero-based offset of the offending character.",
        "character": "The offending character.",
    }

    position: int
    character: str

    def __init__(self: Self, position: int, character: str) -> None:
        """
        Construct a new InvalidCharacterInDomainError.

        :param position: The zero-based offset of the first offending character.
        :param character: The offending character.
        """
        super().__init__(position, character)
        self.position = position
        self.character = character

    def __str__(self: Self) -> str:
        """Return the error message."""
        return (
            f"invalid character {self.character!r} in domain at position "
            f"{self.position}"
        )


class ParsePortError(HostPortPairError):
    """
    Raised if the port part is not a decimal integer between 0 and 65535.

    The underlying error from the port parser is kept as-is in the cause attribute
    (and is also chained as __cause__ where the error is raised).
    """

    __slots__ = {
        "cause": "The underlying port parsing failure.",
    }

    cause: ValueError

    def __init__(self: Self, cause: ValueError) -> None:
        """
        Construct a new ParsePortError.

        :param cause: The error raised by the port parser.
        """
        super().__init__(cause)
        self.cause = cause

    def __str__(self: Self) -> str:
        """Return the error message."""
        return f"invalid port: {self.cause}"
