"""A host paired with a port number, and its textual form HOST:PORT."""

import ipaddress
import logging
from typing import Any, Self

from .errors import InvalidCharacterInDomainError, NoPortError, ParsePortError
from .host import (
    Address,
    DnsName,
    Host,
    IpAddr,
    check_dns_name,
    coerce_host,
    parse_address,
)

MAX_PORT = 65535
"""The largest port number."""


def parse_port(text: str) -> int:
    """
    Parse a decimal port number.

    Only ASCII digits are accepted: no sign, no whitespace, no underscores, and no
    leading zeros other than in “0” itself.

    :param text: The port number as a string.
    :return: The port number, between 0 and 65535 inclusive.
    :raises ValueError: if the string is not a valid port number.
    """
    if not text:
        msg = "cannot parse port from empty string"
        raise ValueError(msg)
    if not (text.isascii() and text.isdigit()):
        msg = f"invalid digit found in port {text!r}"
        raise ValueError(msg)
    if len(text) > 1 and text[0] == "0":
        msg = f"leading zero in port {text!r}"
        raise ValueError(msg)
    # Checking the length first avoids converting arbitrarily long digit strings.
    if len(text) > len(str(MAX_PORT)) or int(text) > MAX_PORT:
        msg = f"port {text} is too large to fit in 16 bits"
        raise ValueError(msg)
    return int(text)


def _parse_socket_literal(text: str) -> tuple[Address, int] | None:
    """
    Parse a string as a numeric socket address.

    The accepted forms are IPv4ADDR:PORT and [IPv6ADDR]:PORT.

    :param text: The string.
    :return: The address and port, or None if the string is not a socket address
        literal.
    """
    address: Address
    if text.startswith("["):
        address_text, sep, port_text = text[1:].partition("]:")
        if not sep:
            return None
        try:
            address = ipaddress.IPv6Address(address_text)
        except ValueError:
            return None
    else:
        address_text, sep, port_text = text.rpartition(":")
        if not sep:
            return None
        try:
            address = ipaddress.IPv4Address(address_text)
        except ValueError:
            return None
    try:
        port = parse_port(port_text)
    except ValueError:
        return None
    return address, port


class HostPortPair:
    """
    A host, which is an address or a name, and a port number.

    Both parts can be replaced after construction. Because of that, pairs compare by
    value but are not hashable.
    """

    __slots__ = {
        "_host": "The host.",
        "_port": "The port number.",
    }

    _host: Host
    _port: int

    def __init__(self: Self, host: Host | Address | str, port: int) -> None:
        """
        Construct a new HostPortPair.

        :param host: The host. A string is converted by coerce_host, so a name is
            not checked for invalid characters; use parse to check it.
        :param port: The port number, between 0 and 65535 inclusive. Zero means
            unspecified.
        """
        self.host = host
        self.port = port

    @classmethod
    def from_tuple(cls: type[Self], pair: tuple[Host | Address | str, int]) -> Self:
        """
        Construct a HostPortPair from a (host, port) tuple.

        :param pair: The host and port, as accepted by the constructor.
        :return: The new pair.
        """
        host, port = pair
        return cls(host, port)

    @classmethod
    def from_socket_address(cls: type[Self], address: tuple[Any, ...]) -> Self:
        """
        Construct a HostPortPair from an address tuple of the socket module.

        :param address: A (host, port) tuple as used for AF_INET, or a (host, port,
            flowinfo, scope_id) tuple as used for AF_INET6. The host must be a
            numeric address. The flow info and scope ID are discarded.
        :return: The new pair.
        """
        match address:
            case (str() as host_text, int() as port) | (
                str() as host_text,
                int() as port,
                int(),
                int(),
            ):
                host = parse_address(host_text)
                if host is None:
                    msg = f"Socket address host {host_text!r} is not a numeric address"
                    raise ValueError(msg)
                return cls(host, port)
            case _:
                msg = f"Unrecognized socket address {address!r}"
                raise ValueError(msg)

    @classmethod
    def parse(cls: type[Self], text: str) -> Self:
        """
        Parse a string of the form HOST:PORT.

        First the whole string is tried as a numeric socket address (IPv4ADDR:PORT
        or [IPv6ADDR]:PORT). If it is not one, the string is split at its last colon,
        the part after it is parsed as a port number, and the part before it is
        checked as a DNS name. Colons are therefore only legal as the separator.

        :param text: The string.
        :return: The pair.
        :raises NoPortError: if the string contains no colon.
        :raises ParsePortError: if the part after the last colon is not a valid port
            number.
        :raises InvalidCharacterInDomainError: if the part before the last colon is
            not a valid DNS name.
        """
        literal = _parse_socket_literal(text)
        if literal is not None:
            logging.getLogger(__name__).debug("%r is a socket address literal", text)
            return cls(IpAddr(literal[0]), literal[1])

        host_text, sep, port_text = text.rpartition(":")
        if not sep:
            logging.getLogger(__name__).debug("%r has no port", text)
            raise NoPortError
        try:
            port = parse_port(port_text)
        except ValueError as exc:
            logging.getLogger(__name__).debug("%r has a bad port: %s", text, exc)
            raise ParsePortError(exc) from exc
        try:
            check_dns_name(host_text)
        except InvalidCharacterInDomainError as exc:
            logging.getLogger(__name__).debug("%r has a bad name: %s", text, exc)
            raise
        logging.getLogger(__name__).debug("%r is a DNS name and port", text)
        return cls(DnsName(host_text), port)

    @property
    def host(self: Self) -> Host:
        """The host."""
        return self._host

    @host.setter
    def host(self: Self, value: Host | Address | str) -> None:
        self._host = coerce_host(value)

    @property
    def port(self: Self) -> int:
        """The port number."""
        return self._port

    @port.setter
    def port(self: Self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"Port number must be an int, got {type(value)!r}"
            raise TypeError(msg)
        if not 0 <= value <= MAX_PORT:
            msg = f"Port number {value} out of range 0 to {MAX_PORT}"
            raise ValueError(msg)
        self._port = value

    def as_tuple(self: Self) -> tuple[str, int]:
        """
        Return the pair as a (host, port) tuple.

        The result is suitable for socket.create_connection or
        asyncio.open_connection.
        """
        return (str(self._host), self._port)

    def __eq__(self: Self, other: object) -> bool:
        """Compare equal to another pair with an equal host and port."""
        if not isinstance(other, HostPortPair):
            return NotImplemented
        return self._host == other._host and self._port == other._port

    def __str__(self: Self) -> str:
        """
        Return the pair as HOST:PORT.

        IPv6 addresses are not bracketed, so the result for an IPv6 host cannot be
        parsed back by parse.
        """
        return f"{self._host}:{self._port}"

    def __repr__(self: Self) -> str:
        """Return the representation of the pair."""
        return f"HostPortPair({self._host!r}, {self._port})"
