"""
Hosts: either a numeric network address or a name to be resolved later.

A host is one of two variants, IpAddr or DnsName. Host is the union of the two, so
code that receives one should match on it:

    match host:
        case IpAddr(address):
            ...
        case DnsName(name):
            ...

There are two ways to turn a string into a host. coerce_host trusts its caller and
accepts any string that is not an address literal as a name. parse_host checks that
such a name contains only permitted characters. In both cases a string that is an
IPv4 or IPv6 literal always becomes an IpAddr.
"""

import ipaddress
import string
from typing import Self

from .errors import InvalidCharacterInDomainError

Address = ipaddress.IPv4Address | ipaddress.IPv6Address
"""The type of a numeric IP address."""

DNS_NAME_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-._")
"""The characters permitted in a DNS name on the checked path."""


class IpAddr:
    """A host given as a numeric IPv4 or IPv6 address."""

    __slots__ = {
        "_address": "The address.",
    }
    __match_args__ = ("address",)

    _address: Address

    def __init__(self: Self, address: Address) -> None:
        """
        Construct a new IpAddr.

        :param address: The address.
        """
        if not isinstance(address, ipaddress.IPv4Address | ipaddress.IPv6Address):
            msg = f"Expected an IPv4Address or IPv6Address, got {type(address)!r}"
            raise TypeError(msg)
        self._address = address

    @property
    def address(self: Self) -> Address:
        """The address."""
        return self._address

    def is_ip_address(self: Self) -> bool:
        """Return True."""
        return True

    def is_dns_name(self: Self) -> bool:
        """Return False."""
        return False

    def __eq__(self: Self, other: object) -> bool:
        """Compare equal to another IpAddr holding the same address."""
        if not isinstance(other, IpAddr):
            return NotImplemented
        return self._address == other._address

    def __hash__(self: Self) -> int:
        """Hash the address."""
        return hash((IpAddr, self._address))

    def __str__(self: Self) -> str:
        """Return the address in its standard textual form, without brackets."""
        return str(self._address)

    def __repr__(self: Self) -> str:
        """Return the representation of the host."""
        return f"IpAddr({self._address!r})"


class DnsName:
    """
    A host given as a name to be resolved later.

    The name is stored verbatim. No case folding is done, so names that differ only
    in case are different hosts.
    """

    __slots__ = {
        "_name": "The name.",
    }
    __match_args__ = ("name",)

    _name: str

    def __init__(self: Self, name: str) -> None:
        """
        Construct a new DnsName without checking its characters.

        :param name: The name.
        """
        if not isinstance(name, str):
            msg = f"Expected a str, got {type(name)!r}"
            raise TypeError(msg)
        self._name = name

    @property
    def name(self: Self) -> str:
        """The name."""
        return self._name

    def is_ip_address(self: Self) -> bool:
        """Return False."""
        return False

    def is_dns_name(self: Self) -> bool:
        """Return True."""
        return True

    def __eq__(self: Self, other: object) -> bool:
        """Compare equal to another DnsName holding the same name."""
        if not isinstance(other, DnsName):
            return NotImplemented
        return self._name == other._name

    def __hash__(self: Self) -> int:
        """Hash the name."""
        return hash((DnsName, self._name))

    def __str__(self: Self) -> str:
        """Return the name."""
        return self._name

    def __repr__(self: Self) -> str:
        """Return the representation of the host."""
        return f"DnsName({self._name!r})"


Host = IpAddr | DnsName
"""The type of a host: exactly one of IpAddr or DnsName."""


def parse_address(text: str) -> Address | None:
    """
    Parse a string as an IPv4 or IPv6 address literal.

    :param text: The string.
    :return: The address, or None if the whole string is not an address literal.
    """
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        return None


def check_dns_name(name: str) -> None:
    """
    Check that a name contains only characters permitted in a DNS name.

    The permitted characters are ASCII letters, ASCII digits, hyphen, dot, and
    underscore. Only the first offending character is reported.

    :param name: The name to check.
    :raises InvalidCharacterInDomainError: if a character is not permitted.
    """
    for position, character in enumerate(name):
        if character not in DNS_NAME_CHARACTERS:
            raise InvalidCharacterInDomainError(position, character)


def coerce_host(value: Host | Address | str) -> Host:
    """
    Convert a value into a host, trusting that any name given is valid.

    :param value: An existing host (returned unchanged), an address, or a string. A
        string that is not an address literal becomes a DnsName without any check of
        its characters.
    :return: The host.
    """
    match value:
        case IpAddr() | DnsName():
            return value
        case ipaddress.IPv4Address() | ipaddress.IPv6Address():
            return IpAddr(value)
        case str():
            address = parse_address(value)
            if address is not None:
                return IpAddr(address)
            return DnsName(value)
        case _:
            msg = f"Cannot convert {type(value)!r} to a host"
            raise TypeError(msg)


def parse_host(text: str) -> Host:
    """
    Parse a string into a host, checking the characters of any name.

    :param text: The string.
    :return: An IpAddr if the string is an address literal, otherwise a DnsName.
    :raises InvalidCharacterInDomainError: if the string is not an address literal
        and contains a character not permitted in a DNS name.
    """
    address = parse_address(text)
    if address is not None:
        return IpAddr(address)
    check_dns_name(text)
    return DnsName(text)
