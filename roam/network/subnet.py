"""Subnet descriptors: the address range a network hands out to its peers."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Optional, Union

from ..config import SubnetPolicy
from ..errors import (
    InvalidAddressError,
    InvalidPrefixError,
    MissingFieldError,
    PrefixOutOfRangeError,
)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_MAX_PREFIX_VALUE = 0xFF


@dataclass(frozen=True, slots=True)
class SubnetDescriptor:
    """An IP address paired with a prefix length."""

    address: IPAddress
    cidr: int

    @property
    def version(self) -> int:
        return self.address.version

    def __str__(self) -> str:
        return f"{self.address}/{self.cidr}"


def parse_subnet(text: str, *, policy: Optional[SubnetPolicy] = None) -> Optional[SubnetDescriptor]:
    """Convert a string to an IP/CIDR pair.

    Returns ``None`` for empty input so the caller can substitute a default
    subnet.

    Args:
        text: Text of the form ``<ip>/<prefix>``, e.g. ``192.168.1.1/24`` or
            ``fe80::1/64``.
        policy: Prefix length bounds. Defaults to ``/30`` for IPv4 and
            ``/126`` for IPv6.

    Raises:
        MissingFieldError: If there is no ``/`` and so no prefix length.
        InvalidAddressError: If the address is neither IPv4 nor IPv6.
        InvalidPrefixError: If the prefix length is not an unsigned 8-bit integer.
        PrefixOutOfRangeError: If the prefix length exceeds the bound for the
            address family.
    """

    if not text:
        return None

    policy = policy or SubnetPolicy()
    address_text, separator, prefix_text = text.partition("/")

    try:
        address = ipaddress.ip_address(address_text)
    except ValueError as e:
        raise InvalidAddressError(f"could not parse IP address {address_text!r}", source=e) from e
    if getattr(address, "scope_id", None):
        raise InvalidAddressError(f"IPv6 zone not allowed in subnet address {address_text!r}")

    if not separator:
        raise MissingFieldError("prefix")
    if not (prefix_text.isascii() and prefix_text.isdigit()) or int(prefix_text) > _MAX_PREFIX_VALUE:
        raise InvalidPrefixError(f"could not parse CIDR {prefix_text!r}")
    cidr = int(prefix_text)

    max_prefix = policy.max_prefix(address.version)
    if cidr > max_prefix:
        raise PrefixOutOfRangeError(f"invalid CIDR /{cidr} for IPv{address.version}, maximum is /{max_prefix}")

    return SubnetDescriptor(address=address, cidr=cidr)
