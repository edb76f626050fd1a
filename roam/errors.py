"""Shared exceptions for :mod:`roam`.

Every failure the core can report is a :class:`RoamError` tagged with an
:class:`ErrorKind`, so callers such as an interactive prompt can decide which
field to ask for again without matching on messages. The underlying error, if
any, is kept both as ``__cause__`` and as :attr:`RoamError.source`.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure reported by the network identity core."""

    EMPTY_NAME = "empty_name"
    MISSING_FIELD = "missing_field"
    INVALID_ADDRESS = "invalid_address"
    INVALID_PREFIX = "invalid_prefix"
    PREFIX_OUT_OF_RANGE = "prefix_out_of_range"
    DECODE_MALFORMED = "decode_malformed"
    RNG_UNAVAILABLE = "rng_unavailable"
    INVALID_KEY = "invalid_key"


class RoamError(Exception):
    """Base error for all roam operations."""

    kind: ErrorKind

    def __init__(self, message: str, *, source: BaseException | None = None) -> None:
        super().__init__(message)
        self.source = source
        if source is not None:
            self.__cause__ = source


class AssembleError(RoamError):
    """Raised when a network configuration cannot be assembled."""


class EmptyNameError(AssembleError):
    """Raised when a network is given an empty name."""

    kind = ErrorKind.EMPTY_NAME


class SubnetParseError(RoamError):
    """Base error for malformed ``<ip>/<prefix>`` text."""


class MissingFieldError(SubnetParseError):
    """Raised when the address or prefix part of a subnet is absent."""

    kind = ErrorKind.MISSING_FIELD

    def __init__(self, field: str, *, source: BaseException | None = None) -> None:
        super().__init__(f"{field} not provided", source=source)
        self.field = field


class InvalidAddressError(SubnetParseError):
    """Raised when the address part is neither IPv4 nor IPv6."""

    kind = ErrorKind.INVALID_ADDRESS


class InvalidPrefixError(SubnetParseError):
    """Raised when the prefix length is not an unsigned 8-bit integer."""

    kind = ErrorKind.INVALID_PREFIX


class PrefixOutOfRangeError(SubnetParseError):
    """Raised when the prefix length exceeds the bound for its address family."""

    kind = ErrorKind.PREFIX_OUT_OF_RANGE


class CryptoError(RoamError):
    """Base error for key material operations."""


class DecodeError(CryptoError):
    """Raised when a key token contains no decodable key."""

    kind = ErrorKind.DECODE_MALFORMED


class RngUnavailableError(CryptoError):
    """Raised when the secure random source cannot provide a seed.

    Network creation must abort on this error; there is no weaker fallback.
    """

    kind = ErrorKind.RNG_UNAVAILABLE


class InvalidKeyError(CryptoError):
    """Raised when key material is malformed or the halves do not match."""

    kind = ErrorKind.INVALID_KEY
