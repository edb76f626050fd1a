"""Ed25519 keypair utilities."""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)

from ..errors import InvalidKeyError

SEED_LENGTH = 32


@dataclass(frozen=True, slots=True)
class Ed25519KeyPair:
    """An Ed25519 key pair."""

    private: ed25519.Ed25519PrivateKey
    public: ed25519.Ed25519PublicKey

    def public_bytes(self) -> bytes:
        """Return the raw 32-byte public key."""

        return self.public.public_bytes(Encoding.Raw, PublicFormat.Raw)

    def private_bytes(self) -> bytes:
        """Return the raw 32-byte private key (the seed)."""

        return self.private.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())


def ed25519_keypair_from_seed(seed: bytes) -> Ed25519KeyPair:
    """Derive an Ed25519 key pair deterministically from a 32-byte seed."""

    if len(seed) != SEED_LENGTH:
        raise InvalidKeyError(f"ed25519 seed must be {SEED_LENGTH} bytes")
    private = ed25519_private_from_bytes(seed)
    return Ed25519KeyPair(private=private, public=private.public_key())


def ed25519_public_from_bytes(data: bytes) -> ed25519.Ed25519PublicKey:
    """Parse an Ed25519 public key from 32 raw bytes."""

    try:
        return ed25519.Ed25519PublicKey.from_public_bytes(data)
    except ValueError as e:
        raise InvalidKeyError("invalid ed25519 public key", source=e) from e


def ed25519_private_from_bytes(data: bytes) -> ed25519.Ed25519PrivateKey:
    """Parse an Ed25519 private key from 32 raw bytes."""

    try:
        return ed25519.Ed25519PrivateKey.from_private_bytes(data)
    except ValueError as e:
        raise InvalidKeyError("invalid ed25519 private key", source=e) from e
