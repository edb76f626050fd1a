"""Key material for roam networks.

Modules in this package provide *thin* wrappers around vetted implementations
from :pypi:`cryptography`.
"""

from __future__ import annotations

from .ed25519 import (
    Ed25519KeyPair,
    ed25519_keypair_from_seed,
    ed25519_private_from_bytes,
    ed25519_public_from_bytes,
)
from .keys import NetworkKey, generate_network_key
from .random import RandomSource, random_bytes
from .token import decode_token, encode_token

__all__ = [
    "Ed25519KeyPair",
    "NetworkKey",
    "RandomSource",
    "decode_token",
    "ed25519_keypair_from_seed",
    "ed25519_private_from_bytes",
    "ed25519_public_from_bytes",
    "encode_token",
    "generate_network_key",
    "random_bytes",
]
