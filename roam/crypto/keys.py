"""Network keys: the access/secret credential pair that identifies a network.

A network is identified by an Ed25519 key pair. The public half is the
*access key*: anyone holding it may join. The private half is the *secret key*
and is only held by the network's controller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import InvalidKeyError
from .ed25519 import SEED_LENGTH, ed25519_keypair_from_seed, ed25519_public_from_bytes
from .random import RandomSource, draw, random_bytes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, repr=False)
class NetworkKey:
    """A network key used to connect to or control a network.

    Args:
        access_key: Public key bytes. Always present.
        secret_key: Private key bytes, present only for the controller.
    """

    access_key: bytes
    secret_key: bytes | None = None

    def __post_init__(self) -> None:
        # Copy into immutable bytes so no caller-held buffer aliases the key.
        object.__setattr__(self, "access_key", bytes(self.access_key))
        if not self.access_key:
            raise InvalidKeyError("access key must not be empty")
        if self.secret_key is not None:
            object.__setattr__(self, "secret_key", bytes(self.secret_key))
            if not self.secret_key:
                raise InvalidKeyError("secret key must not be empty")

    @property
    def is_controller(self) -> bool:
        """Whether this key grants control over the network."""

        return self.secret_key is not None

    def without_secret(self) -> NetworkKey:
        """Return the access-only key, suitable for handing to joining peers."""

        return NetworkKey(access_key=self.access_key)

    def verify(self) -> None:
        """Check that the key material is a usable Ed25519 key.

        For a controller key the secret key must derive the access key.

        Raises:
            InvalidKeyError: If either half is malformed or they do not match.
        """

        if self.secret_key is None:
            ed25519_public_from_bytes(self.access_key)
            return

        derived = ed25519_keypair_from_seed(self.secret_key).public_bytes()
        if derived != self.access_key:
            raise InvalidKeyError("secret key does not match access key")

    def to_token(self) -> str:
        """Encode as a key token, see :func:`roam.crypto.token.encode_token`."""

        from .token import encode_token

        return encode_token(self)

    @classmethod
    def from_token(cls, token: str, *, lenient: bool = True) -> NetworkKey:
        """Decode a key token, see :func:`roam.crypto.token.decode_token`."""

        from .token import decode_token

        return decode_token(token, lenient=lenient)

    def __str__(self) -> str:
        return self.to_token()

    def __repr__(self) -> str:
        secret = "None" if self.secret_key is None else "<redacted>"
        return f"NetworkKey(access_key={self.access_key.hex()!r}, secret_key={secret})"


def generate_network_key(rng: RandomSource = random_bytes) -> NetworkKey:
    """Generate an access and secret key pair.

    A 32-byte seed is drawn from ``rng`` and an Ed25519 key pair is derived from
    it deterministically.

    Args:
        rng: Random byte source. Defaults to the operating system CSPRNG.

    Returns:
        A controller :class:`NetworkKey`.

    Raises:
        RngUnavailableError: If ``rng`` cannot supply the seed.
    """

    seed = draw(rng, SEED_LENGTH)
    keypair = ed25519_keypair_from_seed(seed)
    key = NetworkKey(access_key=keypair.public_bytes(), secret_key=keypair.private_bytes())
    logger.debug(f"Generated network key {key.access_key.hex()[:8]}...")
    return key
