"""Key token codec.

A key token is the text form of a :class:`~roam.crypto.keys.NetworkKey`::

    <access_key>
    <access_key>:<secret_key>

where each part is url-safe base64 without padding. The token is what gets
saved in network configs and what users paste to connect, so the format is
compatibility sensitive.
"""

from __future__ import annotations

import base64
import logging
import re

from ..errors import DecodeError
from .keys import NetworkKey

logger = logging.getLogger(__name__)

SEPARATOR = ":"

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]+")


def _b64e(b: bytes) -> str:
    return base64.urlsafe_b64encode(b).rstrip(b"=").decode("ascii")


def _b64d(s: str) -> bytes:
    """Strictly decode one unpadded url-safe base64 segment."""

    if not _SEGMENT_RE.fullmatch(s) or len(s) % 4 == 1:
        raise ValueError("not url-safe base64")
    data = base64.urlsafe_b64decode(s + "=" * (-len(s) % 4))
    # Reject encodings with non-zero trailing bits so every key has one token.
    if _b64e(data) != s:
        raise ValueError("non-canonical url-safe base64")
    return data


def encode_token(key: NetworkKey) -> str:
    """Serialize a network key into a colon-separated token.

    If the key contains a secret key the output is ``<access_key>:<secret_key>``,
    otherwise only the access key is returned.
    """

    access = _b64e(key.access_key)
    if key.secret_key is None:
        return access
    return access + SEPARATOR + _b64e(key.secret_key)


def decode_token(token: str, *, lenient: bool = True) -> NetworkKey:
    """Deserialize a colon-separated token into a network key.

    Each segment is decoded on its own. The first segment that decodes becomes
    the access key and the second, if any, the secret key.

    Args:
        token: Token produced by :func:`encode_token`.
        lenient: Skip segments that fail to decode instead of rejecting the
            token, as older clients did. Unlike older clients, a segment with
            non-zero trailing bits (such as ``"AB"``) fails to decode in
            either mode. With ``lenient=False`` any bad segment, or more than
            two segments, is an error.

    Raises:
        DecodeError: If no segment decodes, or on any bad segment in strict
            mode.
    """

    segments = token.split(SEPARATOR)
    if not lenient and len(segments) > 2:
        raise DecodeError(f"expected at most 2 token segments, got {len(segments)}")

    keys: list[bytes] = []
    for index, segment in enumerate(segments):
        try:
            keys.append(_b64d(segment))
        except ValueError as e:
            if not lenient:
                raise DecodeError(f"token segment {index} is not valid base64", source=e) from e
            logger.warning(f"Skipping undecodable key token segment {index}")

    if not keys:
        raise DecodeError("failed to deserialize access key")

    return NetworkKey(access_key=keys[0], secret_key=keys[1] if len(keys) > 1 else None)
