"""Test configuration for roam package."""

import pytest

from roam.crypto import NetworkKey

# RFC 8032 section 7.1, test 1.
RFC8032_SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")


@pytest.fixture
def rfc8032_vector():
    """Ed25519 (seed, public key) test vector."""
    return RFC8032_SEED, RFC8032_PUBLIC


@pytest.fixture
def fixed_rng():
    """Random source that always returns the RFC 8032 test seed."""

    def rng(length: int) -> bytes:
        assert length == len(RFC8032_SEED)
        return RFC8032_SEED

    return rng


@pytest.fixture
def access_only_key():
    """Access-only key whose token is ``accs``."""
    return NetworkKey(access_key=bytes([105, 199, 44]))


@pytest.fixture
def controller_key():
    """Key with a secret half whose token is ``accs:scrt``."""
    return NetworkKey(access_key=bytes([105, 199, 44]), secret_key=bytes([177, 202, 237]))
