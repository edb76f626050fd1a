"""Network configuration assembly and serialization.

A :class:`NetworkConfig` is built once from a name, a freshly generated key and
a subnet, and is immutable afterwards. Persisting it is left to the caller:
:meth:`NetworkConfig.to_record` and :meth:`NetworkConfig.to_json` produce the
saved-config representation, and :meth:`NetworkConfig.from_record` reads it
back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..config import Config
from ..crypto.keys import NetworkKey, generate_network_key
from ..crypto.random import RandomSource, random_bytes
from ..crypto.token import decode_token, encode_token
from ..errors import (
    DecodeError,
    EmptyNameError,
    InvalidAddressError,
    InvalidPrefixError,
    MissingFieldError,
)
from .subnet import IPAddress, SubnetDescriptor, parse_subnet

logger = logging.getLogger(__name__)

RECORD_FIELDS = ("name", "key", "network_addr", "cidr")


@dataclass(frozen=True, slots=True)
class NetworkConfig:
    """The internal representation of a network configuration.

    Args:
        name: Name of the network. This can be anything; if a node knows two
            networks with the same name one of them may get a number appended.
        key: Network key associated with this network.
        network_addr: Network address of the network's subnet.
        cidr: Size of the network mask in CIDR representation.
    """

    name: str
    key: NetworkKey
    network_addr: IPAddress
    cidr: int

    @property
    def subnet(self) -> SubnetDescriptor:
        return SubnetDescriptor(address=self.network_addr, cidr=self.cidr)

    def to_record(self) -> Dict[str, Any]:
        """Flatten into a JSON-safe mapping for a persistence layer.

        The key is rendered as a key token. Field order is part of the saved
        config format.
        """

        return {
            "name": self.name,
            "key": encode_token(self.key),
            "network_addr": str(self.network_addr),
            "cidr": self.cidr,
        }

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        """Convert to JSON text, to be saved as a config file."""

        return json.dumps(self.to_record(), indent=indent)

    @classmethod
    def from_record(cls, record: Mapping[str, Any], *, config: Optional[Config] = None) -> NetworkConfig:
        """Rebuild a configuration from a mapping produced by :meth:`to_record`.

        Raises:
            MissingFieldError: If a record field is absent.
            EmptyNameError: If the saved name is empty or not text.
            DecodeError: If the key token is not text or does not decode.
            SubnetParseError: If the saved address or prefix length is invalid.
        """

        config = config or Config()
        for field in RECORD_FIELDS:
            if field not in record:
                raise MissingFieldError(field)

        name, token = record["name"], record["key"]
        network_addr, cidr = record["network_addr"], record["cidr"]
        if not isinstance(name, str):
            raise EmptyNameError(f"network name must be text, got {type(name).__name__}")
        if not isinstance(token, str):
            raise DecodeError(f"key token must be text, got {type(token).__name__}")
        if not isinstance(network_addr, str):
            raise InvalidAddressError(f"network address must be text, got {type(network_addr).__name__}")
        if isinstance(cidr, bool) or not isinstance(cidr, int):
            raise InvalidPrefixError(f"CIDR must be an integer, got {type(cidr).__name__}")

        key = decode_token(token, lenient=config.get("lenient_decode"))
        subnet = parse_subnet(f"{network_addr}/{cidr}", policy=config.subnet_policy())
        return build_network_config(name, key, subnet)

    @classmethod
    def from_json(cls, text: str, *, config: Optional[Config] = None) -> NetworkConfig:
        """Parse JSON text produced by :meth:`to_json`."""

        return cls.from_record(json.loads(text), config=config)


def build_network_config(name: str, key: NetworkKey, subnet: SubnetDescriptor) -> NetworkConfig:
    """Package an existing key and subnet under a network name.

    Raises:
        EmptyNameError: If ``name`` is empty.
    """

    if not name:
        raise EmptyNameError("a network name needs to be provided")
    return NetworkConfig(name=name, key=key, network_addr=subnet.address, cidr=subnet.cidr)


def default_subnet(config: Optional[Config] = None) -> SubnetDescriptor:
    """Return the subnet used when none is given, ``192.168.251.0/24`` by default.

    The configured default is held to the same rules as user input.

    Raises:
        SubnetParseError: If the configured default is malformed or empty.
    """

    config = config or Config()
    subnet_text = config.get("default_subnet")
    subnet = parse_subnet(subnet_text, policy=config.subnet_policy())
    if subnet is None:
        raise MissingFieldError("default_subnet")
    return subnet


def assemble_network_config(
    name: str,
    subnet_text: str,
    *,
    rng: RandomSource = random_bytes,
    config: Optional[Config] = None,
) -> NetworkConfig:
    """Create the configuration for a new network.

    Args:
        name: Network name. Must not be empty.
        subnet_text: ``<ip>/<prefix>`` text, or an empty string for the
            default subnet.
        rng: Random byte source for key generation.
        config: Settings for subnet bounds and the default subnet.

    Returns:
        A new :class:`NetworkConfig` holding a controller key.

    Raises:
        EmptyNameError: If ``name`` is empty.
        SubnetParseError: If ``subnet_text``, or the configured default used
            in its place, is malformed.
        RngUnavailableError: If no secure randomness is available.
    """

    config = config or Config()
    if not name:
        raise EmptyNameError("a network name needs to be provided")

    subnet = parse_subnet(subnet_text, policy=config.subnet_policy())
    if subnet is None:
        subnet = default_subnet(config)
        logger.debug(f"No subnet given, using default {subnet}")

    key = generate_network_key(rng)
    network = build_network_config(name, key, subnet)
    logger.info(f"Assembled network {name!r} on {subnet}")
    return network
