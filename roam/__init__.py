"""Roam: a direct peer-to-peer VPN.

This package currently provides the network identity core: network keys and
their token format under :mod:`roam.crypto`, and subnet parsing plus network
configuration assembly under :mod:`roam.network`.
"""

__version__ = "0.1.0"

from .config import Config, RoamSettings
from .crypto import NetworkKey, decode_token, encode_token, generate_network_key
from .errors import ErrorKind, RoamError
from .network import NetworkConfig, SubnetDescriptor, assemble_network_config, parse_subnet

__all__ = [
    "Config",
    "ErrorKind",
    "NetworkConfig",
    "NetworkKey",
    "RoamError",
    "RoamSettings",
    "SubnetDescriptor",
    "assemble_network_config",
    "decode_token",
    "encode_token",
    "generate_network_key",
    "parse_subnet",
]
