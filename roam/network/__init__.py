"""Network configuration: subnets and assembly of new networks."""

from __future__ import annotations

from .assembler import (
    NetworkConfig,
    assemble_network_config,
    build_network_config,
    default_subnet,
)
from .subnet import SubnetDescriptor, parse_subnet

__all__ = [
    "NetworkConfig",
    "SubnetDescriptor",
    "assemble_network_config",
    "build_network_config",
    "default_subnet",
    "parse_subnet",
]
