"""Configuration management for roam."""

from __future__ import annotations

import ipaddress
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEFAULT_SUBNET = "192.168.251.0/24"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class SubnetPolicy:
    """Bounds applied when parsing a network's subnet."""

    max_ipv4_prefix: int = 30
    max_ipv6_prefix: int = 126

    def max_prefix(self, version: int) -> int:
        """Return the largest accepted prefix length for an IP version."""
        return self.max_ipv4_prefix if version == 4 else self.max_ipv6_prefix


@dataclass
class TokenPolicy:
    """Key token decoding settings."""

    lenient_decode: bool = True


@dataclass
class RoamSettings:
    """All settings used when creating or loading a network."""

    default_subnet: str = DEFAULT_SUBNET
    subnet: SubnetPolicy = field(default_factory=SubnetPolicy)
    token: TokenPolicy = field(default_factory=TokenPolicy)


class Config:
    """
    Configuration manager for roam.

    Wraps :class:`RoamSettings` with custom overrides and environment
    variable lookups.
    """

    def __init__(self, settings: Optional[RoamSettings] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            settings: Settings to start from. Defaults are used if omitted.
        """
        self.settings = settings or RoamSettings()
        self._custom_config: Dict[str, Any] = {}

    @classmethod
    def from_environment(cls, environ: Optional[Dict[str, str]] = None) -> Config:
        """
        Build a configuration with ``ROAM_*`` environment overrides applied.

        Args:
            environ: Mapping to read instead of :data:`os.environ`.

        Raises:
            ValueError: If an override cannot be converted.
        """
        environ = os.environ if environ is None else environ
        config = cls()
        settings = config.settings

        if "ROAM_DEFAULT_SUBNET" in environ:
            settings.default_subnet = environ["ROAM_DEFAULT_SUBNET"].strip()
        if "ROAM_MAX_IPV4_PREFIX" in environ:
            settings.subnet.max_ipv4_prefix = int(environ["ROAM_MAX_IPV4_PREFIX"])
        if "ROAM_MAX_IPV6_PREFIX" in environ:
            settings.subnet.max_ipv6_prefix = int(environ["ROAM_MAX_IPV6_PREFIX"])
        if "ROAM_LENIENT_TOKENS" in environ:
            settings.token.lenient_decode = _parse_bool(environ["ROAM_LENIENT_TOKENS"])

        return config

    def set_custom_config(self, key: str, value: Any) -> None:
        """
        Set custom configuration value.

        Args:
            key: Configuration key.
            value: Configuration value.
        """
        self._custom_config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Checks custom config first, then the settings and their policies.

        Args:
            key: Configuration key.
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        if key in self._custom_config:
            return self._custom_config[key]

        for section in (self.settings, self.settings.subnet, self.settings.token):
            if hasattr(section, key):
                return getattr(section, key)

        return default

    def subnet_policy(self) -> SubnetPolicy:
        """
        Get the prefix bounds in effect, including custom overrides.

        Returns:
            Subnet policy built from ``max_ipv4_prefix`` and ``max_ipv6_prefix``.
        """
        return SubnetPolicy(
            max_ipv4_prefix=self.get("max_ipv4_prefix"),
            max_ipv6_prefix=self.get("max_ipv6_prefix"),
        )

    def validate(self) -> List[str]:
        """
        Validate current configuration.

        Returns:
            List of validation errors. Empty if valid.
        """
        errors = []
        policy = self.subnet_policy()

        if not 0 <= policy.max_ipv4_prefix <= 32:
            errors.append("max_ipv4_prefix must be between 0 and 32")

        if not 0 <= policy.max_ipv6_prefix <= 128:
            errors.append("max_ipv6_prefix must be between 0 and 128")

        try:
            ipaddress.ip_network(self.get("default_subnet"), strict=False)
        except ValueError:
            errors.append("default_subnet must look like <ip>/<prefix>")

        return errors


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")
