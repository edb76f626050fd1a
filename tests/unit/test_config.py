"""Unit tests for roam.config module."""

import pytest

from roam.config import DEFAULT_SUBNET, Config, RoamSettings, SubnetPolicy, TokenPolicy


class TestSubnetPolicy:
    """Test SubnetPolicy dataclass."""

    def test_default_policy(self):
        """Test default prefix bounds."""
        policy = SubnetPolicy()
        assert policy.max_ipv4_prefix == 30
        assert policy.max_ipv6_prefix == 126

    def test_max_prefix_by_version(self):
        """Test bounds are chosen per address family."""
        policy = SubnetPolicy(max_ipv4_prefix=28, max_ipv6_prefix=120)
        assert policy.max_prefix(4) == 28
        assert policy.max_prefix(6) == 120


class TestRoamSettings:
    """Test RoamSettings dataclass."""

    def test_default_settings(self):
        """Test default settings."""
        settings = RoamSettings()
        assert settings.default_subnet == DEFAULT_SUBNET == "192.168.251.0/24"
        assert settings.subnet == SubnetPolicy()
        assert settings.token == TokenPolicy()
        assert settings.token.lenient_decode is True

    def test_policies_not_shared(self):
        """Test each settings instance owns its policies."""
        a = RoamSettings()
        b = RoamSettings()
        a.subnet.max_ipv4_prefix = 24
        assert b.subnet.max_ipv4_prefix == 30


class TestConfig:
    """Test main Config class."""

    @pytest.fixture
    def config(self):
        """Create a config instance for testing."""
        return Config()

    def test_default_initialization(self, config):
        """Test default configuration initialization."""
        assert config.settings == RoamSettings()

    def test_get_reads_policies(self, config):
        """Test lookups fall through to nested policies."""
        assert config.get("default_subnet") == "192.168.251.0/24"
        assert config.get("max_ipv6_prefix") == 126
        assert config.get("lenient_decode") is True

    def test_custom_config_takes_precedence(self, config):
        """Test setting custom configuration."""
        config.set_custom_config("max_ipv4_prefix", 16)
        assert config.get("max_ipv4_prefix") == 16

    def test_get_with_default(self, config):
        """Test getting configuration with default value."""
        assert config.get("nonexistent_key", "default") == "default"
        assert config.get("nonexistent_key") is None

    def test_subnet_policy_defaults(self, config):
        """Test the effective policy matches the settings."""
        assert config.subnet_policy() == SubnetPolicy()

    def test_subnet_policy_uses_custom_config(self, config):
        """Test custom bounds reach the effective policy."""
        config.set_custom_config("max_ipv6_prefix", 64)
        policy = config.subnet_policy()
        assert policy.max_ipv6_prefix == 64
        assert policy.max_ipv4_prefix == 30

    def test_validate_checks_custom_config(self, config):
        """Test validation sees custom overrides."""
        config.set_custom_config("max_ipv4_prefix", 40)
        assert "max_ipv4_prefix must be between 0 and 32" in config.validate()

    def test_from_environment_overrides(self):
        """Test ROAM_* variables are applied."""
        config = Config.from_environment({
            "ROAM_DEFAULT_SUBNET": " 10.0.0.0/8 ",
            "ROAM_MAX_IPV4_PREFIX": "29",
            "ROAM_MAX_IPV6_PREFIX": "112",
            "ROAM_LENIENT_TOKENS": "no",
        })
        assert config.settings.default_subnet == "10.0.0.0/8"
        assert config.settings.subnet.max_ipv4_prefix == 29
        assert config.settings.subnet.max_ipv6_prefix == 112
        assert config.settings.token.lenient_decode is False

    def test_from_environment_reads_os_environ(self, monkeypatch):
        """Test os.environ is used when no mapping is given."""
        monkeypatch.setenv("ROAM_MAX_IPV4_PREFIX", "27")
        assert Config.from_environment().settings.subnet.max_ipv4_prefix == 27

    def test_from_environment_rejects_bad_values(self):
        """Test unconvertible overrides raise."""
        with pytest.raises(ValueError):
            Config.from_environment({"ROAM_MAX_IPV4_PREFIX": "many"})
        with pytest.raises(ValueError):
            Config.from_environment({"ROAM_LENIENT_TOKENS": "maybe"})

    def test_validate_valid_config(self, config):
        """Test validating a valid configuration."""
        assert config.validate() == []

    def test_validate_invalid_config(self, config):
        """Test validating an invalid configuration."""
        config.settings.subnet.max_ipv4_prefix = 33
        config.settings.subnet.max_ipv6_prefix = -1
        config.settings.default_subnet = "somewhere"

        errors = config.validate()
        assert "max_ipv4_prefix must be between 0 and 32" in errors
        assert "max_ipv6_prefix must be between 0 and 128" in errors
        assert "default_subnet must look like <ip>/<prefix>" in errors
