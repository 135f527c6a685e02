"""
Unit Tests for Configuration Module

These tests verify that the configuration system works correctly:
- Default values are applied when nothing is configured
- Environment variables override defaults
- Validation catches invalid configurations
- Property methods work as expected

Run with:
    pytest tests/unit/test_config.py -v
"""

import logging

import pytest

from core.config import Settings, settings, validate_configuration
from core.logging import get_logger, set_log_level


@pytest.fixture
def defaults():
    """Settings built from defaults only (no .env file)"""
    return Settings(_env_file=None)


class TestDefaults:
    """Test default values"""

    def test_fcoin_defaults(self, defaults):
        """Verify Fcoin endpoint and timeout defaults"""
        assert defaults.fcoin_base_url == "https://api.fcoin.com/v2/"
        assert defaults.fcoin_timeout == 2.0
        assert defaults.fcoin_cert_pem == ""

    def test_gateio_defaults(self, defaults):
        """Verify Gate.io endpoint default"""
        assert defaults.gateio_base_url == "https://data.gateio.io/api2/1/"

    def test_ca_bundle_defaults(self, defaults):
        """Verify CA bundle download defaults"""
        assert defaults.ca_bundle_url == "https://curl.haxx.se/ca/cacert.pem"
        assert defaults.ca_bundle_filename == "cacert.pem"
        assert defaults.fetch_ca_bundle is True

    def test_log_level_is_set(self, defaults):
        assert defaults.log_level == "INFO"


class TestEnvironmentOverrides:
    """Test that environment variables are picked up"""

    def test_timeout_from_environment(self, monkeypatch):
        monkeypatch.setenv("FCOIN_TIMEOUT", "3.5")
        assert Settings(_env_file=None).fcoin_timeout == 3.5

    def test_case_insensitive_names(self, monkeypatch):
        monkeypatch.setenv("gateio_api_key", "lower-key")
        assert Settings(_env_file=None).gateio_api_key == "lower-key"

    def test_fetch_flag_from_environment(self, monkeypatch):
        monkeypatch.setenv("FETCH_CA_BUNDLE", "false")
        assert Settings(_env_file=None).fetch_ca_bundle is False


class TestConfigurationProperties:
    """Test property methods and computed values"""

    def test_cert_path_none_when_empty(self, defaults):
        assert defaults.fcoin_cert_path is None

    def test_cert_path_when_set(self):
        config = Settings(_env_file=None, fcoin_cert_pem="/etc/ssl/cacert.pem")
        assert config.fcoin_cert_path == "/etc/ssl/cacert.pem"

    def test_credentials_require_key_and_secret(self):
        assert not Settings(_env_file=None, fcoin_api_key="k").has_fcoin_credentials
        assert Settings(_env_file=None, fcoin_api_key="k", fcoin_secret_key="s").has_fcoin_credentials
        assert not Settings(_env_file=None, gateio_secret_key="s").has_gateio_credentials
        assert Settings(_env_file=None, gateio_api_key="k", gateio_secret_key="s").has_gateio_credentials


class TestConfigurationValidation:
    """Test configuration validation function"""

    def test_validate_configuration_succeeds(self, defaults):
        """Verify validation passes with default configuration"""
        try:
            validate_configuration(defaults)
        except ValueError as e:
            pytest.fail(f"Configuration validation failed: {e}")

    def test_global_settings_validate(self):
        assert settings is not None
        validate_configuration()

    @pytest.mark.parametrize("field,value,message", [
        ("fcoin_base_url", "ftp://api.fcoin.com/v2/", "FCOIN_BASE_URL"),
        ("fcoin_base_url", "https://api.fcoin.com/v2", "must end with '/'"),
        ("gateio_base_url", "data.gateio.io/api2/1/", "GATEIO_BASE_URL"),
        ("fcoin_timeout", 0, "FCOIN_TIMEOUT"),
        ("fcoin_timeout", -1.5, "FCOIN_TIMEOUT"),
        ("log_level", "VERBOSE", "LOG_LEVEL"),
    ])
    def test_invalid_values_raise(self, field, value, message):
        config = Settings(_env_file=None, **{field: value})
        with pytest.raises(ValueError, match=message):
            validate_configuration(config)

    def test_log_level_is_case_insensitive(self):
        validate_configuration(Settings(_env_file=None, log_level="debug"))


class TestLogging:
    """Test the logging helpers"""

    def test_get_logger_namespace(self):
        assert get_logger("exchanges.fcoin").name == "exchangeapi.exchanges.fcoin"

    def test_library_logger_does_not_propagate(self):
        """Only the exchangeapi namespace is configured"""
        assert logging.getLogger("exchangeapi").propagate is False

    def test_set_log_level(self):
        library_logger = logging.getLogger("exchangeapi")
        previous = library_logger.level
        try:
            set_log_level("debug")
            assert library_logger.level == logging.DEBUG
            set_log_level("not-a-level")
            assert library_logger.level == logging.INFO
        finally:
            library_logger.setLevel(previous)


# ============================================
# Run Tests
# ============================================

if __name__ == "__main__":
    # Allow running this test file directly
    pytest.main([__file__, "-v"])
