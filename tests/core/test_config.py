import pytest
import structlog

from locationiq.core.config import Settings
from locationiq.core.errors import (
    APIError,
    BadRequestError,
    InvalidArgumentError,
    LocationIQError,
    NotInitializedError,
    UnknownAPIError,
)
from locationiq.core.logging_config import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOCATIONIQ_API_KEY", raising=False)
        monkeypatch.delenv("LOCATIONIQ_BASE_URL", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        s = Settings(_env_file=None)
        assert s.maps_provider == "locationiq"
        assert s.locationiq_api_key == ""
        assert s.locationiq_base_url == "https://api.locationiq.com/v1"
        assert s.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LOCATIONIQ_API_KEY", "pk.env")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings(_env_file=None)
        assert s.locationiq_api_key == "pk.env"
        assert s.log_level == "DEBUG"


class TestErrors:
    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InvalidArgumentError, LocationIQError)

    def test_not_initialized_is_runtime_error(self):
        assert issubclass(NotInitializedError, RuntimeError)

    def test_bad_request_message_includes_body(self):
        error = BadRequestError("Invalid key format")
        assert error.message == "Bad request: Invalid key format"
        assert error.status_code == 400
        assert isinstance(error, APIError)

    def test_unknown_keeps_cause(self):
        cause = ConnectionError("reset")
        error = UnknownAPIError("Request failed", cause=cause)
        assert error.cause is cause
        assert error.status_code is None


class TestLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_configure_with_explicit_level(self):
        configure_logging("warning")
        assert structlog.is_configured()

    def test_configure_rejects_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")
