"""
Unit tests for the structlog setup.
"""

import pytest
import structlog

from directory_auth.logging import _redact_sensitive, configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_redacts_sensitive_values():
    event = {"event": "login_failed", "password": "pw", "Authorization": "Bearer abc", "identifier": "admin"}

    result = _redact_sensitive(None, "info", event)

    assert result["password"] == "***"
    assert result["Authorization"] == "***"
    assert result["identifier"] == "admin"


def test_keeps_token_id():
    event = {"event": "token_revoked", "token_id": "0b0c"}

    assert _redact_sensitive(None, "info", event)["token_id"] == "0b0c"


@pytest.mark.parametrize("json_output, renderer", [
    (True, structlog.processors.JSONRenderer),
    (False, structlog.dev.ConsoleRenderer),
])
def test_configure_installs_redaction_and_renderer(json_output, renderer):
    configure_logging("DEBUG", json_output=json_output)

    processors = structlog.get_config()["processors"]
    assert _redact_sensitive in processors
    assert isinstance(processors[-1], renderer)


def test_get_logger_binds_to_filtering_logger():
    configure_logging("WARNING")

    bound = get_logger("directory_auth.test").bind(component="test")

    assert isinstance(bound, structlog.get_config()["wrapper_class"])
    assert bound.info("dropped_below_level") is None
