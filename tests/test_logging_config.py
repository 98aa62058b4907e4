"""
Tests for logging setup and log sanitisation.
"""
import logging

import pytest

from app.core.logging_config import setup_logging, sanitize_log_data


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_sanitize_log_data_redacts_credentials():
    data = {
        "email": "jane@example.com",
        "password": "hunter22",
        "password_hash": "$2b$...",
        "DATABASE_URL": "postgresql://u:p@db/app",
        "api_token": "abc",
    }
    
    sanitized = sanitize_log_data(data)
    
    assert sanitized["email"] == "jane@example.com"
    for key in ("password", "password_hash", "api_token"):
        assert sanitized[key] == "***REDACTED***"
    assert sanitized["DATABASE_URL"] == "postgresql://u:***@db/app"
    assert data["password"] == "hunter22"


def test_sanitize_log_data_nested():
    sanitized = sanitize_log_data({"user": {"email": "a@example.com", "password": "x"}, "count": 3})
    
    assert sanitized == {"user": {"email": "a@example.com", "password": "***REDACTED***"}, "count": 3}


def test_setup_logging_writes_rotating_file(tmp_path, restore_root_logger):
    setup_logging("debug", log_dir=str(tmp_path / "logs"))
    
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    
    logging.getLogger("app.test").info("hello from tests")
    for handler in root.handlers:
        handler.flush()
    
    log_file = tmp_path / "logs" / "placement_hub.log"
    assert "hello from tests" in log_file.read_text()


def test_setup_logging_unknown_level_falls_back_to_info(tmp_path, restore_root_logger):
    setup_logging("chatty", log_dir=str(tmp_path))
    
    assert logging.getLogger().level == logging.INFO
