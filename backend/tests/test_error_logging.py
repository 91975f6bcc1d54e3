"""
Tests for the error logging service
"""
import logging
import uuid

import pytest

from healthguard.models.error_log import ErrorLog
from healthguard.services.error_logging import ErrorLogger, sanitize_data, setup_file_logging, truncate_string


class TestSanitize:
    def test_sensitive_keys_are_redacted(self):
        data = {
            "email": "asha@example.com",
            "password": "SecurePass123!",
            "nested": {"refresh_token": "abc", "items": [{"api_key": "k"}]},
        }

        assert sanitize_data(data) == {
            "email": "asha@example.com",
            "password": "[REDACTED]",
            "nested": {"refresh_token": "[REDACTED]", "items": [{"api_key": "[REDACTED]"}]},
        }

    def test_jwt_looking_strings_are_redacted(self):
        assert sanitize_data("eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.payload") == "[REDACTED_TOKEN]"
        assert sanitize_data("eyJ") == "eyJ"

    def test_truncate(self):
        assert truncate_string("abc", 5) == "abc"
        assert truncate_string("abcdefgh", 5).startswith("abcde... [TRUNCATED, total 8 chars]")


class TestErrorLogger:
    def test_without_database_nothing_is_stored(self):
        assert ErrorLogger().log_error(ValueError("bad")) is None

    def test_stores_row(self, session_factory, db):
        error_logger = ErrorLogger()
        error_logger.set_db_session_factory(session_factory)

        try:
            raise ValueError("broken value")
        except ValueError as e:
            error_id = error_logger.log_error(e, severity="critical", context={"token": "secret"})

        row = db.query(ErrorLog).filter(ErrorLog.id == error_id).one()
        assert row.error_type == "ValueError"
        assert row.message == "broken value"
        assert row.severity == "critical"
        assert row.function == "test_stores_row"
        assert "ValueError: broken value" in row.stack_trace
        assert row.context_data == {"token": "[REDACTED]"}

    def test_status_code_is_stored_as_text(self, session_factory, db):
        error = RuntimeError("upstream")
        error.status_code = 503
        error_logger = ErrorLogger()
        error_logger.set_db_session_factory(session_factory)

        error_id = error_logger.log_error(error)

        assert db.query(ErrorLog).filter(ErrorLog.id == error_id).one().error_code == "503"

    def test_database_failure_does_not_raise(self):
        def broken_factory():
            raise RuntimeError("database down")

        error_logger = ErrorLogger()
        error_logger.set_db_session_factory(broken_factory)

        assert error_logger.log_error(ValueError("bad")) is None

    def test_plain_identity_values(self, session_factory, db):
        user_id = uuid.uuid4()
        error_logger = ErrorLogger()
        error_logger.set_db_session_factory(session_factory)

        error_id = error_logger.log_error(ValueError("bad"), user_id=user_id, user_email="asha@example.com")

        row = db.query(ErrorLog).filter(ErrorLog.id == error_id).one()
        assert row.user_id == user_id
        assert row.user_email == "asha@example.com"


class TestFileLogging:
    @pytest.fixture(autouse=True)
    def restore_root_handlers(self):
        root = logging.getLogger()
        before = list(root.handlers)
        yield
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
                handler.close()

    def test_installs_handlers_once(self, tmp_path):
        root = logging.getLogger()
        count = len(root.handlers)

        assert setup_file_logging(str(tmp_path / "logs")) is True
        assert setup_file_logging(str(tmp_path / "logs")) is True

        assert len(root.handlers) == count + 2
        assert (tmp_path / "logs" / "errors.log").exists()

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        assert setup_file_logging(str(blocker / "logs")) is False
