"""Tests for structured logging helpers."""

import logging

from scm_backend.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    mask_secrets,
    safe_log_value,
)


class TestMaskSecrets:
    """Tests for credential masking."""

    def test_masks_nested_keys(self) -> None:
        settings = {"service": "sap", "api_key": "k-123", "auth": {"Access_Token": "t"}}

        masked = mask_secrets(settings)

        assert masked == {"service": "sap", "api_key": "***", "auth": {"Access_Token": "***"}}
        assert settings["api_key"] == "k-123"

    def test_empty_secret_left_visible(self) -> None:
        assert mask_secrets({"api_key": None}) == {"api_key": None}


class TestSafeLogValue:
    """Tests for safe_log_value."""

    def test_none(self) -> None:
        assert safe_log_value(None) == "None"

    def test_list_summarized(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"

    def test_small_dict_rendered_masked(self) -> None:
        assert "k-1" not in safe_log_value({"api_key": "k-1"})

    def test_large_dict_summarized(self) -> None:
        assert safe_log_value({str(i): i for i in range(10)}) == "dict(10 keys)"

    def test_truncates(self) -> None:
        result = safe_log_value("x" * 20, max_length=5)
        assert result == "xxxxx... (truncated, 20 total)"


class TestLogWithContext:
    """Tests for log helpers emitting extras."""

    def test_extras_and_masking(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.INFO, logger="tests.log_utils"):
            log_with_context(logger, logging.INFO, "updated", category="iot", api_key="secret")

        record = caplog.records[-1]
        assert record.category == "iot"
        assert record.api_key == "***"

    def test_exception_context(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")

        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            with caplog.at_level(logging.ERROR, logger="tests.log_utils"):
                log_exception_with_context(logger, "failed", e, endpoint="sync")

        record = caplog.records[-1]
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "boom"
        assert record.exc_info is not None
