"""Tests for request context tracking and the logging filter."""

import logging

from scm_backend.observability.correlation import (
    RequestContextFilter,
    clear_correlation_id,
    get_correlation_id,
    get_request_user,
    set_correlation_id,
    set_request_user,
)


class TestCorrelationId:
    """Tests for correlation ID context helpers."""

    def teardown_method(self) -> None:
        clear_correlation_id()

    def test_set_explicit_id(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"

    def test_generates_id_when_missing(self) -> None:
        value = set_correlation_id()
        assert len(value) == 32
        assert get_correlation_id() == value

    def test_clear_resets_user_too(self) -> None:
        set_correlation_id("req-2")
        set_request_user("user-1")

        clear_correlation_id()

        assert get_correlation_id() == ""
        assert get_request_user() == ""


class TestRequestContextFilter:
    """Tests for RequestContextFilter."""

    def teardown_method(self) -> None:
        clear_correlation_id()

    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)

    def test_stamps_context(self) -> None:
        set_correlation_id("req-3")
        set_request_user("user-9")
        record = self._record()

        assert RequestContextFilter().filter(record) is True
        assert record.correlation_id == "req-3"
        assert record.user_id == "user-9"

    def test_placeholders_outside_request(self) -> None:
        record = self._record()
        RequestContextFilter().filter(record)
        assert record.correlation_id == "-"
        assert record.user_id == "-"
