# =============================================================================
# test_errors.py - Error Hierarchy and Reporter Tests
# =============================================================================

import io

import pytest

from krab.errors import (
    ErrorCollector,
    KrabError,
    ScanError,
    ScanFailedError,
    StreamReporter,
    TeeReporter,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from krab.value import BooleanValue, NilValue, NumberValue, StringValue


class TestErrorHierarchy:
    """Tests for exception classes and message formatting."""

    def test_scan_errors_are_krab_errors(self):
        assert issubclass(ScanError, KrabError)
        assert issubclass(UnterminatedStringError, ScanError)
        assert issubclass(UnexpectedCharacterError, ScanError)
        assert issubclass(ScanFailedError, KrabError)

    def test_message_format(self):
        error = ScanError("Something odd", 12)
        assert str(error) == "[line 12] Error: Something odd"

    def test_location_tag(self):
        error = ScanError("Expect ';'", 3, where=" at end")
        assert str(error) == "[line 3] Error at end: Expect ';'"

    def test_unexpected_character_keeps_char(self):
        error = UnexpectedCharacterError("@", 4)
        assert error.char == "@"
        assert error.line == 4
        assert error.message == "Unexpected character"


class TestReporters:
    """Tests for the diagnostic sinks."""

    def test_stream_reporter_writes_line(self):
        stream = io.StringIO()
        reporter = StreamReporter(stream)
        reporter.report(UnterminatedStringError(2))
        reporter.report(UnexpectedCharacterError("#", 5))
        assert stream.getvalue() == (
            "[line 2] Error: Unterminated string\n"
            "[line 5] Error: Unexpected character\n"
        )

    def test_collector_collects(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        collector.report(UnexpectedCharacterError("#", 1))
        collector.report(UnterminatedStringError(2))
        assert collector.has_errors()
        assert collector.error_count() == 2
        assert [e.line for e in collector.errors] == [1, 2]

    def test_collector_report_text(self):
        collector = ErrorCollector()
        collector.report(UnexpectedCharacterError("#", 1))
        assert collector.report_text() == (
            "[line 1] Error: Unexpected character\n"
            "1 error"
        )

    def test_collector_max_errors(self):
        collector = ErrorCollector(max_errors=2)
        for line in range(1, 6):
            collector.report(UnexpectedCharacterError("#", line))
        assert len(collector.errors) == 2
        assert collector.error_count() == 5
        assert "... 3 more not shown" in collector.report_text()
        assert collector.report_text().endswith("5 errors")

    def test_collector_clear(self):
        collector = ErrorCollector(max_errors=1)
        collector.report(UnexpectedCharacterError("#", 1))
        collector.report(UnexpectedCharacterError("#", 2))
        collector.clear()
        assert not collector.has_errors()
        assert collector.error_count() == 0

    def test_raise_if_errors(self):
        collector = ErrorCollector()
        collector.raise_if_errors()

        collector.report(UnterminatedStringError(7))
        with pytest.raises(ScanFailedError) as excinfo:
            collector.raise_if_errors()
        assert len(excinfo.value.errors) == 1
        assert "[line 7] Error: Unterminated string" in str(excinfo.value)

    def test_tee_reporter(self):
        first = ErrorCollector()
        second = ErrorCollector()
        TeeReporter(first, second).report(UnterminatedStringError(1))
        assert first.error_count() == 1
        assert second.error_count() == 1


class TestLiteralValues:
    """Tests for the literal value variants."""

    def test_payloads(self):
        assert BooleanValue(True).value is True
        assert NilValue().value is None
        assert NumberValue(1.5).value == 1.5
        assert StringValue("s").value == "s"

    def test_kinds(self):
        assert [v.kind for v in (BooleanValue(False), NilValue(), NumberValue(0.0), StringValue(""))] == [
            "Boolean", "Nil", "Number", "String",
        ]

    def test_nil_values_are_equal(self):
        assert NilValue() == NilValue()

    def test_str(self):
        assert str(BooleanValue(True)) == "true"
        assert str(NilValue()) == "nil"
        assert str(NumberValue(10.0)) == "10.0"
        assert str(StringValue("abc")) == "'abc'"
