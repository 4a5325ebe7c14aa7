"""
Krab Error Hierarchy
====================

This module defines the exceptions and diagnostic reporters used by the
Krab scanner.

Exception Hierarchy
-------------------
KrabError (base)
├── ScanError - lexical error at a source line
│   ├── UnterminatedStringError - end of input inside a string literal
│   └── UnexpectedCharacterError - character that starts no token
└── ScanFailedError - aggregate of collected scan errors

Reporting Model
---------------
Lexical errors are recoverable. The scanner never raises a ScanError;
it builds one and passes it to an ErrorReporter, then carries on with
the next character. What happens to the diagnostic is up to the reporter:

- StreamReporter prints it (stderr by default)
- ErrorCollector keeps it as data for later inspection
- TeeReporter forwards it to several reporters

Diagnostics are formatted as:
    [line N] Error: message
"""

import logging
from typing import IO, List, Optional, Protocol

import click

logger = logging.getLogger(__name__)


# =============================================================================
# Base Exception Class
# =============================================================================

class KrabError(Exception):
    """
    Base exception for all Krab errors.

    Allows callers to catch every Krab-specific error with one clause:

        try:
            collector.raise_if_errors()
        except KrabError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Scan Errors
# =============================================================================

class ScanError(KrabError):
    """
    Lexical error detected while scanning.

    Attributes:
        message: The error description
        line: Line at which the problem was detected (1-indexed)
        where: Location tag placed after "Error"; empty at the scanning stage
    """

    def __init__(self, message: str, line: int, where: str = ""):
        self.message = message
        self.line = line
        self.where = where
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format as '[line N] Error<where>: message'."""
        return f"[line {self.line}] Error{self.where}: {self.message}"


class UnterminatedStringError(ScanError):
    """
    End of input reached inside a string literal.

    Example:
        print "hello;    // no closing quote before end of file
    """

    def __init__(self, line: int):
        super().__init__("Unterminated string", line)


class UnexpectedCharacterError(ScanError):
    """
    Character that does not start any token.

    The offending character is consumed and skipped.
    """

    def __init__(self, char: str, line: int):
        self.char = char
        super().__init__("Unexpected character", line)


class ScanFailedError(KrabError):
    """
    Aggregate error carrying every collected ScanError.

    The message is the collector's pre-formatted report.
    """

    def __init__(self, errors: List[ScanError], report: str):
        self.errors = list(errors)
        super().__init__(report)


# =============================================================================
# Reporters
# =============================================================================

class ErrorReporter(Protocol):
    """Diagnostic sink accepted by the scanner."""

    def report(self, error: ScanError) -> None:
        ...


class StreamReporter:
    """
    Writes each diagnostic on its own line to a stream.

    Args:
        stream: Destination file object; stderr when None
    """

    def __init__(self, stream: Optional[IO[str]] = None):
        self.stream = stream

    def report(self, error: ScanError) -> None:
        logger.debug("scan error at line %d: %s", error.line, error.message)
        if self.stream is None:
            click.echo(str(error), err=True)
        else:
            click.echo(str(error), file=self.stream)


class ErrorCollector:
    """
    Collects scan errors for batch reporting.

    Gives callers an aggregate "had errors" signal that the token
    sequence alone cannot provide.

    Example:
        collector = ErrorCollector()
        tokens = Scanner(source, collector).scan_all()

        if collector.has_errors():
            print(collector.report_text())
    """

    def __init__(self, max_errors: Optional[int] = None):
        """
        Initialize the error collector.

        Args:
            max_errors: Keep at most this many errors (None for no limit).
                Errors past the limit are counted but not stored.
        """
        self.errors: List[ScanError] = []
        self.max_errors = max_errors
        self._dropped = 0

    def report(self, error: ScanError) -> None:
        """Add an error to the collection."""
        logger.debug("collected scan error at line %d: %s", error.line, error.message)
        if self.max_errors is not None and len(self.errors) >= self.max_errors:
            self._dropped += 1
            return
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been reported."""
        return self.error_count() > 0

    def error_count(self) -> int:
        """Return the number of reported errors, including dropped ones."""
        return len(self.errors) + self._dropped

    def report_text(self) -> str:
        """Format all errors and a summary line for display."""
        lines = [str(error) for error in self.errors]

        if self._dropped:
            lines.append(f"... {self._dropped} more not shown")

        count = self.error_count()
        error_word = "error" if count == 1 else "errors"
        lines.append(f"{count} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Forget all collected errors."""
        self.errors.clear()
        self._dropped = 0

    def raise_if_errors(self) -> None:
        """Raise a ScanFailedError if any errors were reported."""
        if self.has_errors():
            raise ScanFailedError(self.errors, self.report_text())


class TeeReporter:
    """Forwards every diagnostic to each of the wrapped reporters in order."""

    def __init__(self, *reporters: ErrorReporter):
        self.reporters = reporters

    def report(self, error: ScanError) -> None:
        for reporter in self.reporters:
            reporter.report(error)
