"""
Krab - Scanner for a Small Dynamically-Typed Scripting Language
===============================================================

This package turns Krab source text into a list of classified tokens.
Krab is a small C-like scripting language with classes, first-class
functions and the usual arithmetic, comparison and logical operators.

Main Components
---------------
- **scanner**: single-pass tokenizer (``Scanner``, ``scan_tokens``)
- **tokens**: ``TokenKind`` and the immutable ``Token`` record
- **value**: literal values carried by STRING and NUMBER tokens
- **errors**: error hierarchy and diagnostic reporters
- **cli**: the ``krab`` command (REPL or script file)

Quick Start
-----------
    >>> from krab import ErrorCollector, scan_tokens
    >>> collector = ErrorCollector()
    >>> tokens = scan_tokens('print "hi";', collector)
    >>> [t.kind.name for t in tokens]
    ['PRINT', 'STRING', 'SEMICOLON', 'EOF']
    >>> collector.has_errors()
    False

Or from the command line:
    $ krab script.krab
    $ krab            # interactive prompt
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from krab.errors import (
    KrabError,
    ScanError,
    UnterminatedStringError,
    UnexpectedCharacterError,
    ScanFailedError,
    ErrorReporter,
    StreamReporter,
    ErrorCollector,
    TeeReporter,
)
from krab.keywords import KEYWORDS
from krab.scanner import Scanner, scan_tokens
from krab.tokens import Token, TokenKind
from krab.value import (
    BooleanValue,
    NilValue,
    NumberValue,
    StringValue,
    LiteralValue,
)

__all__ = [
    "__version__",
    # Errors
    "KrabError",
    "ScanError",
    "UnterminatedStringError",
    "UnexpectedCharacterError",
    "ScanFailedError",
    # Reporters
    "ErrorReporter",
    "StreamReporter",
    "ErrorCollector",
    "TeeReporter",
    # Scanning
    "Scanner",
    "scan_tokens",
    "Token",
    "TokenKind",
    "KEYWORDS",
    # Values
    "BooleanValue",
    "NilValue",
    "NumberValue",
    "StringValue",
    "LiteralValue",
]
