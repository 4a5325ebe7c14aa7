"""
krab - Krab Scanner Command-Line Interface
==========================================

Scans Krab source and prints the resulting tokens, one per line.

Usage Examples
--------------
Scan a script file:
    $ krab hello.krab

Interactive prompt (a blank line ends the session):
    $ krab
    > var x = 10.5;

Verbose mode:
    $ krab -v hello.krab
"""

import logging
import sys
from pathlib import Path
from typing import Tuple

import click

from krab import __version__
from krab.cli.errors import ExitCode, handle_cli_exception
from krab.errors import ErrorCollector, ErrorReporter, StreamReporter
from krab.scanner import Scanner

logger = logging.getLogger(__name__)

USAGE = "Usage: krab [script]"


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def run(source: str, reporter: ErrorReporter) -> None:
    """Scan one piece of source and print its tokens, one per line."""
    scanner = Scanner(source, reporter)

    for token in scanner.scan_all():
        click.echo(str(token))


def run_file(path: Path) -> int:
    """
    Scan a whole script file.

    Diagnostics are collected during the scan and reported after the
    tokens.

    Raises:
        ScanFailedError: If the script had lexical errors
    """
    logger.debug("reading %s", path)
    source = path.read_text(encoding="utf-8")

    collector = ErrorCollector()
    run(source, collector)

    logger.debug("%s: %d lexical errors", path, collector.error_count())
    collector.raise_if_errors()
    return ExitCode.SUCCESS


def run_prompt(prompt: str) -> int:
    """
    Read-scan-print loop over stdin.

    Each line is scanned on its own and its diagnostics go straight to
    stderr; errors do not end the session. Stops at a blank line or end
    of input.
    """
    reporter = StreamReporter()
    while True:
        click.echo(prompt, nl=False)
        sys.stdout.flush()

        line = sys.stdin.readline()
        if not line.strip():
            break

        run(line, reporter)

    return ExitCode.SUCCESS


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument("script", nargs=-1)
@click.option(
    "--prompt",
    default="> ",
    show_default=True,
    envvar="KRAB_PROMPT",
    help="Prompt shown in interactive mode",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    envvar="KRAB_VERBOSE",
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="krab")
def main(script: Tuple[str, ...], prompt: str, verbose: bool) -> None:
    """
    Scan Krab source code and print its tokens.

    With no SCRIPT, starts an interactive prompt that scans one line at a
    time until a blank line is entered. With one SCRIPT, scans that file.

    \b
    Exit status:
        0   success
        64  wrong number of arguments
        65  the script had lexical errors
        66  the script could not be read
    """
    setup_logging(verbose)

    if len(script) > 1:
        click.echo(USAGE)
        sys.exit(ExitCode.USAGE)

    try:
        if script:
            code = run_file(Path(script[0]))
        else:
            code = run_prompt(prompt)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    sys.exit(code)


if __name__ == "__main__":
    main()
