"""
Krab Command-Line Interface
===========================

- **krab**: scan a script file, or run an interactive prompt

The tool is a Click-based CLI application.
"""

__all__ = ["krab"]
