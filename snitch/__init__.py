"""Building blocks of a unit-test runner: bounded strings, console output, errors, captures, matchers and command-line parsing."""

__version__ = "1.0.0"
__all__ = ["append", "capture", "cli", "console", "errors", "fileio", "matcher", "test_data"]