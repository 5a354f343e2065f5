"""Error taxonomy for the directory-mode driver.

The hook driver never surfaces these: every anticipated condition there is a
silent no-op.
"""

from __future__ import annotations


class SplitError(Exception):
    """Base class for reportable split failures.

    Attributes:
        exit_code: Process exit status the CLI returns for this error.
    """

    exit_code = 1


class UsageError(SplitError):
    """Raised when the CLI is invoked with fewer than two path arguments."""


class InputNotFoundError(SplitError):
    """Raised when the input directory is missing or is not a directory."""

    def __init__(self, input_dir: str) -> None:
        super().__init__(f"Error: Input directory does not exist: {input_dir}")
        self.input_dir = input_dir
