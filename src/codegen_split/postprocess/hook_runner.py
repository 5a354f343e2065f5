"""Single-file post-process hook.

An external generator calls the hook once for every file it writes. The hook
splits that file in place and must never make the generator fail: every
outcome, including I/O errors, ends with exit status 0. Diagnostics go to
stderr because the generator's stdout may be captured by other tooling.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from codegen_split.core.settings import Settings, default_settings
from codegen_split.core.types import FileSplitResult
from codegen_split.observability.logger import get_logger
from codegen_split.postprocess.file_splitter import FileSplitter

logger = get_logger(__name__)

DIAGNOSTIC_PREFIX = "  [post-process] "


class HookRunner:
    """Split one generated file into sibling files."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        err: Optional[TextIO] = None,
        file_splitter: Optional[FileSplitter] = None,
    ):
        self._settings = settings or default_settings()
        self._err = err
        self._file_splitter = file_splitter or FileSplitter(self._settings)

    def _diagnostic(self, message: str) -> None:
        print(f"{DIAGNOSTIC_PREFIX}{message}", file=self._err or sys.stderr)

    def process(self, path: str | Path) -> Optional[FileSplitResult]:
        """Split *path* in place.

        Returns:
            None when the file was left alone (wrong extension, missing,
            no marker); otherwise the split result.

        Raises:
            OSError: Propagated from the filesystem.
        """
        source = Path(path)
        if not str(path).endswith(self._settings.file_extension):
            return None
        if not source.is_file():
            return None

        content = self._file_splitter.read_source(source)
        if not self._file_splitter.has_markers(content):
            return None

        result = FileSplitResult(source_path=str(source), had_markers=True)

        def _created(name: str) -> None:
            result.created.append(name)
            self._diagnostic(f"Created: {name}")

        count = self._file_splitter.split(content, source.parent, on_created=_created)
        if count > 0:
            source.unlink()
            result.removed = True
            self._diagnostic(f"Removed combined file: {source.name}")
        logger.debug("Hook split result: %s", result.to_dict())
        return result

    def run(self, path: Optional[str]) -> int:
        """Hook entry point. Always returns 0."""
        if not path:
            return 0
        try:
            self.process(path)
        except OSError as exc:
            logger.warning("Post-process split of %s failed: %s", path, exc)
        return 0
