"""File splitter - adapts libs.splitter to files on disk.

This module is the adapter between libs.splitter (pure text partitioning) and
the two drivers (filesystem side effects). It turns the units a splitter
returns into output files:

1. Skips units whose name or content is empty after trimming, or whose
   name resolves outside the output directory
2. Writes ``content + "\\n"`` to ``output_dir/name``, overwriting silently
3. Reports each written name to an optional callback, in document order
4. Returns how many files were written

Source files are read and written with ``surrogateescape`` so bytes that are
not valid in the configured encoding survive a split unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Optional

from codegen_split.core.settings import Settings, default_settings
from codegen_split.libs.splitter.base_splitter import BaseSplitter
from codegen_split.libs.splitter.splitter_factory import SplitterFactory
from codegen_split.observability.logger import get_logger

logger = get_logger(__name__)

CreatedCallback = Callable[[str], None]


class FileSplitter:
    """Writes the units of a combined file into a directory.

    Attributes:
        _settings: Settings carrying the encoding and splitter type.
        _splitter: The underlying text splitter from libs layer.

    Example:
        >>> splitter = FileSplitter(default_settings())
        >>> splitter.split("---SPLIT:A.php---\\n<?php\\n", "out")
        1
    """

    def __init__(self, settings: Settings, splitter: Optional[BaseSplitter] = None):
        self._settings = settings
        self._splitter = splitter or SplitterFactory.create(settings)

    def has_markers(self, content: str) -> bool:
        return self._splitter.has_markers(content)

    @staticmethod
    def _output_path(target: Path, name: str) -> Optional[Path]:
        """Place *name* under *target*; None when it would land elsewhere.

        Leading separators are dropped, so "/x.php" means "target/x.php".
        """
        relative = name.lstrip("/\\")
        if not relative:
            return None
        candidate = target / relative
        if not candidate.resolve().is_relative_to(target.resolve()):
            return None
        return candidate

    def read_source(self, path: str | Path) -> str:
        """Read a whole source file as text, line endings untranslated."""
        with open(path, "r", encoding=self._settings.encoding, errors="surrogateescape", newline="") as fh:
            return fh.read()

    def split(
        self,
        content: str,
        output_dir: str | Path,
        on_created: Optional[CreatedCallback] = None,
    ) -> int:
        """Split *content* and write each non-empty unit into *output_dir*.

        Args:
            content: Full text of a combined file.
            output_dir: Existing directory that receives the output files.
            on_created: Called with each file name right after it is written.

        Returns:
            Number of files written. 0 when *content* carries no marker.

        Raises:
            OSError: Propagated from the filesystem; units written before
                the failure stay on disk.
        """
        if not self._splitter.has_markers(content):
            return 0

        target = Path(output_dir)
        count = 0
        for unit in self._splitter.split_text(content):
            if not unit.is_writable():
                logger.debug("Skipping empty unit (name=%r, %d chars)", unit.name, len(unit.content))
                continue
            destination = self._output_path(target, unit.name)
            if destination is None:
                logger.debug("Skipping unit outside %s (name=%r)", target, unit.name)
                continue
            destination.write_text(
                unit.rendered(),
                encoding=self._settings.encoding,
                errors="surrogateescape",
                newline="",
            )
            count += 1
            logger.debug("Wrote %s", destination)
            if on_created is not None:
                on_created(unit.name)
        return count


def split(content: str, output_dir: str | Path) -> int:
    """Split *content* into *output_dir* using the built-in settings."""

    return FileSplitter(default_settings()).split(content, output_dir)
