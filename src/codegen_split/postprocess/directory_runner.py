"""Directory-mode driver.

Processes every generated file directly inside an input directory:

    1. Marker-free files are copied byte-for-byte into the output directory
    2. Combined files are split into the output directory
    3. A combined file is removed once at least one unit was written from it

Progress is printed to ``out`` (stdout by default), one line per created file
and per removed combined file, followed by a summary line.
"""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from codegen_split.core.errors import InputNotFoundError
from codegen_split.core.settings import Settings, default_settings
from codegen_split.core.types import DirectorySplitSummary, FileSplitResult
from codegen_split.observability.logger import get_logger
from codegen_split.postprocess.file_splitter import FileSplitter

logger = get_logger(__name__)


def discover_files(input_dir: Path, extension: str) -> List[Path]:
    """List files directly inside *input_dir* whose name ends with *extension*.

    No recursion. Sorted by name so repeated runs process files in the same
    order.
    """
    return sorted(
        entry
        for entry in input_dir.iterdir()
        if entry.name.endswith(extension) and entry.is_file()
    )


class DirectoryRunner:
    """Split or copy every generated file of a directory.

    Example:
        >>> runner = DirectoryRunner(default_settings())
        >>> summary = runner.run("build/generated", "app/Http/Controllers")
        >>> summary.files_created
        12
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        out: Optional[TextIO] = None,
        file_splitter: Optional[FileSplitter] = None,
    ):
        self._settings = settings or default_settings()
        self._out = out
        self._file_splitter = file_splitter or FileSplitter(self._settings)

    def _print(self, message: str = "") -> None:
        print(message, file=self._out or sys.stdout)

    def prepare_output_dir(self, output_dir: Path) -> None:
        output_dir.mkdir(mode=self._settings.dir_mode, parents=True, exist_ok=True)

    def process_file(self, source: Path, output_dir: Path) -> FileSplitResult:
        """Split or copy a single source file into *output_dir*."""
        result = FileSplitResult(source_path=str(source))
        content = self._file_splitter.read_source(source)

        if not self._file_splitter.has_markers(content):
            destination = output_dir / source.name
            if destination.exists() and os.path.samefile(source, destination):
                logger.debug("%s is already in the output directory", source.name)
                return result
            shutil.copyfile(source, destination)
            result.copied = True
            logger.debug("Copied %s unchanged", source.name)
            return result

        result.had_markers = True

        def _created(name: str) -> None:
            result.created.append(name)
            self._print(f"  Created: {name}")

        count = self._file_splitter.split(content, output_dir, on_created=_created)
        if count > 0:
            source.unlink()
            result.removed = True
            self._print(f"  Removed combined file: {source.name}")
        else:
            logger.debug("No writable units in %s; source kept", source.name)
        return result

    def run(self, input_dir: str | Path, output_dir: str | Path) -> DirectorySplitSummary:
        """Process every matching file of *input_dir*.

        Raises:
            InputNotFoundError: If *input_dir* is missing or not a directory.
            OSError: Propagated from the filesystem.
        """
        source_dir = Path(input_dir)
        if not source_dir.is_dir():
            raise InputNotFoundError(str(input_dir))

        target_dir = Path(output_dir)
        self.prepare_output_dir(target_dir)

        summary = DirectorySplitSummary()
        for source in discover_files(source_dir, self._settings.file_extension):
            summary.results.append(self.process_file(source, target_dir))
        logger.debug("Directory split summary: %s", summary.to_dict())

        self._print()
        self._print(
            f"Split complete: {summary.files_created} files created "
            f"from {summary.combined_files} combined files"
        )
        return summary
