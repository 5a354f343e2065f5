"""Core data types shared by the splitter and the drivers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class SplitUnit:
    """One named block of a combined file.

    Attributes:
        name: Target file name declared by the marker, already trimmed.
        content: Block text, already trimmed (no trailing newline).
    """

    name: str
    content: str

    def is_writable(self) -> bool:
        """True when both the name and the content are non-empty."""
        return bool(self.name) and bool(self.content)

    def rendered(self) -> str:
        """File body as written to disk: content plus exactly one newline."""
        return self.content + "\n"


@dataclass
class FileSplitResult:
    """Outcome of processing a single source file.

    Attributes:
        source_path: Path of the processed source file.
        had_markers: Whether the source contained the marker prefix.
        created: Output file names written, in document order.
        removed: Whether the source file was deleted.
        copied: Whether the source was copied through unchanged.
    """

    source_path: str
    had_markers: bool = False
    created: List[str] = field(default_factory=list)
    removed: bool = False
    copied: bool = False

    @property
    def created_count(self) -> int:
        return len(self.created)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "source_path": self.source_path,
            "had_markers": self.had_markers,
            "created": list(self.created),
            "removed": self.removed,
            "copied": self.copied,
        }


@dataclass
class DirectorySplitSummary:
    """Aggregate counts for a directory-mode run."""

    results: List[FileSplitResult] = field(default_factory=list)

    @property
    def files_created(self) -> int:
        return sum(r.created_count for r in self.results)

    @property
    def combined_files(self) -> int:
        return sum(1 for r in self.results if r.had_markers)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_created": self.files_created,
            "combined_files": self.combined_files,
            "results": [r.to_dict() for r in self.results],
        }
