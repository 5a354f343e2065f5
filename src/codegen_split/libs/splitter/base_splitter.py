"""Base abstraction for combined-file splitter strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod

from codegen_split.core.types import SplitUnit


class BaseSplitter(ABC):
    """Abstract interface for splitter implementations."""

    @abstractmethod
    def has_markers(self, text: str) -> bool:
        """Cheap pre-check: does *text* carry anything worth splitting?

        Args:
            text: Source text.

        Returns:
            False when the text can be passed through untouched.
        """

    @abstractmethod
    def split_text(self, text: str) -> list[SplitUnit]:
        """Split text into named units.

        Args:
            text: Source text to split.

        Returns:
            Units in source order, including ones with an empty name or
            empty content; callers decide whether to skip them.
        """
