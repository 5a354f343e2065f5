"""Splitter for ``---SPLIT:<name>---`` markers.

A unit is the text after a marker up to the next marker or end of file, named
by that marker. Text before the first marker is a preamble and is dropped.

The name class ``[^-]+`` excludes hyphens, and the closing ``---`` has to
follow the name directly, so ``---SPLIT:Foo-Bar.php---`` is not a marker at
all. Generators must keep hyphens out of unit names.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Tuple

from codegen_split.core.types import SplitUnit
from codegen_split.libs.splitter.base_splitter import BaseSplitter


MARKER_PREFIX = "---SPLIT:"
MARKER_PATTERN = re.compile(r"---SPLIT:([^-]+)---")

# ASCII whitespace plus NUL and VT only; bare str.strip() also removes
# other Unicode whitespace.
TRIM_CHARS = " \t\n\r\0\x0b"


class MarkerSplitter(BaseSplitter):
    """Split combined generator output on ``---SPLIT:<name>---`` markers.

    Example:
        >>> splitter = MarkerSplitter()
        >>> [u.name for u in splitter.split_text("x---SPLIT:A.php---a---SPLIT:B.php---b")]
        ['A.php', 'B.php']
    """

    def has_markers(self, text: str) -> bool:
        return MARKER_PREFIX in text

    def iter_markers(self, text: str) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(start, end, raw_name)`` for each marker in one pass."""
        for match in MARKER_PATTERN.finditer(text):
            yield match.start(), match.end(), match.group(1)

    def split_text(self, text: str) -> List[SplitUnit]:
        if not self.has_markers(text):
            return []

        markers = list(self.iter_markers(text))
        units: List[SplitUnit] = []
        for index, (_, end, raw_name) in enumerate(markers):
            if index + 1 < len(markers):
                stop = markers[index + 1][0]
            else:
                stop = len(text)
            units.append(
                SplitUnit(
                    name=raw_name.strip(TRIM_CHARS),
                    content=text[end:stop].strip(TRIM_CHARS),
                )
            )
        return units
