"""
Splitter Module.

This package contains text splitter abstractions and implementations:
- Base splitter class
- Splitter factory
- Implementations (Marker)
"""

from codegen_split.libs.splitter.base_splitter import BaseSplitter
from codegen_split.libs.splitter.marker_splitter import MarkerSplitter
from codegen_split.libs.splitter.splitter_factory import SplitterFactory

__all__ = ["BaseSplitter", "MarkerSplitter", "SplitterFactory"]
