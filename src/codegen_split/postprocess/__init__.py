"""
Postprocess - Applying splitters to generated files on disk.

This package contains:
- File splitter (units -> output files)
- Directory-mode driver
- Single-file hook driver
"""

__all__ = []
