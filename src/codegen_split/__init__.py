"""
codegen-split - Post-processing for concatenated code-generator output.

This package splits generated files that carry ``---SPLIT:<name>---`` markers
into one file per unit:
- Core (settings, types, errors)
- Libs (pluggable splitter strategies)
- Postprocess (directory and hook drivers)
- Observability (logging)
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
