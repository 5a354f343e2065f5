#!/usr/bin/env python
"""Split combined generator output from one directory into another.

Usage:
    # Split every .php file of build/generated into app/Http/Controllers
    python scripts/split_files.py build/generated app/Http/Controllers

    # Process another extension
    python scripts/split_files.py build/generated out --extension .ts

    # Use custom configuration file
    python scripts/split_files.py build/generated out --config custom_settings.yaml

Exit codes:
    0 - Success (including "no file had markers")
    1 - Usage error, missing input directory or invalid configuration
"""

import sys
from pathlib import Path

# Ensure src/ is importable when running from a checkout
_SCRIPT_DIR = Path(__file__).resolve().parent
_SRC_DIR = _SCRIPT_DIR.parent / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from codegen_split.cli import split_files_main


if __name__ == "__main__":
    sys.exit(split_files_main())
