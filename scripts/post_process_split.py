#!/usr/bin/env python
"""Post-process hook that splits a combined generated file in place.

Register it as the generator's per-file post-process command, e.g. for
OpenAPI Generator:

    export PHP_POST_PROCESS_FILE="python /path/to/scripts/post_process_split.py"
    openapi-generator-cli generate ... --enable-post-process-file

The generator passes the generated file path as the first argument. The hook
always exits 0 and never writes to stdout.
"""

import sys
from pathlib import Path

# Ensure src/ is importable when running from a checkout
_SCRIPT_DIR = Path(__file__).resolve().parent
_SRC_DIR = _SCRIPT_DIR.parent / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from codegen_split.cli import post_process_main


if __name__ == "__main__":
    sys.exit(post_process_main())
