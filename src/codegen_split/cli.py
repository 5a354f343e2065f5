"""Command-line entry points.

Directory mode:
    codegen-split <input-dir> <output-dir> [--config FILE] [--extension EXT] [--verbose]

Hook mode (registered with the generator as its post-process command):
    codegen-split-hook <file-path>

Exit codes:
    0 - Success (directory mode), always (hook mode)
    1 - Usage error, missing input directory or invalid configuration
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from codegen_split.core.errors import SplitError, UsageError
from codegen_split.core.settings import (
    DEFAULT_SETTINGS_PATH,
    Settings,
    default_settings,
    load_settings,
    resolve_path,
    validate_settings,
)
from codegen_split.observability.logger import get_logger, set_log_level
from codegen_split.postprocess.directory_runner import DirectoryRunner
from codegen_split.postprocess.hook_runner import HookRunner

logger = get_logger(__name__)

USAGE = "Usage: codegen-split <input-dir> <output-dir>"


def resolve_settings(config: Optional[str] = None) -> Settings:
    """Load settings from *config*, the default settings file, or built-ins.

    Raises:
        FileNotFoundError: If an explicit *config* does not exist.
        ValueError: If the settings file is invalid.
    """
    if config:
        return load_settings(config)
    default_path = resolve_path(DEFAULT_SETTINGS_PATH)
    if default_path.is_file():
        return load_settings(default_path)
    return default_settings()


def _normalize_extension(extension: str) -> str:
    extension = extension.strip()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codegen-split",
        description="Split combined generator output on ---SPLIT:<name>--- markers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("input_dir", nargs="?", help="Directory holding generated files")
    parser.add_argument("output_dir", nargs="?", help="Directory receiving the split files")

    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to configuration file (default: {DEFAULT_SETTINGS_PATH} when present)",
    )

    parser.add_argument(
        "--extension", "-e",
        default=None,
        help="Generated file extension to process (default: split.file_extension, '.php')",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    return parser


def split_files_main(argv: Optional[Sequence[str]] = None) -> int:
    """Directory-mode entry point.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``).

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    try:
        if not args.input_dir or not args.output_dir:
            raise UsageError(USAGE)

        try:
            settings = resolve_settings(args.config)
            if args.extension is not None:
                settings.split["file_extension"] = _normalize_extension(args.extension)
                validate_settings(settings)
        except (FileNotFoundError, ValueError) as exc:
            print(f"Error: {exc}")
            return 1

        set_log_level("DEBUG" if args.verbose else settings.log_level)
        DirectoryRunner(settings).run(args.input_dir, args.output_dir)
    except SplitError as exc:
        print(exc)
        return exc.exit_code

    return 0


def post_process_main(argv: Optional[List[str]] = None) -> int:
    """Hook-mode entry point.

    Only the first argument is read; anything after it is ignored. Invalid
    configuration falls back to the built-in settings so the generator run
    is never interrupted.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``).

    Returns:
        Always 0.
    """
    if argv is None:
        argv = sys.argv[1:]
    path = argv[0] if argv else None
    if not path:
        return 0

    try:
        settings = resolve_settings()
        runner = HookRunner(settings)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring invalid settings, using defaults: %s", exc)
        settings = default_settings()
        runner = HookRunner(settings)

    set_log_level(settings.log_level)
    return runner.run(path)


def main() -> None:
    sys.exit(split_files_main())


def hook() -> None:
    sys.exit(post_process_main())


if __name__ == "__main__":
    main()
