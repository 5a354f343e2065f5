"""Settings loading and validation utilities."""

from __future__ import annotations

import codecs
import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


DEFAULT_SETTINGS_PATH = "config/settings.yaml"

_DEFAULTS: dict[str, Any] = {
    "splitter": {"type": "marker"},
    "split": {
        "file_extension": ".php",
        "dir_mode": 0o755,
        "encoding": "utf-8",
    },
    "observability": {"log_level": "INFO"},
}


@dataclass(slots=True)
class Settings:
    """Application settings structure.

    Attributes:
        splitter: Splitter strategy configuration dictionary.
        split: File handling configuration dictionary.
        observability: Observability configuration dictionary.
        raw: Original full settings dictionary, merged over the defaults.
    """

    splitter: dict[str, Any]
    split: dict[str, Any]
    observability: dict[str, Any]
    raw: dict[str, Any]

    @property
    def file_extension(self) -> str:
        return self.split["file_extension"]

    @property
    def dir_mode(self) -> int:
        return _parse_mode(self.split["dir_mode"])

    @property
    def encoding(self) -> str:
        return self.split["encoding"]

    @property
    def log_level(self) -> str:
        return self.observability.get("log_level", "INFO")


def resolve_path(path: str | Path, base: str | Path | None = None) -> Path:
    """Resolve *path* against *base* (default: current working directory)."""

    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        return candidate
    return Path(base or Path.cwd()) / candidate


def _parse_mode(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid split.dir_mode: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 8)
        except ValueError as exc:
            raise ValueError(f"Invalid split.dir_mode: {value!r}") from exc
    raise ValueError(f"Invalid split.dir_mode: {value!r}")


def _merge(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _build(raw: dict[str, Any]) -> Settings:
    return Settings(
        splitter=raw.get("splitter", {}),
        split=raw.get("split", {}),
        observability=raw.get("observability", {}),
        raw=raw,
    )


def validate_settings(settings: Settings) -> None:
    """Validate required settings fields.

    Args:
        settings: Parsed settings object.

    Raises:
        ValueError: If any field is missing or has the wrong shape.
    """

    for section in ("splitter", "split", "observability"):
        if not isinstance(settings.raw.get(section), dict):
            raise ValueError(f"Missing required settings field: {section}")

    extension = settings.split.get("file_extension")
    if not isinstance(extension, str) or not extension.startswith(".") or len(extension) < 2:
        raise ValueError(
            "Invalid split.file_extension: expected a string such as '.php', "
            f"got {extension!r}"
        )

    if "dir_mode" not in settings.split:
        raise ValueError("Missing required settings field: split.dir_mode")
    _parse_mode(settings.split["dir_mode"])

    encoding = settings.split.get("encoding")
    if not isinstance(encoding, str) or not encoding.strip():
        raise ValueError("Missing required settings field: split.encoding")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ValueError(f"Unknown split.encoding: {encoding}") from exc

    splitter_type = settings.splitter.get("type")
    if not isinstance(splitter_type, str) or not splitter_type.strip():
        raise ValueError("Missing required settings field: splitter.type")


def default_settings() -> Settings:
    """Return the built-in settings used when no settings file is given."""

    return _build(copy.deepcopy(_DEFAULTS))


def load_settings(path: str | Path) -> Settings:
    """Load YAML settings from a file and validate required fields.

    Keys absent from the file keep their built-in default.

    Args:
        path: Path to the YAML settings file.

    Returns:
        Parsed and validated settings object.

    Raises:
        FileNotFoundError: If the path does not exist.
        ValueError: If YAML is invalid or required fields are malformed.
    """

    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with settings_path.open("r", encoding="utf-8") as fp:
        try:
            parsed = yaml.safe_load(fp)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in settings file {settings_path}: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise ValueError("Settings file must contain a YAML mapping at top level")

    settings = _build(_merge(_DEFAULTS, parsed))
    validate_settings(settings)
    return settings
