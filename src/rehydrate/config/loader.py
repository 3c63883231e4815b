"""Config loading and validation for Rehydrate runs."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from rehydrate.config.model import HydrateConfig
from rehydrate.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from rehydrate.constants.hydration import (
    DEFAULT_IGNORE_DIRS,
    FALLBACK_PROJECT_DIRNAME,
    MARKER_SUFFIX,
    MARKER_SUFFIX_REQUIRED_EXTENSION,
    TARGET_EXTENSION,
)
from rehydrate.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> HydrateConfig:
    """Load and validate hydration config from ``rehydrate.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return HydrateConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        hints = [_suggest_key(key) for key in unknown]
        details = ", ".join(f"{key} ({hint})" if hint else key for key, hint in zip(unknown, hints, strict=True))
        raise ConfigError(f"Unknown config key(s) in {path}: {details}")

    marker_suffix = _ensure_string(raw.get("marker_suffix", MARKER_SUFFIX), "marker_suffix")
    suffix_stem = marker_suffix.removesuffix(MARKER_SUFFIX_REQUIRED_EXTENSION)
    if suffix_stem == marker_suffix or not suffix_stem:
        raise ConfigError(f"marker_suffix must end with {MARKER_SUFFIX_REQUIRED_EXTENSION!r} and name a suffix")

    target_extension = _ensure_string(raw.get("target_extension", TARGET_EXTENSION), "target_extension")
    if not target_extension.startswith(".") or len(target_extension) < 2:
        raise ConfigError("target_extension must start with '.' followed by an extension")
    if target_extension == MARKER_SUFFIX_REQUIRED_EXTENSION:
        raise ConfigError(f"target_extension must differ from {MARKER_SUFFIX_REQUIRED_EXTENSION!r}")

    fallback_project = _ensure_string(raw.get("fallback_project", FALLBACK_PROJECT_DIRNAME), "fallback_project")
    if "/" in fallback_project or "\\" in fallback_project or fallback_project in {".", ".."}:
        raise ConfigError("fallback_project must be a single directory name")

    ignore_dirs = _ensure_string_list(raw.get("ignore_dirs", list(DEFAULT_IGNORE_DIRS)), "ignore_dirs")

    return HydrateConfig(
        marker_suffix=marker_suffix,
        target_extension=target_extension,
        fallback_project=fallback_project,
        ignore_dirs=tuple(sorted({name.strip() for name in ignore_dirs if name.strip()})),
    )


def _ensure_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{field_name} must be a non-empty string")
    return value.strip()


def _ensure_string_list(value: Any, field_name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{field_name} must be a list of strings")
    return value


def _suggest_key(key: str) -> str:
    """Return a ``did you mean`` hint for a misspelled config key."""
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    return f"did you mean {matches[0]!r}?" if matches else ""
