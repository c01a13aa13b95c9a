# src/paice_husk/stemming/general/utils/load_config.py

"""Load validated JSON5 settings from the stemmer's <data/> directory.

`load_config` parses <data>/<file>.json (comments and trailing commas allowed),
checks it is an object, runs an optional validator, and caches the validated
result per (path, mtime, validator) so repeated loads skip both parse and checks.
`load_settings` turns stemmer_settings.json into a StemmerSettings.

Used by the Stemmer facade, the CLI, and tests.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal

import json5

__all__ = [
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "StemmerSettings",
    "load_settings",
    "SETTINGS_FILE",
    "DATA_DIR_ENV",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

SETTINGS_FILE = "stemmer_settings"
DATA_DIR_ENV = "PAICE_HUSK_DATA_DIR"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found next to the package."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when a config file is not valid JSON5 or fails validation."""


class ConfigTypeError(TypeError):
    """Raise when a config file parses to something other than an object."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, int, str, Validator | None], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Drop every cached config (settings edits are otherwise picked up via mtime)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """Pick the data directory: explicit > $PAICE_HUSK_DATA_DIR > first data/ above this file."""
    if base_dir is not None:
        return base_dir.resolve()
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(os.path.expanduser(env)).resolve()
    here = Path(__file__).resolve()
    for parent in here.parents:
        cand = parent / "data"
        if cand.is_dir():
            return cand
    raise DataDirNotFound(f"No 'data' directory above {here} and {DATA_DIR_ENV} is unset")


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Return the validated object stored in <data>/<file>.json, from cache when unchanged."""
    data_dir = resolve_data_dir(base_dir)
    name = os.fspath(file)
    path = (data_dir / (name if name.endswith(".json") else f"{name}.json")).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to read outside the data dir: {path}")

    try:
        mtime = path.stat().st_mtime_ns
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    key = (path, mtime, encoding, validator)
    with _CACHE_LOCK:
        if key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[key]

    try:
        with path.open("r", encoding=encoding) as f:
            data = json5.load(f)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    except ValueError as e:
        raise ConfigParseError(f"Invalid JSON5 in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected an object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except (TypeError, ValueError) as e:
            raise ConfigParseError(f"{path.name}: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config loaded and cached: %s", path.name)
    return data


# ── Stemmer settings ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class StemmerSettings:
    """Typed view of stemmer_settings.json; defaults match the bundled file."""

    rules_file: str | None = None
    max_length: int | None = 254
    overflow: Literal["truncate", "reject"] = "truncate"
    cache_size: int = 4096
    workers: int = 1


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_settings(d: dict[str, Any]) -> dict[str, Any]:
    unknown = set(d) - {f.name for f in fields(StemmerSettings)}
    if unknown:
        raise ValueError(f"unknown keys: {', '.join(sorted(unknown))}")

    rules_file = d.get("rules_file")
    if rules_file is not None and not isinstance(rules_file, str):
        raise ValueError("rules_file must be a string or null")
    max_length = d.get("max_length", 254)
    if max_length is not None and not (_is_int(max_length) and max_length >= 1):
        raise ValueError("max_length must be a positive integer or null")
    if d.get("overflow", "truncate") not in ("truncate", "reject"):
        raise ValueError("overflow must be 'truncate' or 'reject'")
    cache_size = d.get("cache_size", 0)
    if not (_is_int(cache_size) and cache_size >= 0):
        raise ValueError("cache_size must be a non-negative integer")
    workers = d.get("workers", 1)
    if not (_is_int(workers) and workers >= 1):
        raise ValueError("workers must be a positive integer")
    return d


def load_settings(base_dir: Path | None = None) -> StemmerSettings:
    """Load <data>/stemmer_settings.json; a relative rules_file is resolved against <data>."""
    data = load_config(SETTINGS_FILE, base_dir=base_dir, validator=_validate_settings)
    rules_file = data.get("rules_file")
    if rules_file is not None:
        rules_file = str(resolve_data_dir(base_dir) / rules_file)
    return StemmerSettings(**{**data, "rules_file": rules_file})
