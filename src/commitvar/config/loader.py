"""Load and merge configuration from .commitvar.toml, CLI flags, and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from commitvar.config.schema import (
    OUTPUT_FORMATS,
    AnalysisConfig,
    CommitVarConfig,
    LoggingConfig,
    OutputConfig,
)

CONFIG_FILE_NAME = ".commitvar.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _env_flag(name: str) -> bool:
    return os.environ.get(name) == "1"


def _merge_env_overrides(cfg: CommitVarConfig) -> None:
    """Apply COMMITVAR_* environment variable overrides."""
    if val := os.environ.get("COMMITVAR_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("COMMITVAR_EXTENSION_BLACKLIST"):
        cfg.analysis.extension_blacklist = [e.strip() for e in val.split(",") if e.strip()]
    if _env_flag("COMMITVAR_WARNINGS"):
        cfg.logging.warnings = True
    if _env_flag("COMMITVAR_DEBUG"):
        cfg.logging.debug = True


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: CommitVarConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Unknown output format {cfg.output.format!r} (expected one of {', '.join(OUTPUT_FORMATS)})"
        )
    if not isinstance(cfg.analysis.extension_blacklist, list):
        raise ConfigError("[analysis] extension_blacklist must be a list of strings")


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> CommitVarConfig:
    """Load, validate, and return a CommitVarConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = CommitVarConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = CommitVarConfig(
            version=raw.get("version", "1.0"),
            analysis=_build_section(raw, AnalysisConfig, "analysis"),
            output=_build_section(raw, OutputConfig, "output"),
            logging=_build_section(raw, LoggingConfig, "logging"),
        )

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
