"""Configuration loading and validation for the Resume Scorer service and CLI.

Scoring policy (weights, thresholds, tables) lives in code as named
constants and is deliberately not configurable here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

import yaml

CONFIG_ENV_VAR = "RESUME_SCORER_CONFIG"
DEFAULT_CONFIG_PATH = "config/config.yaml"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""
    field: str
    message: str
    severity: Severity


@dataclass
class ScorerConfig:
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=list)


def load_raw_config(config_path: str | None = None) -> Dict[str, Any]:
    """Load raw configuration dictionary from YAML.

    Priority order:
    1. config.local.yaml next to the requested file (local overrides)
    2. the requested file (template/defaults)

    The path defaults to ``$RESUME_SCORER_CONFIG`` or ``config/config.yaml``.
    Missing files yield an empty mapping.
    """
    repo_root = Path(__file__).resolve().parents[1]
    candidate = config_path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH

    def _resolve(candidate: str) -> Path:
        path = Path(candidate)
        if path.exists():
            return path
        alt = repo_root / candidate
        if alt.exists():
            return alt
        return path

    def _load_yaml(path: Path) -> dict:
        if not path.exists():
            return {}
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Config file must be a mapping: {path}")
            return data

    def _deep_merge(base: dict, override: dict) -> dict:
        merged = dict(base)
        for key, value in override.items():
            base_value = merged.get(key)
            if isinstance(base_value, dict) and isinstance(value, dict):
                merged[key] = _deep_merge(base_value, value)
            else:
                merged[key] = value
        return merged

    base_path = _resolve(candidate)
    local_path = base_path.with_name("config.local.yaml")
    data = _load_yaml(base_path)
    if local_path != base_path:
        data = _deep_merge(data, _load_yaml(local_path))
    return data


def load_config(config_path: str | None = None) -> ScorerConfig:
    """Load configuration from YAML, falling back to defaults for absent keys."""
    data = load_raw_config(config_path)
    server = data.get("server") or {}
    return ScorerConfig(
        log_level=str(data.get("log_level", "INFO")).upper(),
        host=server.get("host", "127.0.0.1"),
        port=server.get("port", 8000),
        cors_origins=list(data.get("cors_origins") or []),
    )


def validate_config(raw_config: Dict[str, Any]) -> List[ConfigError]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Raw config dict from YAML

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []

    # --- Log level ---
    log_level = raw_config.get("log_level", "INFO")
    if not isinstance(log_level, str) or log_level.upper() not in _LOG_LEVELS:
        errors.append(ConfigError(
            field="log_level",
            message=f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}, got {log_level!r}",
            severity=Severity.ERROR,
        ))

    # --- Server ---
    server = raw_config.get("server", {})
    if not isinstance(server, dict):
        errors.append(ConfigError(
            field="server",
            message="server must be a mapping with host and port",
            severity=Severity.ERROR,
        ))
        server = {}

    port = server.get("port", 8000)
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
        errors.append(ConfigError(
            field="server.port",
            message=f"server.port must be an integer between 1 and 65535, got {port!r}",
            severity=Severity.ERROR,
        ))

    host = server.get("host", "127.0.0.1")
    if not isinstance(host, str) or not host:
        errors.append(ConfigError(
            field="server.host",
            message="server.host must be a non-empty string",
            severity=Severity.ERROR,
        ))
    elif host == "0.0.0.0":
        errors.append(ConfigError(
            field="server.host",
            message="server.host 0.0.0.0 exposes the API on every interface",
            severity=Severity.WARNING,
        ))

    # --- CORS ---
    origins = raw_config.get("cors_origins", [])
    if not isinstance(origins, list) or not all(isinstance(o, str) for o in origins):
        errors.append(ConfigError(
            field="cors_origins",
            message="cors_origins must be a list of origin strings",
            severity=Severity.ERROR,
        ))
    elif "*" in origins:
        errors.append(ConfigError(
            field="cors_origins",
            message="cors_origins contains '*' -- any site may call the API",
            severity=Severity.WARNING,
        ))

    return errors


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)
