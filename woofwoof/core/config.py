"""
woofwoof/core/config.py — Typed configuration loader for woofwoof.

Loads config/woofwoof.yaml and validates all values into typed dataclasses.
Only the CLI layer is configurable; the codec wire format is fixed.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from woofwoof.core.constants import Mode

logger = logging.getLogger(__name__)

_CONFIG_ENV = "WOOFWOOF_CONFIG"
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARN", "ERROR"})


# ──────────────────────────────────────────────
# Dataclass hierarchy, mirrors woofwoof.yaml
# ──────────────────────────────────────────────


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging configuration."""

    level: str = "WARN"
    log_dir: Optional[str] = None

    @property
    def resolved_log_dir(self) -> Path | None:
        """Return the JSONL log directory as a Path, or ``None`` if file logging is off."""
        if self.log_dir is None:
            return None
        return Path(os.path.expanduser(self.log_dir))


@dataclass(frozen=True)
class CLIConfig:
    """Command-line front end behaviour."""

    default_mode: str = "encode"
    trailing_newline: bool = True

    @property
    def mode(self) -> Mode:
        """Return :attr:`default_mode` resolved to a :class:`Mode`."""
        return Mode.parse(self.default_mode)


@dataclass(frozen=True)
class WoofConfig:
    """Root configuration object."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    cli: CLIConfig = field(default_factory=CLIConfig)


# ──────────────────────────────────────────────
# Loader
# ──────────────────────────────────────────────


def _resolve_path(config_path: Path | str | None) -> Path | None:
    """
    Locate the config file.

    Search order: explicit argument, ``WOOFWOOF_CONFIG``, then
    ``config/woofwoof.yaml`` next to the project root.
    """
    if config_path is not None:
        resolved = Path(config_path)
        if not resolved.exists():
            raise FileNotFoundError(f"Config file not found: {resolved}")
        return resolved

    if _CONFIG_ENV in os.environ:
        resolved = Path(os.environ[_CONFIG_ENV])
        if not resolved.exists():
            raise FileNotFoundError(
                f"{_CONFIG_ENV} points to missing file: {resolved}"
            )
        return resolved

    here = Path(__file__).resolve()
    for parent in [here.parent.parent.parent, here.parent.parent]:
        candidate = parent / "config" / "woofwoof.yaml"
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: Path | str | None = None) -> WoofConfig:
    """
    Load, validate, and return a WoofConfig from a YAML file.

    Args:
        config_path: Optional path to a ``woofwoof.yaml`` file.

    Returns:
        A fully populated and frozen :class:`WoofConfig` instance.

    Raises:
        ValueError: If a YAML field has an invalid type or value.
        FileNotFoundError: If *config_path* (or ``WOOFWOOF_CONFIG``) names
            a missing file.
    """
    resolved_path = _resolve_path(config_path)

    raw: dict = {}
    if resolved_path is not None:
        logger.info("Loading config from: %s", resolved_path)
        with resolved_path.open("r", encoding="utf-8") as fh:
            loaded = yaml.safe_load(fh) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must be a YAML mapping, got: {type(loaded)}")
        raw = loaded
    else:
        logger.info("No config file found, using built-in defaults")

    try:
        log_cfg = LoggingConfig(**(raw.get("logging") or {}))
        cli_cfg = CLIConfig(**(raw.get("cli") or {}))
    except TypeError as exc:
        raise ValueError(f"Invalid config value: {exc}") from exc

    _validate_config(log_cfg, cli_cfg)

    config = WoofConfig(logging=log_cfg, cli=cli_cfg)
    logger.debug("Config loaded: %s", config)
    return config


def _validate_config(log_cfg: LoggingConfig, cli_cfg: CLIConfig) -> None:
    """
    Validate field constraints on the loaded configuration.

    Raises:
        ValueError: If any configured value violates a constraint.
    """
    if log_cfg.level not in _LOG_LEVELS:
        raise ValueError(
            f"logging.level must be one of {sorted(_LOG_LEVELS)}, got '{log_cfg.level}'"
        )
    if log_cfg.log_dir is not None and not isinstance(log_cfg.log_dir, str):
        raise ValueError(
            f"logging.log_dir must be a path string or null, got {log_cfg.log_dir!r}"
        )
    if not isinstance(cli_cfg.trailing_newline, bool):
        raise ValueError(
            f"cli.trailing_newline must be a boolean, got {cli_cfg.trailing_newline!r}"
        )
    try:
        Mode.parse(cli_cfg.default_mode)
    except ValueError as exc:
        raise ValueError(f"cli.default_mode is invalid: {exc}") from exc
