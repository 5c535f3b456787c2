"""Run configuration loading and validation.

Reads optional YAML defaults for the documentation run (model, output
directory, few-shot example file). Non-strict mode degrades to defaults with
a warning; strict mode raises ``ConfigValidationError``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt3"
DEFAULT_OUTPUT_DIR = "./docs/wowapi/classes"

_KNOWN_KEYS = ("model", "output_dir", "examples_file")


class ConfigValidationError(RuntimeError):
    """Raised when strict run configuration validation fails."""


@dataclass
class RunConfig:
    """Defaults for a documentation run; CLI options override them."""

    model: str = DEFAULT_MODEL
    output_dir: str = DEFAULT_OUTPUT_DIR
    examples_file: Optional[str] = None


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def resolve_strict_config_validation(default: bool = False) -> bool:
    """Resolve strict validation mode from ``STRICT_CONFIG_VALIDATION`` env."""
    return _env_flag("STRICT_CONFIG_VALIDATION", default=default)


def _fail(msg: str, strict: bool) -> None:
    if strict:
        raise ConfigValidationError(msg)
    logger.warning("%s; continuing with defaults", msg)


def load_config_file(config_path: str, strict: bool = False) -> dict[str, Any]:
    """Load and parse a YAML run configuration file.

    In non-strict mode this returns an empty dict on read/parse failures.
    In strict mode this raises ``ConfigValidationError``.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except FileNotFoundError as exc:
        msg = f"Run config file not found: {config_path}"
        if strict:
            raise ConfigValidationError(msg) from exc
        logger.warning("%s; continuing with defaults", msg)
        return {}
    except yaml.YAMLError as exc:
        msg = f"Failed to parse run config YAML at {config_path}: {exc}"
        if strict:
            raise ConfigValidationError(msg) from exc
        logger.warning("%s; continuing with defaults", msg)
        return {}

    if payload is None:
        _fail(f"Run config file is empty: {config_path}", strict)
        return {}

    if not isinstance(payload, dict):
        _fail(f"Unexpected run config payload type: {type(payload).__name__}", strict)
        return {}

    return payload


def build_run_config(
    payload: dict[str, Any],
    allowed_models: Iterable[str],
    strict: bool = False,
) -> RunConfig:
    """Validate a parsed payload and build a ``RunConfig``.

    Invalid entries fall back to their defaults unless ``strict`` is set.
    """
    config = RunConfig()
    allowed = tuple(allowed_models)

    unknown = sorted(str(key) for key in payload if key not in _KNOWN_KEYS)
    if unknown:
        _fail(f"Unknown run config keys: {', '.join(unknown)}", strict)

    model = payload.get("model")
    if model is not None:
        if model in allowed:
            config.model = model
        else:
            _fail(
                f"Run config model {model!r} is not one of: {', '.join(allowed)}",
                strict,
            )

    for key in ("output_dir", "examples_file"):
        value = payload.get(key)
        if value is None:
            continue
        if isinstance(value, str) and value.strip():
            setattr(config, key, value)
        else:
            _fail(f"Run config '{key}' must be a non-empty string", strict)

    return config


def load_run_config(
    config_path: Optional[str],
    allowed_models: Iterable[str],
    strict: bool = False,
) -> RunConfig:
    """Load run defaults from ``config_path``, or plain defaults when None."""
    if config_path is None:
        return RunConfig()
    payload = load_config_file(config_path, strict=strict)
    config = build_run_config(payload, allowed_models, strict=strict)
    logger.info(
        "Loaded run config from %s (model=%s, output_dir=%s)",
        config_path,
        config.model,
        config.output_dir,
    )
    return config
