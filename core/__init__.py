"""Core shared logging, configuration and artifact utilities."""

from core.structured_logging import (
    configure_structured_logging,
    get_run_id,
    phase_scope,
    set_run_id,
    target_scope,
)
from core.run_config import (
    ConfigValidationError,
    RunConfig,
    build_run_config,
    load_config_file,
    load_run_config,
    resolve_strict_config_validation,
)
from core.run_artifacts import write_extraction_dump, write_run_report

__all__ = [
    "configure_structured_logging",
    "get_run_id",
    "phase_scope",
    "set_run_id",
    "target_scope",
    "ConfigValidationError",
    "RunConfig",
    "build_run_config",
    "load_config_file",
    "load_run_config",
    "resolve_strict_config_validation",
    "write_extraction_dump",
    "write_run_report",
]
