"""Tests for run config validation helpers."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from core.run_config import (
    DEFAULT_MODEL,
    DEFAULT_OUTPUT_DIR,
    ConfigValidationError,
    RunConfig,
    build_run_config,
    load_config_file,
    load_run_config,
    resolve_strict_config_validation,
)

MODELS = ("gpt3", "gpt4", "claude")


class TestRunConfig(unittest.TestCase):
    def _write_config(self, content: str) -> str:
        handle = tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False)
        handle.write(content)
        handle.flush()
        handle.close()
        self.addCleanup(Path(handle.name).unlink, missing_ok=True)
        return handle.name

    def test_load_non_strict_missing_returns_empty(self) -> None:
        payload = load_config_file("/definitely/missing.yml", strict=False)
        self.assertEqual(payload, {})

    def test_load_strict_missing_raises(self) -> None:
        with self.assertRaises(ConfigValidationError):
            load_config_file("/definitely/missing.yml", strict=True)

    def test_load_strict_invalid_yaml_raises(self) -> None:
        path = self._write_config("model: [gpt3\n")
        with self.assertRaises(ConfigValidationError):
            load_config_file(path, strict=True)

    def test_load_non_mapping_payload(self) -> None:
        path = self._write_config("- gpt3\n- gpt4\n")
        self.assertEqual(load_config_file(path, strict=False), {})
        with self.assertRaises(ConfigValidationError):
            load_config_file(path, strict=True)

    def test_build_valid_payload(self) -> None:
        config = build_run_config(
            {"model": "claude", "output_dir": "out/docs", "examples_file": "ex.md"},
            MODELS,
            strict=True,
        )
        self.assertEqual(config, RunConfig("claude", "out/docs", "ex.md"))

    def test_build_unknown_model_non_strict_keeps_default(self) -> None:
        with self.assertLogs("core.run_config", level="WARNING"):
            config = build_run_config({"model": "gpt5"}, MODELS, strict=False)
        self.assertEqual(config.model, DEFAULT_MODEL)

    def test_build_unknown_model_strict_raises(self) -> None:
        with self.assertRaises(ConfigValidationError):
            build_run_config({"model": "gpt5"}, MODELS, strict=True)

    def test_build_unknown_key_strict_raises(self) -> None:
        with self.assertRaises(ConfigValidationError):
            build_run_config({"temperature": 0.2}, MODELS, strict=True)

    def test_build_blank_output_dir_strict_raises(self) -> None:
        with self.assertRaises(ConfigValidationError):
            build_run_config({"output_dir": "  "}, MODELS, strict=True)

    def test_load_run_config_without_path(self) -> None:
        config = load_run_config(None, MODELS)
        self.assertEqual(config.model, DEFAULT_MODEL)
        self.assertEqual(config.output_dir, DEFAULT_OUTPUT_DIR)
        self.assertIsNone(config.examples_file)

    def test_load_run_config_from_file(self) -> None:
        path = self._write_config("model: gpt4\noutput_dir: build/docs\n")
        config = load_run_config(path, MODELS, strict=True)
        self.assertEqual(config.model, "gpt4")
        self.assertEqual(config.output_dir, "build/docs")

    def test_resolve_strict_from_env(self) -> None:
        with patch.dict(os.environ, {"STRICT_CONFIG_VALIDATION": "yes"}):
            self.assertTrue(resolve_strict_config_validation())
        with patch.dict(os.environ, {"STRICT_CONFIG_VALIDATION": "0"}):
            self.assertFalse(resolve_strict_config_validation(default=True))


if __name__ == "__main__":
    unittest.main()
