"""Tests for run artifact writers."""

import json
import os
import tempfile
import unittest
from pathlib import Path

from core.run_artifacts import write_extraction_dump, write_run_report


class TestRunArtifacts(unittest.TestCase):
    def test_write_run_report(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_run_report(
                report={"status": "success", "value": 1},
                run_id="run-123",
                output_dir=tmpdir,
            )
            self.assertTrue(Path(path).is_file())
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
            self.assertEqual(payload["run_id"], "run-123")
            self.assertEqual(payload["status"], "success")
            self.assertEqual(payload["value"], 1)
            self.assertIn("timestamp_utc", payload)

    def test_write_extraction_dump(self) -> None:
        records = [
            {
                "declaration_name": "Player",
                "method_name": "AddItem",
                "signature_text": "AddItem(entry: number): Item;",
                "comment_text": "/** Adds an item. */",
                "start_line": 7,
            }
        ]
        with tempfile.TemporaryDirectory() as tmpdir:
            target = os.path.join(tmpdir, "nested", "player.json")
            path = write_extraction_dump(
                records,
                target,
                run_id="run-456",
                source_file="player.d.ts",
                declaration_name="Player",
            )
            self.assertEqual(path, target)
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
            self.assertEqual(payload["run_id"], "run-456")
            self.assertEqual(payload["source_file"], "player.d.ts")
            self.assertEqual(payload["declaration_name"], "Player")
            self.assertEqual(payload["methods"], records)


if __name__ == "__main__":
    unittest.main()
