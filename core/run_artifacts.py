"""Run artifact helpers for extraction dumps and run reports."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from typing import Any, Iterable


def write_extraction_dump(
    records: Iterable[dict[str, Any]],
    path: str,
    run_id: str,
    source_file: str,
    declaration_name: str,
) -> str:
    """Write extracted method records as a JSON document and return its path."""
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    payload = {
        "run_id": run_id,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "source_file": source_file,
        "declaration_name": declaration_name,
        "methods": list(records),
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return path


def write_run_report(
    report: dict[str, Any],
    run_id: str,
    output_dir: str = "output/run_reports",
) -> str:
    """Write a JSON run report and return its path."""
    os.makedirs(output_dir, exist_ok=True)
    payload = dict(report)
    payload.setdefault("run_id", run_id)
    payload.setdefault("timestamp_utc", datetime.now(timezone.utc).isoformat())
    path = os.path.join(output_dir, f"{run_id}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    return path
