"""Manifest helpers for persisted tour runs."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from ...config import settings
from ...persistence.filesystem import TIMESTAMP_FORMAT


def _output_root(root: Path | None = None) -> Path:
    return ((root or settings.data_root) / "outputs").resolve()


def list_runs(*, limit: Optional[int] = None, root: Path | None = None) -> List[dict]:
    output_root = _output_root(root)
    if not output_root.exists():
        return []

    runs: List[dict] = []
    for run_dir in sorted((p for p in output_root.iterdir() if p.is_dir()), key=_sort_key, reverse=True):
        run_info = _build_run_summary(run_dir)
        if not run_info:
            continue
        runs.append(run_info)
        if limit and len(runs) >= limit:
            break
    return runs


def resolve_export_file(run_id: str, filename: str, *, root: Path | None = None) -> Path:
    output_root = _output_root(root)
    candidate = (output_root / run_id / filename).resolve()
    if output_root not in candidate.parents:
        raise FileNotFoundError(filename)
    if not candidate.is_file():
        raise FileNotFoundError(filename)
    return candidate


def _build_run_summary(run_dir: Path) -> Optional[dict]:
    name_parts = run_dir.name.split("_")
    if len(name_parts) < 2 or name_parts[0] != "tour":
        return None
    summary = _load_summary(run_dir / "summary.json") or {}
    return {
        "id": run_dir.name,
        "created_at": _parse_timestamp(name_parts[-1]),
        "run_label": summary.get("run_label"),
        "pin_count": summary.get("pin_count") or 0,
        "distance_miles": summary.get("distance_miles"),
        "files": sorted(path.name for path in run_dir.iterdir() if path.is_file()),
    }


def _load_summary(path: Path) -> Optional[dict]:
    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _parse_timestamp(value: str) -> Optional[datetime]:
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        return None


def _sort_key(path: Path) -> str:
    return path.name.split("_")[-1]
