"""Filesystem adapters for point input and assignment output."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from fuzzy_dbscan.domain.grouping import group_by_cluster
from fuzzy_dbscan.domain.model import ClusteringResult
from fuzzy_dbscan.exceptions import PointFormatError
from fuzzy_dbscan.infrastructure.points import Point, assignments_to_records, records_to_points


# ---------------------------------------------------------------------------
# PointSource Adapters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class JsonPointSource:
    """Filesystem adapter: a JSON array of point records.

    Records may be `{"x": .., "y": ..}` objects, `{"coords": [...]}` objects or plain
    coordinate lists. An object with a top-level "points" key is also accepted.
    """

    def load(self, *, path: Path) -> List[Point]:
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise PointFormatError("INVALID_JSON", f"{path}: {e}", str(path)) from e
        if isinstance(data, dict):
            data = data.get("points")
        if not isinstance(data, list):
            raise PointFormatError("INVALID_JSON", f"{path}: expected a list of point records", str(path))
        return records_to_points(data)


@dataclass(frozen=True)
class CsvPointSource:
    """Filesystem adapter: one point per row, numeric columns only."""

    delimiter: Optional[str] = ","  # None splits on whitespace
    skip_header: bool = False

    def load(self, *, path: Path) -> List[Point]:
        try:
            arr = np.loadtxt(
                Path(path),
                delimiter=self.delimiter,
                skiprows=1 if self.skip_header else 0,
                dtype=np.float64,
                ndmin=2,
            )
        except ValueError as e:
            raise PointFormatError("INVALID_CSV", f"{path}: {e}", str(path)) from e
        return records_to_points(arr.tolist())


def point_source_for(path: Path, *, skip_header: bool = False):
    """Pick a PointSource from the file suffix (.json, .csv, .txt)."""
    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return JsonPointSource()
    if suffix in (".csv", ".txt"):
        return CsvPointSource(delimiter="," if suffix == ".csv" else None, skip_header=skip_header)
    raise PointFormatError("UNKNOWN_FORMAT", f"Unsupported point file: {path}", str(path))


# ---------------------------------------------------------------------------
# AssignmentRepository Adapter
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class JsonAssignmentRepository:
    """Filesystem adapter: persist assignments as JSON."""

    grouped: bool = False
    indent: int = 2

    def save(self, *, result: ClusteringResult, path: Path) -> None:
        payload = _grouped_to_list(result) if self.grouped else assignments_to_records(result.assignments)
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(payload, indent=self.indent), encoding="utf-8")


# ---------------------------------------------------------------------------
# Serialization Helpers
# ---------------------------------------------------------------------------


def _grouped_to_list(result: ClusteringResult) -> List[Dict[str, Any]]:
    """Convert a result to the per-cluster layout, noise group last."""
    return [
        {
            "cluster": group.cluster,
            "members": assignments_to_records(group.members),
        }
        for group in group_by_cluster(result.assignments)
    ]
