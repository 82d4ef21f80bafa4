"""Host adapter: loosely-typed point records <-> engine points and records."""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from fuzzy_dbscan.domain.model import Assignment
from fuzzy_dbscan.exceptions import PointFormatError

AXES = ("x", "y", "z")


@dataclass(frozen=True)
class Point:
    """An N-dimensional point with Euclidean distance (implements MetricSpace)."""

    coords: Tuple[float, ...]

    @classmethod
    def of(cls, *values: float) -> "Point":
        return cls(coords=tuple(float(v) for v in values))

    @property
    def x(self) -> float:
        return self.coords[0]

    @property
    def y(self) -> float:
        return self.coords[1]

    def distance(self, other: "Point") -> float:
        return math.dist(self.coords, other.coords)


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise PointFormatError("INVALID_COORDINATE", f"{where}: expected a finite number, got {value!r}", where)
    return float(value)


def record_to_point(record: Any, index: int = 0) -> Point:
    """Coerce one host record into a Point.

    Accepted shapes: `{"x": .., "y": ..[, "z": ..]}`, `{"coords": [...]}`, a sequence
    of numbers, or an object with numeric `x`/`y` (and optional `z`) attributes.
    """
    where = f"point[{index}]"
    if isinstance(record, Point):
        return record

    if isinstance(record, Mapping):
        if "coords" in record:
            values = record["coords"]
        elif "x" in record and "y" in record:
            values = [record[a] for a in AXES if a in record]
        else:
            raise PointFormatError("MISSING_COORDINATES", f"{where}: record needs 'x' and 'y' or 'coords'", where)
    elif isinstance(record, (str, bytes)):
        raise PointFormatError("INVALID_RECORD", f"{where}: unsupported record {record!r}", where)
    elif isinstance(record, Sequence) or hasattr(record, "__array__"):
        values = list(record)
    elif hasattr(record, "x") and hasattr(record, "y"):
        values = [getattr(record, a) for a in AXES if hasattr(record, a)]
    else:
        raise PointFormatError("INVALID_RECORD", f"{where}: unsupported record {record!r}", where)

    coords = tuple(_number(v, f"{where}[{k}]") for k, v in enumerate(values))
    if not coords:
        raise PointFormatError("MISSING_COORDINATES", f"{where}: no coordinates", where)
    return Point(coords=coords)


def records_to_points(records: Iterable[Any]) -> List[Point]:
    """Coerce host records, requiring one dimensionality across all of them."""
    points = [record_to_point(r, i) for i, r in enumerate(records)]
    dims = {len(p.coords) for p in points}
    if len(dims) > 1:
        raise PointFormatError(
            "MIXED_DIMENSIONS",
            f"points have mixed dimensionality: {sorted(dims)}",
        )
    return points


def assignments_to_records(assignments: Iterable[Assignment]) -> List[Dict[str, Any]]:
    return [a.to_dict() for a in assignments]
