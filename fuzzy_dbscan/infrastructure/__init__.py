"""Infrastructure layer: adapters for point IO, numeric backends and presentation.

The scikit-learn estimator is not re-exported here; import it explicitly from
`fuzzy_dbscan.infrastructure.sklearn_estimator`.
"""

from .filesystem import CsvPointSource, JsonAssignmentRepository, JsonPointSource, point_source_for
from .points import Point, assignments_to_records, record_to_point, records_to_points

__all__ = [
    "CsvPointSource",
    "JsonAssignmentRepository",
    "JsonPointSource",
    "point_source_for",
    "Point",
    "assignments_to_records",
    "record_to_point",
    "records_to_points",
]
