"""Application layer: use cases."""

from .use_case import ClusterPointsUseCase

__all__ = ["ClusterPointsUseCase"]
