"""Entrypoints: composition roots for the library API and the CLI."""

from .cluster import FuzzyDBSCAN, analyze, build_service, cluster

__all__ = ["FuzzyDBSCAN", "analyze", "build_service", "cluster"]
