"""fuzzy-dbscan

Cluster a point file with FuzzyDBSCAN and write the fuzzy assignments as JSON.

Input formats (by suffix):
- .json: list of {"x": .., "y": ..} / {"coords": [...]} records or coordinate lists
- .csv / .txt: one point per row, numeric columns

Usage:
    fuzzy-dbscan \
        --input points.json \
        --output assignments.json \
        --eps-min 10 --eps-max 20 \
        --pts-min 1 --pts-max 2 \
        --log-level INFO
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from fuzzy_dbscan.application.use_case import ClusterPointsUseCase
from fuzzy_dbscan.common.cli import (
    add_clustering_args,
    add_config_arg,
    add_log_level_arg,
    parse_args_with_config,
    setup_logging,
)
from fuzzy_dbscan.common.config import Config
from fuzzy_dbscan.common.logging import CountingHandler
from fuzzy_dbscan.entrypoints.cluster import FuzzyDBSCAN
from fuzzy_dbscan.exceptions import FuzzyDBSCANError, InvalidParametersError
from fuzzy_dbscan.infrastructure.backend import as_coordinate_array, get_metric, make_neighbor_search
from fuzzy_dbscan.infrastructure.backend._index import NEIGHBOR_SEARCHES
from fuzzy_dbscan.infrastructure.filesystem import JsonAssignmentRepository, point_source_for
from fuzzy_dbscan.infrastructure.plotting import save_cluster_plot
from fuzzy_dbscan.infrastructure.points import assignments_to_records
from fuzzy_dbscan.infrastructure.presenters import log_cluster_summary, log_run_header
from fuzzy_dbscan.validation.validation_helpers import log_issues

EXIT_OK = 0
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Fuzzy density-based clustering (FuzzyDBSCAN).")
    add_config_arg(p)
    add_log_level_arg(p)
    p.add_argument("--input", help="Point file (.json, .csv or .txt)")
    p.add_argument("--output", help="Where to write assignments as JSON (stdout if omitted)")
    p.add_argument("--plot", help="Optional PNG path for a scatter plot of the clusters")
    p.add_argument("--skip-header", action="store_true", help="Skip the first row of CSV/TXT input")
    p.add_argument("--grouped", action="store_true", default=None,
                   help="Write one entry per cluster instead of a flat assignment list")
    add_clustering_args(p, NEIGHBOR_SEARCHES)
    return p


def defaults_from_cfg(cfg: Config) -> dict:
    return {
        "input": cfg.paths.input or None,
        "output": cfg.paths.output or None,
        "plot": cfg.paths.plot,
        "log_level": cfg.logging.level,
        "eps_min": cfg.clustering.eps_min,
        "eps_max": cfg.clustering.eps_max,
        "pts_min": cfg.clustering.pts_min,
        "pts_max": cfg.clustering.pts_max,
        "count_self": cfg.clustering.count_self,
        "neighbor_search": cfg.clustering.neighbor_search,
        "metric": cfg.clustering.metric,
        "grouped": cfg.output.grouped,
    }


def run(args: argparse.Namespace, cfg: Config) -> int:
    if not args.input:
        logging.error("No input file given (use --input or paths.input in the config)")
        return EXIT_INVALID

    fuzzy_dbscan = FuzzyDBSCAN(
        eps_min=args.eps_min,
        eps_max=args.eps_max,
        pts_min=args.pts_min,
        pts_max=args.pts_max,
        count_self=args.count_self,
        distance_fn=get_metric(args.metric),
        neighbor_search=make_neighbor_search(args.neighbor_search, args.metric),
    )
    source = point_source_for(Path(args.input), skip_header=args.skip_header)
    use_case = ClusterPointsUseCase(
        source=source,
        clusterer=fuzzy_dbscan.analyze,
        repository=JsonAssignmentRepository(grouped=bool(args.grouped), indent=cfg.output.indent),
    )

    output_path = Path(args.output) if args.output else None
    result = use_case.run(input_path=Path(args.input), output_path=output_path)
    log_run_header(result)
    log_cluster_summary(result)

    if output_path is None:
        json.dump(assignments_to_records(result.assignments), sys.stdout, indent=cfg.output.indent)
        sys.stdout.write("\n")

    if args.plot and result.n_points:
        coords = as_coordinate_array(source.load(path=Path(args.input)))
        save_cluster_plot(coords, result.assignments, args.plot)

    return EXIT_OK


def main(argv: Optional[list] = None) -> int:
    args, cfg = parse_args_with_config(build_parser, defaults_from_cfg, argv)
    setup_logging(args.log_level)

    with CountingHandler() as counter:
        try:
            code = run(args, cfg)
        except InvalidParametersError as e:
            log_issues(e.issues, "error")
            code = EXIT_INVALID
        except (FuzzyDBSCANError, ValueError, OSError) as e:
            logging.error("%s", e)
            code = EXIT_INVALID

    if counter.warnings or counter.errors:
        logging.info("Finished with %d warning(s), %d error(s)", counter.warnings, counter.errors)
    return code


if __name__ == "__main__":
    sys.exit(main())
