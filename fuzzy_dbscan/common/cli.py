import argparse, logging
from typing import Callable, Tuple, Optional, Sequence
from fuzzy_dbscan.common.config import load_config, Config

METRICS = ("euclidean", "cityblock", "manhattan", "chebyshev", "minkowski", "cosine")

def add_config_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to YAML config file")

def add_log_level_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ERROR)")

def add_clustering_args(parser: argparse.ArgumentParser, neighbor_searches: Sequence[str]) -> None:
    """FuzzyDBSCAN intervals plus the metric and neighbor search; defaults come from the config."""
    g = parser.add_argument_group("clustering")
    g.add_argument("--eps-min", type=float, help="Lower bound of the fuzzy neighborhood radius")
    g.add_argument("--eps-max", type=float, help="Upper bound of the fuzzy neighborhood radius")
    g.add_argument("--pts-min", type=float, help="Lower bound of the fuzzy density threshold")
    g.add_argument("--pts-max", type=float, help="Upper bound of the fuzzy density threshold")
    g.add_argument("--exclude-self", dest="count_self", action="store_false",
                   help="Do not count a point towards its own density")
    g.add_argument("--neighbor-search", choices=tuple(neighbor_searches), help="Candidate pair enumeration")
    g.add_argument("--metric", choices=METRICS, help="Distance metric")

def parse_args_with_config(build_parser: Callable[[], argparse.ArgumentParser],
                           defaults_from_cfg: Callable[[Config], dict],
                           argv: Optional[list] = None) -> Tuple[argparse.Namespace, Config]:
    """
    1. Build a parser based on the passed build_parser function
    2. Load the YAML config named by --config (a missing file falls back to the built-in defaults)
    3. Install the config values as parser defaults, so explicit flags still win
    """
    p = build_parser()
    cfg_path = p.parse_known_args(argv)[0].config
    cfg = load_config(cfg_path)
    p.set_defaults(**defaults_from_cfg(cfg))
    args = p.parse_args(argv)
    return args, cfg

def setup_logging(log_level: str) -> None:
    level = logging.getLevelName(str(log_level).upper())
    logging.basicConfig(level=level if isinstance(level, int) else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        force=True)
