import os
import yaml
from dataclasses import dataclass, replace
from typing import Optional


def _read(path: str):
    with open(path, "r") as f:
        return yaml.safe_load(f)


@dataclass(frozen=True)
class Paths:
    input: str = ""
    output: str = ""
    plot: Optional[str] = None

@dataclass(frozen=True)
class Logging:
    level: str = "INFO"

@dataclass(frozen=True)
class Clustering:
    eps_min: float = 10.0
    eps_max: float = 20.0
    pts_min: float = 1.0
    pts_max: float = 2.0
    count_self: bool = True
    neighbor_search: str = "brute"
    metric: str = "euclidean"

@dataclass(frozen=True)
class Output:
    grouped: bool = False
    indent: int = 2


@dataclass(frozen=True)
class Config:
    paths: Paths = Paths()
    logging: Logging = Logging()
    clustering: Clustering = Clustering()
    output: Output = Output()

def load_config(path: Optional[str]) -> Config:
    cfg = Config()
    if path and os.path.isfile(path):
        data = _read(path) or {}
        paths = replace(cfg.paths, **(data.get("paths", {}) or {}))
        logging = replace(cfg.logging, **(data.get("logging", {}) or {}))
        clustering = replace(cfg.clustering, **(data.get("clustering", {}) or {}))
        output = replace(cfg.output, **(data.get("output", {}) or {}))
        cfg = replace(cfg, paths=paths, logging=logging, clustering=clustering, output=output)
    return cfg
