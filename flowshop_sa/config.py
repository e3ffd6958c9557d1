"""Run configuration loaded from a YAML (or JSON) file.

``RunConfig`` bundles every setting a run needs so the CLI can hand a single
validated object to the searches and the reporting code.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Optional

import yaml

from flowshop_sa.cooling import COOLING_STRATEGIES


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Validated settings of one run.

    ``neighbors`` is the number of neighbours sampled per iteration (100 by
    convention). ``seed`` may be None for a non-reproducible run.
    """

    jobs_num: int
    machines_num: int
    iterations: int
    initial_temp: float
    cooling_strategy: int
    neighbors: int = 100
    seed: Optional[int] = None
    log_level: str = "INFO"
    charts_enabled: bool = True
    charts_dir: str = "charts"

    def __post_init__(self) -> None:
        if self.jobs_num < 1:
            raise ValueError(f"jobs_num must be >= 1 (got {self.jobs_num})")
        if self.machines_num < 1:
            raise ValueError(f"machines_num must be >= 1 (got {self.machines_num})")
        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0 (got {self.iterations})")
        if self.neighbors < 1:
            raise ValueError(f"neighbors must be >= 1 (got {self.neighbors})")
        if self.initial_temp <= 0:
            raise ValueError(f"initial_temp must be > 0 (got {self.initial_temp})")
        if self.cooling_strategy not in COOLING_STRATEGIES:
            raise ValueError(
                f"cooling_strategy must be one of {sorted(COOLING_STRATEGIES)} "
                f"(got {self.cooling_strategy})"
            )


_REQUIRED_KEYS = ("jobs_num", "machines_num", "iterations", "initial_temp", "cooling_strategy")


def config_from_dict(cfg: dict[str, Any]) -> RunConfig:
    """Build a RunConfig from a parsed mapping.

    Raises:
        ValueError: If a required key is missing or a value is invalid.
    """
    missing = [k for k in _REQUIRED_KEYS if cfg.get(k) is None]
    if missing:
        raise ValueError(f"Missing config keys: {', '.join(missing)}")
    charts_cfg = cfg.get("charts", {}) if isinstance(cfg.get("charts"), dict) else {}
    seed = cfg.get("seed")
    try:
        return RunConfig(
            jobs_num=int(cfg["jobs_num"]),
            machines_num=int(cfg["machines_num"]),
            iterations=int(cfg["iterations"]),
            initial_temp=float(cfg["initial_temp"]),
            cooling_strategy=int(cfg["cooling_strategy"]),
            neighbors=int(cfg.get("neighbors", 100)),
            seed=int(seed) if seed is not None else None,
            log_level=str(cfg.get("log_level", "INFO")),
            charts_enabled=bool(charts_cfg.get("enabled", True)),
            charts_dir=str(charts_cfg.get("dir", "charts")),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_config(config_file: str = "config.yaml") -> RunConfig:
    """Load configuration from a YAML or JSON file."""
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        text = f.read()
    if config_file.endswith((".yml", ".yaml")):
        cfg = yaml.safe_load(text) or {}
    else:
        cfg = json.loads(text)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {config_file} must contain a mapping")
    return config_from_dict(cfg)
