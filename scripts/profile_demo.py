"""CLI running a synthetic nested workload and printing its time report."""

from __future__ import annotations

import sys
from pathlib import Path

import hydra
from omegaconf import DictConfig, OmegaConf

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from crude_profiler import Profiler, build_report_config  # noqa: E402
from crude_profiler.demo import run_demo_workload  # noqa: E402
from crude_profiler.utils.io import save_report  # noqa: E402


@hydra.main(version_base=None, config_path="../configs", config_name="config")
def main(cfg: DictConfig) -> None:
    print(OmegaConf.to_yaml(cfg, resolve=True))
    profiler = Profiler(config=build_report_config(cfg))
    run_demo_workload(profiler, cfg)
    text = profiler.report()
    print(text)

    paths_cfg = cfg.get("paths")
    report_file = paths_cfg.get("report_file") if paths_cfg is not None else None
    if report_file:
        target = save_report(report_file, text, append=bool(paths_cfg.get("append", False)))
        print(f"Report written to {target}")


if __name__ == "__main__":
    main()
