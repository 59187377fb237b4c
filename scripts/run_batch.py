"""Batch executor for antfarm runs."""
from __future__ import annotations

import argparse
import csv
from pathlib import Path
from typing import Dict, List
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from configs import BatchSettings, Config
from antfarm import RoutePlan, load_farm, save_json
from antfarm.io_utils import ensure_dir
from antfarm.main import execute_run

SUMMARY_FIELDS = [
    "farm",
    "max_path_combination",
    "ants",
    "paths",
    "turns",
    "path_lengths",
    "ant_queue",
]


def _parse_int_list(values: List[str] | None) -> List[int] | None:
    if not values:
        return None
    return [int(value) for value in values]


def _summarise_run(config: Config, plan: RoutePlan) -> Dict:
    farm = load_farm(config.farm_path)
    return {
        "farm": Path(config.farm_path).name,
        "max_path_combination": config.max_path_combination,
        "ants": farm.ant_count,
        "paths": len(plan.paths),
        "turns": plan.turns,
        "path_lengths": " ".join(str(length) for length in plan.path_lengths),
        "ant_queue": " ".join(str(queued) for queued in plan.ant_queue),
    }


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Batch antfarm runs")
    parser.add_argument("--farms", nargs="*", help="Farm files to evaluate")
    parser.add_argument("--output", help="Override batch output root directory")
    parser.add_argument("--combinations", nargs="*", help="max_path_combination values to evaluate")
    parser.add_argument("--algorithm", help="Combination search strategy")
    args = parser.parse_args(argv)

    settings = BatchSettings()
    if args.farms:
        settings.farm_paths = args.farms
    if args.output:
        settings.output_root = args.output
    combination_override = _parse_int_list(args.combinations)
    if combination_override:
        settings.max_path_combinations = combination_override
    if args.algorithm:
        settings.algorithm = args.algorithm

    summaries = []
    for config in settings.iter_configs():
        plan, _result = execute_run(config)
        summaries.append(_summarise_run(config, plan))

    out_dir = ensure_dir(settings.output_root)
    summary_path = Path(out_dir) / "summary.json"
    save_json(summaries, str(summary_path))

    csv_path = Path(out_dir) / "summary.csv"
    with open(csv_path, "w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()
        writer.writerows(summaries)

    print(f"Batch summary written to {summary_path} and {csv_path}")


if __name__ == "__main__":
    main()
