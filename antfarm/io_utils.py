"""IO utilities for antfarm runs."""
from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from .optimizer import RoutePlan
from .problem import AntFarm
from .simulator import SimulationResult

MOVE_FIELDS = ["turn", "ant_id", "room"]


def ensure_dir(path: str) -> Path:
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def save_json(data: Any, path: str) -> None:
    Path(path).write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def save_moves(moves: Iterable[dict], path: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=MOVE_FIELDS)
        writer.writeheader()
        for entry in moves:
            writer.writerow(entry)


def plan_to_dict(plan: RoutePlan) -> dict:
    return {
        "turns": plan.turns,
        "paths": [
            {"rooms": list(path), "length": len(path) - 1, "ants": queued}
            for path, queued in zip(plan.paths, plan.ant_queue)
        ],
        "notices": list(plan.notices),
    }


def write_run_log(
    path: str,
    *,
    config_dict: Mapping[str, Any],
    farm: AntFarm,
    plan: RoutePlan,
    result: SimulationResult | None = None,
) -> None:
    """Persist a JSON summary of one run."""

    limit_keys = (
        "max_rooms_per_path",
        "max_total_paths",
        "max_path_combination",
        "max_direct_paths",
        "max_paths_in_combination",
    )
    payload: dict[str, Any] = {
        "farm": Path(str(config_dict.get("farm_path", ""))).name,
        "algorithm": config_dict.get("algorithm"),
        "limits": {key: config_dict.get(key) for key in limit_keys},
        "ants": farm.ant_count,
        "start": farm.start,
        "end": farm.end,
        "rooms": len(farm.other_rooms()) + 2,
        "solved": bool(plan),
        "paths": len(plan.paths),
        "path_lengths": plan.path_lengths,
        "ant_queue": list(plan.ant_queue),
        "turns": plan.turns,
        "notices": list(plan.notices),
    }
    if result is not None:
        payload["simulated_turns"] = result.turn_count
        payload["moves"] = len(result.moves)

    Path(path).write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


__all__ = ["ensure_dir", "plan_to_dict", "save_json", "save_moves", "write_run_log"]
