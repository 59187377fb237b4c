"""Planning interface for ant farms."""
from __future__ import annotations

from typing import TYPE_CHECKING

from .optimizer import RoutePlan, find_optimal_combination
from .pathfinder import find_all_paths
from .problem import AntFarm

if TYPE_CHECKING:
    from configs import Config


def plan_routes(farm: AntFarm, config: "Config", algorithm: str | None = None) -> RoutePlan:
    algorithm = algorithm or config.algorithm
    if algorithm not in ("auto", "exhaustive"):
        raise NotImplementedError(f"Unknown algorithm: {algorithm}")

    limits = config.limits()
    paths = find_all_paths(farm.adjacency, farm.start, farm.end, limits.max_rooms_per_path, limits.max_total_paths)
    if not paths:
        return RoutePlan.empty(
            [f"No valid paths found within length limit of {limits.max_rooms_per_path} rooms"]
        )
    return find_optimal_combination(paths, farm.ant_count, limits, force_exhaustive=algorithm == "exhaustive")


__all__ = ["plan_routes"]
