"""Public API for the antfarm routing core."""
from .io_utils import ensure_dir, plan_to_dict, save_json, save_moves, write_run_log
from .layout import FarmFormatError, load_farm, parse_farm
from .optimizer import (
    NoViableCombination,
    PathLimits,
    RoutePlan,
    distribute_ants,
    find_optimal_combination,
    is_disjoint,
    iter_combinations,
    max_path_turns,
)
from .pathfinder import find_all_paths
from .planner import plan_routes
from .problem import AntFarm, MalformedEdge, build_adjacency
from .simulation_logger import SimulationLogger
from .simulator import (
    Ant,
    Move,
    SimulationResult,
    assign_ants,
    format_move,
    format_turn,
    iter_positions,
    render_moves,
    simulate_ants,
    step_turn,
)

__all__ = [
    "AntFarm",
    "MalformedEdge",
    "build_adjacency",
    "FarmFormatError",
    "load_farm",
    "parse_farm",
    "find_all_paths",
    "PathLimits",
    "RoutePlan",
    "NoViableCombination",
    "distribute_ants",
    "find_optimal_combination",
    "is_disjoint",
    "iter_combinations",
    "max_path_turns",
    "plan_routes",
    "Ant",
    "Move",
    "SimulationResult",
    "assign_ants",
    "format_move",
    "format_turn",
    "iter_positions",
    "render_moves",
    "simulate_ants",
    "step_turn",
    "SimulationLogger",
    "ensure_dir",
    "plan_to_dict",
    "save_json",
    "save_moves",
    "write_run_log",
]
