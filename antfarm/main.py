"""Command-line entrypoint for antfarm."""
from __future__ import annotations

import argparse
import sys
from dataclasses import asdict
from typing import List, Tuple

from configs import ALGORITHMS, Config
from antfarm import (
    AntFarm,
    FarmFormatError,
    MalformedEdge,
    RoutePlan,
    SimulationLogger,
    SimulationResult,
    iter_positions,
    load_farm,
    plan_routes,
    plan_to_dict,
    render_moves,
    save_json,
    save_moves,
    simulate_ants,
    write_run_log,
)


def _print_farm(farm: AntFarm) -> None:
    print(f"Number of ants: {farm.ant_count}")
    print(f"Start: {farm.start}")
    print(f"End: {farm.end}")
    others = farm.other_rooms()
    print(f"Other rooms: {' '.join(others) + ' ' if others else 'no other rooms found'}")
    print()


def _print_plan(plan: RoutePlan) -> None:
    print("Path Combination Selected:")
    for idx, path in enumerate(plan.paths, start=1):
        print(f"Path {idx}: [{' '.join(path)}]")
    print()


def _save_artifacts(config: Config, farm: AntFarm, plan: RoutePlan, result: SimulationResult | None) -> None:
    out_dir = config.ensure_output_dir()
    save_json(plan_to_dict(plan), str(out_dir / config.plan_filename))

    if result is not None:
        move_rows = [asdict(move) for move in result.moves]
        save_moves(move_rows, str(out_dir / config.moves_csv_filename))
        save_json(move_rows, str(out_dir / config.moves_json_filename))
        with SimulationLogger(str(out_dir / config.trajectories_filename)) as logger:
            for turn, ants in iter_positions(plan, farm.ant_count):
                logger.record(turn, ants, plan.paths)
        if config.render_gif:
            from antfarm.visuals import render_progress_gif

            render_progress_gif(plan, farm.ant_count, str(out_dir / config.gif_filename))

    write_run_log(
        str(out_dir / config.log_filename),
        config_dict=config.as_dict(),
        farm=farm,
        plan=plan,
        result=result,
    )


def execute_run(config: Config, verbose: bool = False) -> Tuple[RoutePlan, SimulationResult | None]:
    """Plan and simulate a farm for a fully specified configuration."""

    config.validate()
    farm = load_farm(config.farm_path)
    plan = plan_routes(farm, config, algorithm=config.algorithm)

    result = None
    if plan and config.simulate:
        result = simulate_ants(plan, farm.ant_count)

    if verbose:
        for notice in plan.notices:
            print(f"Notice: {notice}")
        if plan:
            _print_farm(farm)
            _print_plan(plan)
            if result is not None:
                print(render_moves(result))
                print(f"\nNumber of Turns = {result.turn_count}")
            else:
                print(f"Number of Turns = {plan.turns}")

    if config.save_artifacts:
        _save_artifacts(config, farm, plan, result)

    return plan, result


def run_from_cli(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Route an ant colony through a farm in the fewest turns")
    parser.add_argument("farm", help="Farm description file")
    parser.add_argument("--algorithm", default="auto", choices=ALGORITHMS, help="Combination search strategy")
    parser.add_argument("--output", default="artifacts", help="Directory for JSON/CSV outputs")
    parser.add_argument("--save", action="store_true", help="Persist plan, moves and run log")
    parser.add_argument("--gif", action="store_true", help="Render a progress GIF (implies --save)")
    parser.add_argument("--no-sim", action="store_true", help="Skip the turn simulation")
    args = parser.parse_args(argv)

    config = Config(
        farm_path=args.farm,
        algorithm=args.algorithm,
        output_dir=args.output,
        save_artifacts=args.save or args.gif,
        render_gif=args.gif,
        simulate=not args.no_sim,
    )
    try:
        config.update_from_env()
        plan, _result = execute_run(config, verbose=True)
    except (FarmFormatError, MalformedEdge) as exc:
        print(f"Invalid file format: {exc}")
        return 1
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1

    if not plan:
        print("No paths found from start to end.")
        return 1
    return 0


def main() -> None:
    sys.exit(run_from_cli())


if __name__ == "__main__":
    main()
