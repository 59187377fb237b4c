import json

from configs import Config
from antfarm.main import execute_run, run_from_cli

from helpers import DIRECT_FARM, EXAMPLE_FARM

EXPECTED_DIRECT_REPORT = """Number of ants: 5
Start: s
End: e
Other rooms: a 

Path Combination Selected:
Path 1: [s e]
Path 2: [s a e]

L1-e L2-a
L2-e L3-e L4-a
L4-e L5-e

Number of Turns = 3
"""


def test_cli_report_for_direct_farm(capsys):
    assert run_from_cli([DIRECT_FARM]) == 0
    assert capsys.readouterr().out == EXPECTED_DIRECT_REPORT


def test_cli_reports_missing_route(tmp_path, capsys):
    farm = tmp_path / "split.txt"
    farm.write_text("2\n##start\ns\n##end\ne\ns-a\nb-e\n", encoding="utf-8")
    assert run_from_cli([str(farm)]) == 1
    out = capsys.readouterr().out
    assert out.endswith("No paths found from start to end.\n")
    assert "Number of ants" not in out


def test_cli_reports_malformed_link(tmp_path, capsys):
    farm = tmp_path / "bad.txt"
    farm.write_text("2\n##start\nA\n##end\nB\nA-B\nA-A\n", encoding="utf-8")
    assert run_from_cli([str(farm)]) == 1
    assert capsys.readouterr().out == "Invalid file format: invalid link between rooms: A-A\n"


def test_execute_run_saves_artifacts(tmp_path):
    config = Config(farm_path=DIRECT_FARM, save_artifacts=True, output_dir=str(tmp_path))
    plan, result = execute_run(config)
    assert result.turn_count == plan.turns == 3

    saved_plan = json.loads((tmp_path / "plan.json").read_text(encoding="utf-8"))
    assert [entry["ants"] for entry in saved_plan["paths"]] == [3, 2]

    run_log = json.loads((tmp_path / "run.log").read_text(encoding="utf-8"))
    assert run_log["turns"] == run_log["simulated_turns"] == 3
    assert run_log["moves"] == 7

    csv_lines = (tmp_path / "moves.csv").read_text(encoding="utf-8").splitlines()
    assert csv_lines[0] == "turn,ant_id,room"
    assert csv_lines[1] == "1,1,e"

    trajectory = (tmp_path / "trajectories.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(trajectory) == 4
    assert json.loads(trajectory[-1])["ants"][-1] == {"id": 5, "path": 0, "room": "e", "done": True}


def test_execute_run_without_simulation():
    plan, result = execute_run(Config(farm_path=EXAMPLE_FARM, simulate=False))
    assert plan
    assert result is None


def test_repeated_runs_match():
    config = Config(farm_path=EXAMPLE_FARM)
    first_plan, first_result = execute_run(config)
    second_plan, second_result = execute_run(config)
    assert first_plan == second_plan
    assert first_result == second_result
