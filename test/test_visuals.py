import pytest

pytest.importorskip("matplotlib")
pytest.importorskip("PIL")

from antfarm import RoutePlan
from antfarm.visuals import render_progress_gif


def test_progress_gif_is_written(tmp_path):
    plan = RoutePlan(paths=[["s", "e"], ["s", "a", "e"]], ant_queue=[2, 1], turns=2)
    output = tmp_path / "progress.gif"
    render_progress_gif(plan, 3, str(output))
    assert output.exists()
    assert output.read_bytes()[:3] == b"GIF"


def test_empty_plan_writes_nothing(tmp_path):
    output = tmp_path / "none.gif"
    render_progress_gif(RoutePlan.empty(), 3, str(output))
    assert not output.exists()
