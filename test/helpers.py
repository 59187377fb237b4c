from pathlib import Path

from antfarm import AntFarm

TWO_ROUTE_EDGES = [("s", "a"), ("a", "e"), ("s", "b"), ("b", "c"), ("c", "e")]
DIRECT_EDGES = [("s", "e"), ("s", "a"), ("a", "e")]

TWO_ROUTE_PATHS = [["s", "a", "e"], ["s", "b", "c", "e"]]


def make_farm(edges, ant_count=4, start="s", end="e"):
    return AntFarm.from_edges(ant_count, start, end, edges)

FARMS_DIR = Path(__file__).resolve().parents[1] / "farms"
EXAMPLE_FARM = str(FARMS_DIR / "example.txt")
DIRECT_FARM = str(FARMS_DIR / "direct.txt")
