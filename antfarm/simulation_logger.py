"""JSON Lines recorder for per-turn ant positions."""
import json
from pathlib import Path
from typing import Iterable, Sequence

from .simulator import Ant


class SimulationLogger:
    def __init__(self, save_path: str = "logs/trajectories.jsonl"):
        Path(save_path).parent.mkdir(exist_ok=True, parents=True)
        self.file = open(save_path, "w", encoding="utf-8")

    def record(self, t: int, ants: Iterable[Ant], paths: Sequence[Sequence[str]]):
        data = {
            "turn": t,
            "ants": [
                {
                    "id": ant.id,
                    "path": ant.path_idx,
                    "room": paths[ant.path_idx][ant.position],
                    "done": ant.done,
                }
                for ant in ants
            ],
        }
        self.file.write(json.dumps(data, ensure_ascii=False) + "\n")

    def close(self):
        self.file.close()

    def __enter__(self) -> "SimulationLogger":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
