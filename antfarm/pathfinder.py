"""Depth-first enumeration of simple start-to-end paths."""
from __future__ import annotations

from typing import List, Mapping, Sequence

Path = List[str]


def find_all_paths(
    adjacency: Mapping[str, Sequence[str]],
    start: str,
    end: str,
    max_rooms_per_path: int,
    max_total_paths: int,
) -> List[Path]:
    """Return every simple path from ``start`` to ``end`` within the caps.

    A branch is dropped once the partial path leading up to the current room
    already holds more than ``max_rooms_per_path`` rooms. Once
    ``max_total_paths`` results are recorded further complete paths are
    ignored. Neighbours are visited in adjacency order, so the result order is
    deterministic. An empty list means the rooms are not connected.
    """

    paths: List[Path] = []

    def dfs(current: str, path: Path) -> None:
        if len(path) > max_rooms_per_path:
            return
        path.append(current)
        try:
            if current == end:
                if len(paths) < max_total_paths:
                    paths.append(list(path))
                return
            for neighbor in adjacency.get(current, ()):
                if neighbor not in path:
                    dfs(neighbor, path)
        finally:
            path.pop()

    dfs(start, [])
    return paths


__all__ = ["Path", "find_all_paths"]
