"""Farm file loading utilities."""
from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

from .problem import AntFarm, MalformedEdge


class FarmFormatError(ValueError):
    """The farm description cannot be turned into an ``AntFarm``."""


def _room_after(lines: Sequence[str], idx: int, command: str) -> str:
    if idx + 1 >= len(lines) or not lines[idx + 1].split():
        raise FarmFormatError(f"invalid file format: missing room definition after {command} command")
    return lines[idx + 1].split()[0]


def parse_farm(lines: Sequence[str]) -> AntFarm:
    """Parse the classic farm text format.

    The first line holds the ant count. ``##start`` and ``##end`` mark the
    line that follows them as the start or end room, other ``#`` lines are
    comments, lines with a dash are tunnels and anything else declares a room
    as ``<name> <x> <y>``.
    """

    lines = [line.rstrip("\r\n") for line in lines]
    if not lines:
        raise FarmFormatError("empty input file")

    try:
        ant_count = int(lines[0].strip())
    except ValueError:
        ant_count = 0
    if ant_count <= 0:
        raise FarmFormatError("invalid number of ants: must be a number greater than 0")

    start = end = ""
    rooms: List[str] = []
    links: List[Tuple[str, ...]] = []

    idx = 1
    while idx < len(lines):
        line = lines[idx].strip()
        if line == "##start":
            start = _room_after(lines, idx, "start")
            rooms.append(start)
            idx += 1
        elif line == "##end":
            end = _room_after(lines, idx, "end")
            rooms.append(end)
            idx += 1
        elif not line or line.startswith("#"):
            pass
        elif "-" in line:
            links.append(tuple(line.split("-")))
        else:
            rooms.append(line.split()[0])
        idx += 1

    if not start:
        raise FarmFormatError("no start room defined")
    if not end:
        raise FarmFormatError("no end room defined")
    if not links:
        raise FarmFormatError("no room connections found")

    try:
        return AntFarm.from_edges(ant_count, start, end, links, rooms=rooms)
    except MalformedEdge:
        raise
    except ValueError as exc:
        raise FarmFormatError(str(exc)) from exc


def load_farm(path: str) -> AntFarm:
    """Load a farm description from ``path``."""

    text = Path(path).read_text(encoding="utf-8")
    return parse_farm(text.splitlines())


__all__ = ["FarmFormatError", "load_farm", "parse_farm"]
