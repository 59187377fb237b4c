"""Problem definitions for the ant farm graph."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

Adjacency = Dict[str, List[str]]


class MalformedEdge(ValueError):
    """A tunnel specification that does not join two distinct rooms."""


def _describe(edge: Sequence[str]) -> str:
    if isinstance(edge, str):
        return edge
    return "-".join(str(part) for part in edge)


def build_adjacency(edges: Iterable[Sequence[str]]) -> Adjacency:
    """Build a symmetric, insertion-ordered adjacency list from room pairs.

    Neighbour order follows the order in which tunnels are listed, which fixes
    the order of path enumeration downstream. A tunnel listed twice (in either
    direction) is only recorded once.
    """

    adjacency: Adjacency = {}
    for edge in edges:
        parts = [edge] if isinstance(edge, str) else list(edge)
        if len(parts) != 2 or not all(parts) or parts[0] == parts[1]:
            raise MalformedEdge(f"invalid link between rooms: {_describe(edge)}")
        room_a, room_b = parts
        neighbours_a = adjacency.setdefault(room_a, [])
        neighbours_b = adjacency.setdefault(room_b, [])
        if room_b not in neighbours_a:
            neighbours_a.append(room_b)
            neighbours_b.append(room_a)
    return adjacency


@dataclass
class AntFarm:
    ant_count: int
    start: str
    end: str
    adjacency: Adjacency
    rooms: Sequence[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.ant_count < 1:
            raise ValueError(f"ant count must be greater than 0, got {self.ant_count}")
        if self.start == self.end:
            raise ValueError(f"start and end must be different rooms, both are {self.start}")

    @classmethod
    def from_edges(
        cls,
        ant_count: int,
        start: str,
        end: str,
        edges: Iterable[Sequence[str]],
        rooms: Sequence[str] = (),
    ) -> "AntFarm":
        return cls(ant_count=ant_count, start=start, end=end, adjacency=build_adjacency(edges), rooms=list(rooms))

    def neighbors(self, room: str) -> List[str]:
        return self.adjacency.get(room, [])

    def other_rooms(self) -> List[str]:
        """Rooms other than start and end, linked rooms first."""

        ordered = list(self.adjacency)
        ordered.extend(room for room in self.rooms if room not in self.adjacency)
        return [room for room in ordered if room not in (self.start, self.end)]


__all__ = ["AntFarm", "Adjacency", "MalformedEdge", "build_adjacency"]
