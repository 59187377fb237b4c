"""Turn-by-turn simulator for route plans."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List, Sequence, Set, Tuple

from .optimizer import RoutePlan
from .pathfinder import Path


@dataclass(frozen=True)
class Ant:
    id: int
    path_idx: int
    position: int = 0
    done: bool = False


@dataclass(frozen=True)
class Move:
    turn: int
    ant_id: int
    room: str


@dataclass
class SimulationResult:
    turns: List[List[Move]] = field(default_factory=list)

    @property
    def turn_count(self) -> int:
        return len(self.turns)

    @property
    def moves(self) -> List[Move]:
        return [move for turn in self.turns for move in turn]


def assign_ants(ant_queue: Sequence[int], ant_count: int) -> List[Ant]:
    """Hand out ant ids round-robin over the paths, honouring each quota."""

    if sum(ant_queue) != ant_count:
        raise ValueError(f"ant queue {list(ant_queue)} does not add up to {ant_count} ants")
    remaining = list(ant_queue)
    ants: List[Ant] = []
    path_idx = 0
    while len(ants) < ant_count:
        if remaining[path_idx] > 0:
            ants.append(Ant(id=len(ants) + 1, path_idx=path_idx))
            remaining[path_idx] -= 1
        path_idx = (path_idx + 1) % len(remaining)
    return ants


def _tunnel(room_a: str, room_b: str) -> FrozenSet[str]:
    return frozenset((room_a, room_b))


def step_turn(ants: Sequence[Ant], paths: Sequence[Path], turn: int) -> Tuple[List[Ant], List[Move]]:
    """Advance every ant that can move this turn, lowest id first.

    A room other than the path's last room takes one arrival per turn and a
    tunnel carries one ant per turn in either direction.
    """

    occupied_rooms: Set[str] = set()
    occupied_tunnels: Set[FrozenSet[str]] = set()
    next_ants: List[Ant] = []
    moves: List[Move] = []

    for ant in sorted(ants, key=lambda a: a.id):
        path = paths[ant.path_idx]
        next_pos = ant.position + 1
        if ant.done or next_pos >= len(path):
            next_ants.append(ant)
            continue

        current_room, next_room = path[ant.position], path[next_pos]
        is_exit = next_pos == len(path) - 1
        tunnel = _tunnel(current_room, next_room)
        if (not is_exit and next_room in occupied_rooms) or tunnel in occupied_tunnels:
            next_ants.append(ant)
            continue

        if not is_exit:
            occupied_rooms.add(next_room)
        occupied_tunnels.add(tunnel)
        next_ants.append(replace(ant, position=next_pos, done=is_exit))
        moves.append(Move(turn=turn, ant_id=ant.id, room=next_room))

    return next_ants, moves


def simulate_ants(plan: RoutePlan, ant_count: int) -> SimulationResult:
    """Run the plan until a turn passes with no movement."""

    result = SimulationResult()
    if not plan:
        return result

    ants = assign_ants(plan.ant_queue, ant_count)
    while True:
        ants, moves = step_turn(ants, plan.paths, result.turn_count + 1)
        if not moves:
            break
        result.turns.append(moves)
    return result


def iter_positions(plan: RoutePlan, ant_count: int) -> Iterable[Tuple[int, List[Ant]]]:
    """Yield ``(turn, ants)`` after each turn, starting with turn 0."""

    if not plan:
        return
    ants = assign_ants(plan.ant_queue, ant_count)
    turn = 0
    yield turn, ants
    while True:
        ants, moves = step_turn(ants, plan.paths, turn + 1)
        if not moves:
            return
        turn += 1
        yield turn, ants


def format_move(move: Move) -> str:
    return f"L{move.ant_id}-{move.room}"


def format_turn(moves: Iterable[Move]) -> str:
    return " ".join(format_move(move) for move in moves)


def render_moves(result: SimulationResult) -> str:
    return "\n".join(format_turn(turn) for turn in result.turns)


__all__ = [
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
]
