"""Path combination search and ant distribution."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Set

from .pathfinder import Path


class NoViableCombination(RuntimeError):
    """No room-disjoint combination was found for a non-empty path list."""


@dataclass(frozen=True)
class PathLimits:
    max_rooms_per_path: int = 15
    max_total_paths: int = 100
    max_path_combination: int = 20
    max_direct_paths: int = 3
    max_paths_in_combination: int = 20


@dataclass
class RoutePlan:
    paths: List[Path]
    ant_queue: List[int]
    turns: int
    notices: List[str] = field(default_factory=list)

    @classmethod
    def empty(cls, notices: Sequence[str] = ()) -> "RoutePlan":
        return cls(paths=[], ant_queue=[], turns=0, notices=list(notices))

    def __bool__(self) -> bool:
        return bool(self.paths)

    @property
    def path_lengths(self) -> List[int]:
        return [len(path) - 1 for path in self.paths]


def _interior(path: Path) -> Sequence[str]:
    return path[1:-1]


def is_disjoint(paths: Sequence[Path]) -> bool:
    """True when no interior room is shared between two paths."""

    claimed: Set[str] = set()
    for path in paths:
        for room in _interior(path):
            if room in claimed:
                return False
            claimed.add(room)
    return True


def _shortest_index(lengths: Sequence[int], queue: Sequence[int]) -> int:
    best = 0
    best_score = lengths[0] + queue[0]
    for idx in range(1, len(lengths)):
        score = lengths[idx] + queue[idx]
        if score < best_score:
            best, best_score = idx, score
    return best


def distribute_ants(paths: Sequence[Path], ant_count: int) -> List[int]:
    """Queue ants one by one on the path that would finish them soonest."""

    lengths = [len(path) - 1 for path in paths]
    queue = [0] * len(paths)
    for _ in range(ant_count):
        queue[_shortest_index(lengths, queue)] += 1
    return queue


def max_path_turns(lengths: Sequence[int], queue: Sequence[int]) -> int:
    """Turns needed for the last ant to arrive; idle paths add nothing."""

    return max((length + queued - 1 for length, queued in zip(lengths, queue) if queued > 0), default=0)


def iter_combinations(paths: Sequence[Path], limits: PathLimits) -> Iterator[List[Path]]:
    """Yield room-disjoint subsets by ascending size, then index order.

    Branches are pruned as soon as the partial subset overlaps, so only
    disjoint combinations are produced and the full power set is never built.
    """

    max_size = min(len(paths), limits.max_paths_in_combination)

    def extend(begin: int, size: int, chosen: List[Path], claimed: Set[str]) -> Iterator[List[Path]]:
        if len(chosen) == size:
            yield list(chosen)
            return
        for idx in range(begin, len(paths)):
            interior = _interior(paths[idx])
            if claimed.intersection(interior):
                continue
            chosen.append(paths[idx])
            yield from extend(idx + 1, size, chosen, claimed.union(interior))
            chosen.pop()

    for size in range(1, max_size + 1):
        yield from extend(0, size, [], set())


def _direct_combination(paths: Sequence[Path], limits: PathLimits) -> List[Path]:
    accepted: List[Path] = []
    for path in paths:
        if is_disjoint(accepted + [path]):
            accepted.append(path)
        if len(accepted) >= limits.max_direct_paths:
            break
    return accepted


def _exhaustive_combination(paths: Sequence[Path], ant_count: int, limits: PathLimits) -> List[Path]:
    best: List[Path] = []
    best_turns = None
    for combo in iter_combinations(paths, limits):
        turns = max_path_turns([len(path) - 1 for path in combo], distribute_ants(combo, ant_count))
        if best_turns is None or turns < best_turns:
            best, best_turns = combo, turns
    return best


def find_optimal_combination(
    paths: Sequence[Path],
    ant_count: int,
    limits: PathLimits,
    force_exhaustive: bool = False,
) -> RoutePlan:
    """Pick the room-disjoint path set and ant queue with the fewest turns.

    Candidates are sorted by room count (stable, so enumeration order breaks
    ties) and cut to ``max_path_combination``. When start and end are
    adjacent, disjoint paths are accepted greedily up to ``max_direct_paths``
    instead of searching every subset; this is an approximation.
    """

    notices: List[str] = []
    if not paths:
        return RoutePlan.empty(notices)

    candidates = sorted(paths, key=len)
    if len(candidates) > limits.max_path_combination:
        notices.append(f"Limiting path combinations to {limits.max_path_combination} most efficient paths")
        candidates = candidates[: limits.max_path_combination]

    has_direct = any(len(path) == 2 for path in candidates)
    if has_direct and not force_exhaustive:
        chosen = _direct_combination(candidates, limits)
    else:
        if len(candidates) > limits.max_paths_in_combination:
            notices.append(
                f"Combinations larger than {limits.max_paths_in_combination} paths are not explored"
            )
        chosen = _exhaustive_combination(candidates, ant_count, limits)

    if not chosen:
        raise NoViableCombination(f"no disjoint combination among {len(candidates)} candidate paths")

    queue = distribute_ants(chosen, ant_count)
    turns = max_path_turns([len(path) - 1 for path in chosen], queue)
    return RoutePlan(paths=chosen, ant_queue=queue, turns=turns, notices=notices)


__all__ = [
    "NoViableCombination",
    "PathLimits",
    "RoutePlan",
    "distribute_ants",
    "find_optimal_combination",
    "is_disjoint",
    "iter_combinations",
    "max_path_turns",
]
