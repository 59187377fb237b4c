"""Centralised configuration objects for antfarm runs."""
from __future__ import annotations

from dataclasses import dataclass, field, asdict, fields
import os
from pathlib import Path
import typing
from typing import Any, Dict, Iterable, List

from antfarm.optimizer import PathLimits

ALGORITHMS = ("auto", "exhaustive")


def _coerce_value(value: str, target_type: Any) -> Any:
    """Best-effort coercion used by environment overrides."""

    args = [arg for arg in typing.get_args(target_type) if arg is not type(None)]
    if args and typing.get_origin(target_type) not in {list, List}:
        # Optional[X] / X | None
        target_type = args[0]
    origin = typing.get_origin(target_type)
    if origin in {list, List}:  # comma-separated parsing for lists
        return [item.strip() for item in value.split(",") if item.strip()]
    if target_type is bool:
        return value.lower() in {"1", "true", "yes", "on"}
    if target_type is int:
        return int(value)
    if target_type is float:
        return float(value)
    return value


@dataclass
class Config:
    """Search ceilings and run settings for a single farm."""

    max_rooms_per_path: int = 15
    max_total_paths: int = 100
    max_path_combination: int = 20
    max_direct_paths: int = 3
    max_paths_in_combination: int = 20
    algorithm: str = "auto"
    farm_path: str = "farms/example.txt"
    simulate: bool = True
    save_artifacts: bool = False
    render_gif: bool = False
    output_dir: str = "artifacts"
    plan_filename: str = "plan.json"
    moves_json_filename: str = "moves.json"
    moves_csv_filename: str = "moves.csv"
    trajectories_filename: str = "trajectories.jsonl"
    log_filename: str = "run.log"
    gif_filename: str = "progress.gif"
    run_name: str | None = None

    def limits(self) -> PathLimits:
        return PathLimits(
            max_rooms_per_path=self.max_rooms_per_path,
            max_total_paths=self.max_total_paths,
            max_path_combination=self.max_path_combination,
            max_direct_paths=self.max_direct_paths,
            max_paths_in_combination=self.max_paths_in_combination,
        )

    def validate(self) -> "Config":
        for name, value in asdict(self.limits()).items():
            if value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value}")
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm: {self.algorithm} (expected one of {', '.join(ALGORITHMS)})")
        return self

    def ensure_output_dir(self) -> Path:
        directory = Path(self.output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def output_path(self, filename: str) -> Path:
        return self.ensure_output_dir() / filename

    def label(self) -> str:
        return self.run_name or f"{Path(self.farm_path).stem}_{self.algorithm}_C{self.max_path_combination}"

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_env(self, prefix: str = "ANTFARM_") -> "Config":
        """Override configuration fields from ``<prefix><FIELD>`` environment variables."""

        hints = typing.get_type_hints(type(self))
        for field_def in fields(self):
            env_key = f"{prefix}{field_def.name.upper()}"
            if env_key in os.environ:
                raw_value = os.environ[env_key]
                try:
                    coerced = _coerce_value(raw_value, hints[field_def.name])
                except ValueError as exc:
                    raise ValueError(f"Failed to parse env var {env_key}: {raw_value}") from exc
                setattr(self, field_def.name, coerced)
        return self


@dataclass
class BatchSettings:
    """Grid definition for ``scripts/run_batch.py``."""

    farm_paths: List[str] = field(default_factory=lambda: ["farms/example.txt"])
    max_path_combinations: List[int] = field(default_factory=lambda: [5, 10, 20])
    algorithm: str = "auto"
    output_root: str = "batch_runs"

    def iter_configs(self) -> Iterable[Config]:
        for farm_path in self.farm_paths:
            for combination in self.max_path_combinations:
                label = f"{Path(farm_path).stem}_{self.algorithm}_C{combination}"
                yield Config(
                    farm_path=farm_path,
                    max_path_combination=combination,
                    algorithm=self.algorithm,
                    save_artifacts=True,
                    output_dir=str(Path(self.output_root) / label),
                    run_name=label,
                )


__all__ = ["Config", "BatchSettings", "ALGORITHMS"]
