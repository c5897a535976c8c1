from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class PlannerConfig:
    superiority_rate: float = 0.6
    success_rate: float = 0.7
    attack_neutral_rate: float = 0.8
    combo_min_rate: float = 0.8
    combo_attack_rate: float = 0.8
    combo_min_troops: int = 12
    garrison_floor: int = 2
    world_dominance_limit: int = 30

    def validate(self) -> "PlannerConfig":
        for name in (
            "superiority_rate",
            "attack_neutral_rate",
            "combo_min_rate",
            "combo_attack_rate",
        ):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{name} must be in (0, 1], got {value}")
        if not 0.0 <= self.success_rate < 1.0:
            raise ValueError(f"success_rate must be in [0, 1), got {self.success_rate}")
        for name in ("combo_min_troops", "garrison_floor", "world_dominance_limit"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        return self


@dataclass(frozen=True)
class BotConfig:
    planner: PlannerConfig = field(default_factory=PlannerConfig)
    preferred_groups: Tuple[int, ...] = (2, 6)
    pick_count: int = 6
    random_picks: int = 2
    seed: int | None = None
