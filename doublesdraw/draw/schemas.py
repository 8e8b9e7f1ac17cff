"""
Shared types for the doubles draw generator.
Player slots are 1-based positions in one team's roster; they only mean
something for the duration of one generation call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, order=True)
class Pair:
    """
    Unordered pair of two distinct player slots from the same team.
    Stored canonically (smaller slot first) so Pair(3, 1) == Pair(1, 3).
    """
    a: int
    b: int

    def __post_init__(self) -> None:
        if self.a == self.b:
            raise ValueError(f"A pair needs two distinct slots, got {self.a} twice")
        if self.a > self.b:
            lo, hi = self.b, self.a
            object.__setattr__(self, "a", lo)
            object.__setattr__(self, "b", hi)

    def __contains__(self, slot: object) -> bool:
        return slot == self.a or slot == self.b

    def __iter__(self):
        yield self.a
        yield self.b

    def as_tuple(self) -> tuple[int, int]:
        return (self.a, self.b)


# One round: up to `courts` pairs, no slot repeated
Wave = list[Pair]
# Per-team result: exactly `waves` waves of exactly `courts` pairs
Schedule = list[Wave]


@dataclass(frozen=True)
class CombinedMatch:
    """One court in one wave: a Red pair against a Black pair."""
    red: Pair
    black: Pair

    def as_tuple(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return (self.red.as_tuple(), self.black.as_tuple())


CombinedSchedule = list[list[CombinedMatch]]


@dataclass
class DrawConfig:
    """Geometry and retry budget for one draw."""
    players_per_team: int
    waves: int
    courts: int
    max_attempts: int = 10
    step_limit: int | None = None  # packing placements per attempt; None/0 = unlimited
    seed: int | None = None

    @property
    def matches_per_team(self) -> int:
        return self.waves * self.courts


def combined_schedule_to_list(lineup: CombinedSchedule) -> list[list[dict[str, Any]]]:
    """CombinedSchedule to JSON-serializable nested lists (courts numbered from 1)."""
    return [
        [
            {"court": c + 1, "red": list(m.red.as_tuple()), "black": list(m.black.as_tuple())}
            for c, m in enumerate(wave)
        ]
        for wave in lineup
    ]
