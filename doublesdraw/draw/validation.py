"""
Schedule checks: the properties every successful draw must satisfy.
Used by tests, the CLI --check flag and the session service.
"""
from __future__ import annotations

from collections import Counter

from doublesdraw.config import MAX_CONSECUTIVE_WAVES

from .schemas import Schedule
from .selector import allowed_spread


def appearance_counts(schedule: Schedule, players_per_team: int | None = None) -> dict[int, int]:
    """Waves played per slot. With players_per_team, unused slots appear with 0."""
    counts = Counter(slot for wave in schedule for pair in wave for slot in pair)
    if players_per_team is not None:
        for slot in range(1, players_per_team + 1):
            counts.setdefault(slot, 0)
    return dict(sorted(counts.items()))


def longest_run(schedule: Schedule, slot: int) -> int:
    """Longest streak of consecutive waves containing `slot`."""
    best = run = 0
    for wave in schedule:
        if any(slot in pair for pair in wave):
            run += 1
            best = max(best, run)
        else:
            run = 0
    return best


def validate_schedule(
    schedule: Schedule,
    players_per_team: int,
    waves: int,
    courts: int,
) -> list[str]:
    """Return violations (empty list when the schedule is valid)."""
    problems: list[str] = []
    if len(schedule) != waves:
        problems.append(f"expected {waves} waves, got {len(schedule)}")
    for w, wave in enumerate(schedule, start=1):
        if len(wave) != courts:
            problems.append(f"wave {w}: expected {courts} pairs, got {len(wave)}")
        seen: set[int] = set()
        for pair in wave:
            for slot in pair:
                if not 1 <= slot <= players_per_team:
                    problems.append(f"wave {w}: slot {slot} out of range 1..{players_per_team}")
                if slot in seen:
                    problems.append(f"wave {w}: slot {slot} plays twice")
                seen.add(slot)

    pair_uses = Counter(pair for wave in schedule for pair in wave)
    for pair, uses in sorted(pair_uses.items()):
        if uses > 1:
            problems.append(f"pair {pair.as_tuple()} used {uses} times")

    for slot in range(1, players_per_team + 1):
        run = longest_run(schedule, slot)
        if run > MAX_CONSECUTIVE_WAVES:
            problems.append(f"slot {slot} plays {run} waves in a row")

    counts = appearance_counts(schedule, players_per_team)
    if counts:
        spread = max(counts.values()) - min(counts.values())
        limit = allowed_spread(sum(len(w) for w in schedule), players_per_team)
        if spread > limit:
            problems.append(f"appearance spread {spread} exceeds {limit}")
    return problems
