"""
Session draw service: checks the two rosters, runs the generator and maps roster
positions back to players. All or nothing: a failed draw raises and returns no
matches, so callers never store half a schedule.
"""
from __future__ import annotations

from collections.abc import Sequence

from doublesdraw.draw import CombinedSchedule, SeededRNG, generate_combined_lineup
from doublesdraw.models import DoublesMatch

# ---------- Exceptions ----------


class TeamValidationError(ValueError):
    """Rosters are not ready for a draw (uneven, overlapping, players unassigned)."""


# ---------- Roster checks ----------


def validate_teams(
    red_team: Sequence[str],
    black_team: Sequence[str],
    unassigned: Sequence[str] = (),
) -> None:
    """Raise TeamValidationError unless both teams are non-empty, equal and disjoint."""
    if unassigned:
        raise TeamValidationError(
            f"{len(unassigned)} participant(s) not assigned to a team: {', '.join(unassigned)}"
        )
    if not red_team or not black_team:
        raise TeamValidationError("Both teams need players")
    if len(red_team) != len(black_team):
        raise TeamValidationError(
            f"Teams must be the same size (red {len(red_team)}, black {len(black_team)})"
        )
    for colour, roster in (("red", red_team), ("black", black_team)):
        if len(set(roster)) != len(roster):
            raise TeamValidationError(f"The {colour} team lists a player twice")
    both = set(red_team) & set(black_team)
    if both:
        raise TeamValidationError(f"Players on both teams: {', '.join(sorted(both))}")


def resolve_lineup(
    lineup: CombinedSchedule,
    red_team: Sequence[str],
    black_team: Sequence[str],
) -> list[DoublesMatch]:
    """Slot k of each team is roster[k - 1]."""
    matches: list[DoublesMatch] = []
    for wave_index, wave in enumerate(lineup):
        for court_index, m in enumerate(wave):
            matches.append(
                DoublesMatch(
                    wave_number=wave_index + 1,
                    court_number=court_index + 1,
                    red_player_1=red_team[m.red.a - 1],
                    red_player_2=red_team[m.red.b - 1],
                    black_player_1=black_team[m.black.a - 1],
                    black_player_2=black_team[m.black.b - 1],
                )
            )
    return matches


def generate_draw(
    red_team: Sequence[str],
    black_team: Sequence[str],
    waves: int,
    courts: int,
    max_attempts: int | None = None,
    seed: int | None = None,
    rng: SeededRNG | None = None,
    unassigned: Sequence[str] = (),
) -> list[DoublesMatch]:
    """
    Draw `waves` x `courts` doubles matches for two rosters.
    Raises TeamValidationError for bad rosters and ScheduleError subclasses
    when no draw can be made.
    """
    validate_teams(red_team, black_team, unassigned)
    lineup = generate_combined_lineup(
        len(red_team), waves, courts, max_attempts, seed=seed, rng=rng
    )
    return resolve_lineup(lineup, red_team, black_team)


def group_by_wave(matches: Sequence[DoublesMatch]) -> dict[int, list[DoublesMatch]]:
    """Wave number -> matches in court order, waves ascending."""
    grouped: dict[int, list[DoublesMatch]] = {}
    for m in sorted(matches, key=lambda m: (m.wave_number, m.court_number)):
        grouped.setdefault(m.wave_number, []).append(m)
    return grouped
