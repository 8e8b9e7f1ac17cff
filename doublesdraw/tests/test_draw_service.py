"""
Tests for the session draw service: roster checks and slot -> player mapping.
"""
from __future__ import annotations

from collections import Counter
from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from doublesdraw.draw import (
    CombinedMatch,
    InsufficientCombinationsError,
    Pair,
    SeededRNG,
)
from doublesdraw.models import DoublesMatch, TeamColour
from doublesdraw.services.draw_service import (
    TeamValidationError,
    generate_draw,
    group_by_wave,
    resolve_lineup,
    validate_teams,
)

RED = ["Ana", "Ben", "Cleo", "Dev", "Eli", "Fay"]
BLACK = ["Gus", "Hana", "Ivo", "Jun", "Kai", "Lea"]


def test_validate_teams_ok():
    validate_teams(RED, BLACK)


@pytest.mark.parametrize(
    "red,black,unassigned",
    [
        (RED, BLACK[:5], ()),          # uneven
        ([], [], ()),                  # empty
        (RED, BLACK, ("Zed",)),        # someone left over
        (RED, ["Ana"] + BLACK[1:], ()),  # on both teams
        (["Ana", "Ana", "Ben", "Cleo"], BLACK[:4], ()),  # listed twice
    ],
)
def test_validate_teams_rejects(red, black, unassigned):
    with pytest.raises(TeamValidationError):
        validate_teams(red, black, unassigned)


def test_resolve_lineup_maps_slots_to_roster():
    lineup = [[CombinedMatch(red=Pair(1, 6), black=Pair(2, 3))]]
    (match,) = resolve_lineup(lineup, RED, BLACK)
    assert match.wave_number == 1 and match.court_number == 1
    assert match.players(TeamColour.RED) == ("Ana", "Fay")
    assert match.players(TeamColour.BLACK) == ("Hana", "Ivo")
    assert match.is_complete is False


def test_generate_draw_six_a_side():
    matches = generate_draw(RED, BLACK, waves=3, courts=1, seed=8)
    assert len(matches) == 3
    assert [m.wave_number for m in matches] == [1, 2, 3]
    red_games = Counter(p for m in matches for p in m.players(TeamColour.RED))
    black_games = Counter(p for m in matches for p in m.players(TeamColour.BLACK))
    assert red_games == Counter({name: 1 for name in RED})
    assert black_games == Counter({name: 1 for name in BLACK})


def test_generate_draw_is_reproducible():
    a = generate_draw(RED, BLACK, waves=5, courts=1, rng=SeededRNG(77))
    b = generate_draw(RED, BLACK, waves=5, courts=1, rng=SeededRNG(77))
    assert [m.to_dict() for m in a] == [m.to_dict() for m in b]


def test_generate_draw_structural_error():
    with pytest.raises(InsufficientCombinationsError):
        generate_draw(RED[:4], BLACK[:4], waves=10, courts=2)


def test_generate_draw_rejects_bad_rosters_before_drawing():
    with pytest.raises(TeamValidationError):
        generate_draw(RED, BLACK[:4], waves=2, courts=1)


def test_group_by_wave_orders_courts():
    matches = [
        DoublesMatch(2, 2, "a", "b", "c", "d"),
        DoublesMatch(1, 1, "a", "b", "c", "d"),
        DoublesMatch(2, 1, "a", "b", "c", "d"),
    ]
    grouped = group_by_wave(matches)
    assert list(grouped) == [1, 2]
    assert [m.court_number for m in grouped[2]] == [1, 2]


def test_doubles_match_to_dict():
    d = DoublesMatch(1, 2, "Ana", "Ben", "Gus", "Hana").to_dict()
    assert d["wave_number"] == 1
    assert d["court_number"] == 2
    assert d["red"] == ["Ana", "Ben"]
    assert d["black"] == ["Gus", "Hana"]
    assert d["is_complete"] is False
