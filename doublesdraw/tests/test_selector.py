"""
Tests for the load-balanced pair selector.
Seeded RNG so every run selects the same pairs.
"""
from __future__ import annotations

from collections import Counter
from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from doublesdraw.draw import (
    InsufficientCombinationsError,
    NoFeasibleSelectionError,
    Pair,
    SeededRNG,
    SelectionState,
    allowed_spread,
    candidate_pool,
    pair_universe,
    select_pairs,
)


def _loads(pairs: list[Pair], n: int) -> dict[int, int]:
    counts = Counter(slot for p in pairs for slot in p)
    return {slot: counts.get(slot, 0) for slot in range(1, n + 1)}


def test_empty_universe_always_insufficient_combinations():
    """No pairs available: InsufficientCombinationsError every time, never a partial result."""
    for seed in range(3):
        with pytest.raises(InsufficientCombinationsError):
            select_pairs(frozenset(), 4, 1, SeededRNG(seed))


def test_too_many_slots_for_universe():
    with pytest.raises(InsufficientCombinationsError):
        select_pairs(pair_universe(4), 4, 20, SeededRNG(1))


@pytest.mark.parametrize("seed", range(20))
def test_six_players_three_pairs_uses_everyone_once(seed):
    selected = select_pairs(pair_universe(6), 6, 3, SeededRNG(seed))
    assert len(selected) == len(set(selected)) == 3
    assert set(_loads(selected, 6).values()) == {1}


@pytest.mark.parametrize("seed", range(20))
def test_six_players_five_pairs_spread_one(seed):
    selected = select_pairs(pair_universe(6), 6, 5, SeededRNG(seed))
    loads = _loads(selected, 6)
    assert len(set(selected)) == 5
    assert sum(loads.values()) == 10
    assert max(loads.values()) - min(loads.values()) <= 1


@pytest.mark.parametrize("seed", range(10))
def test_four_players_two_pairs_are_disjoint(seed):
    first, second = select_pairs(pair_universe(4), 4, 2, SeededRNG(seed))
    assert set(first).isdisjoint(set(second))


def test_successful_selections_respect_balance_bound():
    """12 players, 18 pairs: any selection that succeeds gives every player exactly 3."""
    successes = 0
    for seed in range(30):
        try:
            selected = select_pairs(pair_universe(12), 12, 18, SeededRNG(seed))
        except NoFeasibleSelectionError:
            continue
        successes += 1
        assert len(set(selected)) == 18
        assert set(_loads(selected, 12).values()) == {3}
    assert successes > 0


def test_selection_is_deterministic_for_seed():
    a = select_pairs(pair_universe(6), 6, 5, SeededRNG(99))
    b = select_pairs(pair_universe(6), 6, 5, SeededRNG(99))
    assert a == b


def test_allowed_spread():
    assert allowed_spread(3, 6) == 0   # 6 uses over 6 players
    assert allowed_spread(5, 6) == 1   # 10 uses over 6 players
    assert allowed_spread(18, 12) == 0


def test_pool_gap_zero_is_everything():
    state = SelectionState.start(pair_universe(4), 4)
    assert candidate_pool(state) == sorted(pair_universe(4))


def test_pool_gap_one_excludes_max_load_players():
    state = SelectionState.start(pair_universe(4), 4)
    state.take(Pair(1, 2))
    assert candidate_pool(state) == [Pair(3, 4)]


def test_pool_gap_one_falls_back_to_min_load_players():
    """Every remaining pair touches a max-load player: keep those with a min-load player."""
    state = SelectionState(
        remaining=[Pair(1, 4), Pair(2, 4)],
        loads={1: 1, 2: 1, 3: 1, 4: 0},
    )
    assert candidate_pool(state) == [Pair(1, 4), Pair(2, 4)]


def test_pool_gap_two_requires_min_and_no_max():
    state = SelectionState(
        remaining=[Pair(1, 3), Pair(2, 3), Pair(2, 4), Pair(3, 4)],
        loads={1: 2, 2: 1, 3: 0, 4: 1},
    )
    assert candidate_pool(state) == [Pair(2, 3), Pair(3, 4)]


def test_pool_ignores_slots_without_remaining_pairs():
    """Slot 1 has no pairs left, so its low load does not drive the gap."""
    state = SelectionState(
        remaining=[Pair(2, 3), Pair(3, 4)],
        loads={1: 0, 2: 1, 3: 1, 4: 1},
    )
    assert candidate_pool(state) == [Pair(2, 3), Pair(3, 4)]
