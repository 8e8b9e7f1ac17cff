"""
Tests for the pair universe and Pair canonical form.
"""
from __future__ import annotations

from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from doublesdraw.draw import InsufficientPlayersError, Pair, pair_count, pair_universe


def test_pair_is_order_independent():
    """Pair(3, 1) and Pair(1, 3) are the same pair, stored smaller slot first."""
    p, q = Pair(3, 1), Pair(1, 3)
    assert p == q
    assert hash(p) == hash(q)
    assert p.as_tuple() == (1, 3)
    assert len({p, q}) == 1


def test_pair_rejects_same_slot():
    with pytest.raises(ValueError):
        Pair(2, 2)


def test_pair_membership_and_unpacking():
    p = Pair(5, 2)
    assert 2 in p and 5 in p
    assert 3 not in p
    a, b = p
    assert (a, b) == (2, 5)


@pytest.mark.parametrize("n", [2, 3, 4, 6, 12, 16])
def test_universe_size(n):
    """N players -> N(N-1)/2 distinct canonical pairs over slots 1..N."""
    universe = pair_universe(n)
    assert len(universe) == n * (n - 1) // 2 == pair_count(n)
    for pair in universe:
        assert 1 <= pair.a < pair.b <= n


def test_universe_four_players():
    expected = {Pair(1, 2), Pair(1, 3), Pair(1, 4), Pair(2, 3), Pair(2, 4), Pair(3, 4)}
    assert pair_universe(4) == expected


def test_universe_is_deterministic():
    assert pair_universe(7) == pair_universe(7)


@pytest.mark.parametrize("n", [0, 1])
def test_universe_too_few_players(n):
    with pytest.raises(InsufficientPlayersError):
        pair_universe(n)
