"""Tests for chinitsu.hand module."""

import random
from collections import Counter

import pytest
from chinitsu.hand import (
    can_form_sets,
    decompose_sets,
    is_seven_pairs,
    is_winning_hand,
    get_waits,
    get_winning_decomposition
)
from chinitsu.tiles import count_tiles
from chinitsu.generator import draw_random_hand


def _is_set(group):
    if len(group) != 3:
        return False
    a, b, c = group
    return (a == b == c) or (b == a + 1 and c == a + 2)


@pytest.mark.parametrize("hand, expected", [
    ([1, 1, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9, 9], [1, 2, 3, 4, 5, 6, 7, 8, 9]),
    ([2, 3, 4, 5], [2, 5]),
    ([2, 3, 4, 5, 6, 8, 8], [1, 4, 7]),
    ([1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7], [1, 4, 7]),
    ([1, 1, 1, 2, 2, 2, 4, 5, 6, 7, 8, 8, 8], [3, 4, 6, 7, 9]),
])
def test_get_waits_known_shapes(hand, expected):
    """Test classic wait shapes."""
    assert get_waits(hand) == expected


def test_get_waits_skips_fifth_copy():
    """1111 would win on a fifth 1, which does not exist."""
    assert get_waits([1, 1, 1, 1]) == []
    assert 1 not in get_waits([1, 1, 1, 1, 2, 3, 4])


def test_get_waits_no_tenpai():
    """Test a hand with no waits returns an empty list."""
    assert get_waits([1, 1, 3, 5, 7, 9, 9]) == []


def test_get_waits_order_independent():
    """Shuffling the hand does not change the waits."""
    hand = [1, 1, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9, 9]
    shuffled = hand.copy()
    random.Random(7).shuffle(shuffled)
    assert get_waits(shuffled) == get_waits(sorted(shuffled))


def test_is_winning_hand_length():
    """Hands that are not 3k+2 tiles never win."""
    assert is_winning_hand([1, 1, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9, 9]) is False
    assert is_winning_hand([]) is False
    assert is_winning_hand([5, 5]) is True


def test_is_winning_hand_standard():
    assert is_winning_hand([1, 1, 1, 2, 3, 4, 5, 6, 7, 8, 8, 8, 9, 9]) is True
    assert is_winning_hand([2, 3, 4, 5, 5]) is True
    assert is_winning_hand([1, 2, 4, 5, 5]) is False


def test_is_winning_hand_seven_pairs():
    """Seven distinct pairs win even without any sets."""
    assert is_winning_hand([1, 1, 2, 2, 3, 3, 5, 5, 6, 6, 8, 8, 9, 9]) is True


def test_quad_is_not_two_pairs():
    """Four of a kind does not count as two pairs."""
    hand = [1, 1, 1, 1, 2, 2, 3, 3, 5, 5, 7, 7, 9, 9]
    assert is_seven_pairs(count_tiles(hand)) is False
    assert is_winning_hand(hand) is False


def test_seven_pairs_only_at_fourteen():
    """Test that seven pairs is not checked for other hand sizes."""
    assert is_seven_pairs(count_tiles([1, 1, 3, 3, 5, 5, 7, 7, 9, 9, 2])) is False
    assert is_winning_hand([1, 1, 3, 3, 5, 5, 7, 7, 9, 9, 2]) is False


def test_can_form_sets_restores_counts():
    """The search leaves the count table as it found it."""
    counts = count_tiles([1, 1, 1, 2, 2, 2, 3, 3, 3])
    before = counts.copy()
    assert can_form_sets(counts, 3) is True
    assert counts == before

    counts = count_tiles([1, 2, 4, 5, 6, 8])
    before = counts.copy()
    assert can_form_sets(counts, 2) is False
    assert counts == before


def test_can_form_sets_zero_needed():
    assert can_form_sets([0] * 10, 0) is True


def test_decompose_sets_lowest_first():
    """Triplets are tried before sequences, lowest tile first."""
    counts = count_tiles([1, 1, 1, 2, 2, 2, 3, 3, 3])
    assert decompose_sets(counts, 3) == [[1, 1, 1], [2, 2, 2], [3, 3, 3]]
    counts = count_tiles([1, 2, 3, 4, 5, 6])
    assert decompose_sets(counts, 2) == [[1, 2, 3], [4, 5, 6]]
    assert decompose_sets(count_tiles([1, 2, 4]), 1) is None


def test_decomposition_standard():
    """Test decomposing 111 234 567 888 + 9 on 9."""
    hand = [1, 1, 1, 2, 3, 4, 5, 6, 7, 8, 8, 8, 9]
    decomp = get_winning_decomposition(hand, 9)
    assert len(decomp) == 5
    assert sorted(decomp) == sorted([[1, 1, 1], [2, 3, 4], [5, 6, 7], [8, 8, 8], [9, 9]])


def test_decomposition_seven_pairs():
    hand = [1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7]
    decomp = get_winning_decomposition(hand, 7)
    assert len(decomp) == 7
    assert all(len(group) == 2 and group[0] == group[1] for group in decomp)
    assert len({group[0] for group in decomp}) == 7


def test_decomposition_not_a_wait():
    """A tile that does not complete the hand gives an empty result."""
    assert get_winning_decomposition([2, 3, 4, 5], 9) == []
    assert get_winning_decomposition([2, 3, 4], 5) == []


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_random_hand_properties(seed):
    """Waits and decompositions agree on random hands."""
    rng = random.Random(seed)
    for _ in range(40):
        hand = draw_random_hand(13, rng)
        waits = get_waits(hand)
        counts = count_tiles(hand)

        assert waits == sorted(set(waits))
        assert waits == get_waits(sorted(hand))
        assert all(counts[w] < 4 for w in waits)

        for wait in waits:
            full_hand = hand + [wait]
            assert is_winning_hand(full_hand)
            decomp = get_winning_decomposition(hand, wait)
            flattened = [t for group in decomp for t in group]
            assert Counter(flattened) == Counter(full_hand)

            pairs = [g for g in decomp if len(g) == 2]
            if len(pairs) == 7:
                assert len(decomp) == 7
                assert len({g[0] for g in pairs}) == 7
            else:
                assert len(pairs) == 1 and pairs[0][0] == pairs[0][1]
                sets = [g for g in decomp if len(g) != 2]
                assert len(sets) == 4
                assert all(_is_set(g) for g in sets)
