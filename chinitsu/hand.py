"""
Shape matching for one-suit hands: winning test, waits and decomposition.

All functions work on count tables (see tiles.count_tiles) and never keep
state between calls.
"""

from typing import List, Optional, Sequence
from .tiles import MIN_TILE, MAX_TILE, COPIES_PER_TILE, count_tiles


SEVEN_PAIRS_SIZE = 14


def _first_tile(counts: List[int]) -> int:
    """Lowest value still present, or -1 if the table is empty"""
    for value in range(MIN_TILE, MAX_TILE + 1):
        if counts[value] > 0:
            return value
    return -1


def can_form_sets(counts: List[int], sets_needed: int) -> bool:
    """
    Check whether the tiles in counts form exactly sets_needed triplets/sequences.

    Groups are always started at the lowest remaining tile, so each call
    branches at most twice (triplet, then sequence). counts is restored
    before returning.

    Args:
        counts: Count table (index 1-9), total must be 3 * sets_needed
        sets_needed: Number of sets still to find

    Returns:
        True if the tiles can be consumed completely
    """
    return decompose_sets(counts, sets_needed) is not None


def decompose_sets(counts: List[int], sets_needed: int) -> Optional[List[List[int]]]:
    """
    Same search as can_form_sets, but return the groups found.

    Returns:
        List of sets ordered lowest value first, or None if no split exists
    """
    if sets_needed == 0:
        return []

    first = _first_tile(counts)
    if first == -1:
        return None

    # Try triplet first
    if counts[first] >= 3:
        counts[first] -= 3
        rest = decompose_sets(counts, sets_needed - 1)
        counts[first] += 3
        if rest is not None:
            return [[first, first, first]] + rest

    # Try sequence starting at the lowest tile
    if first <= MAX_TILE - 2 and counts[first + 1] > 0 and counts[first + 2] > 0:
        for value in (first, first + 1, first + 2):
            counts[value] -= 1
        rest = decompose_sets(counts, sets_needed - 1)
        for value in (first, first + 1, first + 2):
            counts[value] += 1
        if rest is not None:
            return [[first, first + 1, first + 2]] + rest

    return None


def is_seven_pairs(counts: List[int]) -> bool:
    """Seven distinct pairs; four of a kind never counts as two pairs"""
    pair_count = 0
    for value in range(MIN_TILE, MAX_TILE + 1):
        if counts[value] == 2:
            pair_count += 1
        elif counts[value] != 0:
            return False
    return pair_count == 7


def is_winning_hand(tiles: Sequence[int]) -> bool:
    """
    Check if a complete hand is a winning shape.

    Winning shapes:
    - Seven Pairs: 14 tiles, seven different values held exactly twice
    - Standard: 1 pair + (n - 2) / 3 sets (triplets or sequences)

    Args:
        tiles: Hand with len(tiles) % 3 == 2

    Returns:
        True if any winning split exists
    """
    if len(tiles) % 3 != 2:
        return False

    counts = count_tiles(tiles)

    if len(tiles) == SEVEN_PAIRS_SIZE and is_seven_pairs(counts):
        return True

    sets_needed = (len(tiles) - 2) // 3
    for pair in range(MIN_TILE, MAX_TILE + 1):
        if counts[pair] >= 2:
            counts[pair] -= 2
            found = can_form_sets(counts, sets_needed)
            counts[pair] += 2
            if found:
                return True

    return False


def get_waits(hand: Sequence[int]) -> List[int]:
    """
    Find every tile that completes the hand.

    A value already held four times is skipped, a fifth copy does not exist.

    Args:
        hand: Partial hand (7, 10 or 13 tiles)

    Returns:
        Ascending list of winning tiles (possibly empty)
    """
    counts = count_tiles(hand)
    waits = []
    for candidate in range(MIN_TILE, MAX_TILE + 1):
        if counts[candidate] >= COPIES_PER_TILE:
            continue
        if is_winning_hand(list(hand) + [candidate]):
            waits.append(candidate)
    return waits


def get_winning_decomposition(hand: Sequence[int], win_tile: int) -> List[List[int]]:
    """
    Split hand + win_tile into its groups.

    When several splits exist the first one found is returned: Seven Pairs
    before the standard form, lower pair values first, triplets before
    sequences.

    Args:
        hand: Partial hand (7, 10 or 13 tiles)
        win_tile: The tile that completes the hand

    Returns:
        Groups such as [[1, 1], [2, 3, 4], ...], or [] if win_tile is not a wait
    """
    full_hand = sorted(list(hand) + [win_tile])
    if len(full_hand) % 3 != 2:
        return []

    counts = count_tiles(full_hand)

    if len(full_hand) == SEVEN_PAIRS_SIZE and is_seven_pairs(counts):
        return [[value, value] for value in range(MIN_TILE, MAX_TILE + 1) if counts[value] == 2]

    sets_needed = (len(full_hand) - 2) // 3
    for pair in range(MIN_TILE, MAX_TILE + 1):
        if counts[pair] >= 2:
            counts[pair] -= 2
            sets = decompose_sets(counts, sets_needed)
            counts[pair] += 2
            if sets is not None:
                return [[pair, pair]] + sets

    return []
