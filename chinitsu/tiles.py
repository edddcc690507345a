"""
Tile helpers for one-suit (Chinitsu) hands.

A tile is just an int 1-9; a hand is a list of them.
"""

from typing import Iterable, List, Optional
import random


MIN_TILE = 1
MAX_TILE = 9
COPIES_PER_TILE = 4  # physical supply of each value

TILE_GLYPHS = {
    1: '\U0001F007', 2: '\U0001F008', 3: '\U0001F009',
    4: '\U0001F00A', 5: '\U0001F00B', 6: '\U0001F00C',
    7: '\U0001F00D', 8: '\U0001F00E', 9: '\U0001F00F',
}


def count_tiles(tiles: Iterable[int]) -> List[int]:
    """
    Build a count table for a hand.

    Args:
        tiles: Tile values

    Returns:
        List of size 10 where index n holds the number of n tiles (index 0 unused).
        Values outside 1-9 are ignored.
    """
    counts = [0] * (MAX_TILE + 1)
    for t in tiles:
        if MIN_TILE <= t <= MAX_TILE:
            counts[t] += 1
    return counts


def sort_hand(hand: Iterable[int]) -> List[int]:
    """Return a new ascending copy of the hand"""
    return sorted(hand)


def tile_glyph(value: int) -> str:
    """Unicode character-suit glyph for a tile, '?' if out of range"""
    return TILE_GLYPHS.get(value, '?')


class TileBag:
    """Bag of 36 tiles - 4 copies of 1-9"""
    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random
        self.tiles = self._create_full_bag()

    def _create_full_bag(self) -> List[int]:
        tiles = []
        for value in range(MIN_TILE, MAX_TILE + 1):
            for _ in range(COPIES_PER_TILE):
                tiles.append(value)
        return tiles

    def draw(self) -> Optional[int]:
        """Draw one tile uniformly from what is left in the bag"""
        if not self.tiles:
            return None
        index = self._rng.randrange(len(self.tiles))
        return self.tiles.pop(index)

    def remaining(self) -> int:
        """Remaining tiles"""
        return len(self.tiles)
