"""
Random practice problems for wait reading.

A problem is a sorted partial hand plus all of its waits. Hands are drawn
from a 36-tile bag and resampled until the wait count reaches the
requested floor.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass
import logging
import random

from .tiles import TileBag, sort_hand
from .hand import get_waits


logger = logging.getLogger(__name__)

HAND_SIZES = (7, 10, 13)
MAX_ATTEMPTS = 10000


class GenerationFailure(RuntimeError):
    """No hand met the wait floor within the attempt budget."""

    def __init__(self, min_waits: int, attempts: int):
        self.min_waits = min_waits
        self.attempts = attempts
        super().__init__(f"Failed to generate a valid problem with >= {min_waits} waits.")


@dataclass(frozen=True)
class Problem:
    hand: Tuple[int, ...]
    waits: Tuple[int, ...]


def draw_random_hand(count: int, rng: Optional[random.Random] = None) -> List[int]:
    """
    Draw tiles from a fresh bag without replacement.

    Args:
        count: Number of tiles to draw
        rng: Random source (module-level random if None)

    Returns:
        Unsorted list of at most count tiles (fewer only if the bag runs out)
    """
    bag = TileBag(rng)
    hand = []
    for _ in range(count):
        tile = bag.draw()
        if tile is None:
            break
        hand.append(tile)
    return hand


def generate_problem(tile_count: int = 13, min_waits: int = 1,
                     max_attempts: int = MAX_ATTEMPTS,
                     rng: Optional[random.Random] = None) -> Problem:
    """
    Generate a random problem with at least min_waits waits.

    Every rejected hand is thrown away and a fresh one drawn, so no
    attempt is biased by the previous one.

    Args:
        tile_count: Hand size, one of 7, 10, 13
        min_waits: Difficulty floor (minimum number of waits, >= 1)
        max_attempts: Resampling budget
        rng: Random source (module-level random if None)

    Returns:
        Problem with a sorted hand and its ascending waits

    Raises:
        ValueError: tile_count or min_waits out of range
        GenerationFailure: no hand met the floor within max_attempts
    """
    if tile_count not in HAND_SIZES:
        raise ValueError(f"tile_count must be one of {HAND_SIZES}, got {tile_count}")
    if min_waits < 1:
        raise ValueError(f"min_waits must be >= 1, got {min_waits}")

    for attempt in range(1, max_attempts + 1):
        hand = sort_hand(draw_random_hand(tile_count, rng))
        waits = get_waits(hand)
        if len(waits) >= min_waits:
            logger.debug("Accepted hand %s after %d attempts (waits %s)", hand, attempt, waits)
            return Problem(hand=tuple(hand), waits=tuple(waits))

    logger.warning("Gave up after %d attempts at min_waits=%d", max_attempts, min_waits)
    raise GenerationFailure(min_waits, max_attempts)
