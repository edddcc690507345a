"""
Quiz contract between the generator and whatever shows the problems.

Difficulty levels map to a minimum wait count, and a player's answer is
compared to the waits as a set.
"""

from typing import Dict, Iterable, List, Sequence
from dataclasses import dataclass

from .generator import Problem
from .hand import get_winning_decomposition
from .tiles import tile_glyph


# 1: any wait, 2: at least 2 waits, 3: at least 3 waits
DIFFICULTY_LEVELS: Dict[int, str] = {
    1: "Beginner (any wait)",
    2: "Intermediate (2+ waits)",
    3: "Advanced (3+ waits)",
}


@dataclass
class GameResult:
    is_correct: bool
    selected_waits: List[int]
    correct_waits: List[int]


def difficulty_floor(difficulty: int) -> int:
    """Minimum wait count for a difficulty level (1-3)"""
    if difficulty not in DIFFICULTY_LEVELS:
        raise ValueError(f"difficulty must be one of {sorted(DIFFICULTY_LEVELS)}, got {difficulty}")
    return difficulty


def check_answer(problem: Problem, selected: Iterable[int]) -> GameResult:
    """
    Compare the player's guessed waits with the real ones.

    Order and repeated picks do not matter.

    Args:
        problem: The problem being answered
        selected: Tiles the player picked

    Returns:
        GameResult with both sides sorted
    """
    user_answer = sorted(set(selected))
    correct = list(problem.waits)
    return GameResult(
        is_correct=user_answer == correct,
        selected_waits=user_answer,
        correct_waits=correct
    )


def explain_wait(problem: Problem, wait: int) -> List[List[int]]:
    """Groups showing how the hand wins on this tile ([] if it doesn't)"""
    return get_winning_decomposition(problem.hand, wait)


def format_hand(tiles: Sequence[int]) -> str:
    return "".join(tile_glyph(t) for t in tiles)


def format_groups(groups: Sequence[Sequence[int]]) -> str:
    return " ".join(format_hand(group) for group in groups)
