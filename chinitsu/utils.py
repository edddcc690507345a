from typing import Dict, List, Sequence, Union, Any
import numpy as np
from scipy import stats

from .tiles import MAX_TILE
from .hand import get_waits
from .generator import draw_random_hand


def compute_statistics(data: np.ndarray) -> Dict[str, Union[float, int]]:
    """
    Compute summary statistics for a data array.

    Returns:
        Dictionary with mean, std, CI (95% confidence interval)
    """
    data = np.asarray(data, dtype=float)
    mean = np.mean(data)
    std = np.std(data, ddof=1)
    n = len(data)
    se = std / np.sqrt(n)
    ci_95 = stats.t.interval(0.95, n - 1, loc=mean, scale=se)

    return {
        "mean": mean,
        "std": std,
        "ci_95_lower": ci_95[0],
        "ci_95_upper": ci_95[1],
        "n": n
    }


def wait_count_distribution(wait_counts: Sequence[int]) -> np.ndarray:
    """
    Histogram of wait counts.

    Returns:
        Array of size 10 where index k is the number of hands with k waits
    """
    return np.bincount(np.asarray(wait_counts, dtype=int), minlength=MAX_TILE + 1)


def acceptance_rates(wait_counts: Sequence[int], floors: List[int]) -> Dict[int, Dict[str, Any]]:
    """
    How often a random hand passes each difficulty floor.

    Args:
        wait_counts: Number of waits of each sampled hand
        floors: Minimum wait counts to evaluate

    Returns:
        Dictionary mapping floor to acceptance rate and expected attempts
        (1 / rate, inf when no sampled hand passed)
    """
    counts = np.asarray(wait_counts)
    results = {}
    for floor in floors:
        rate = float(np.mean(counts >= floor)) if len(counts) > 0 else 0.0
        results[floor] = {
            "rate": rate,
            "expected_attempts": 1.0 / rate if rate > 0 else float("inf")
        }
    return results


def sample_wait_counts(tile_count: int, samples: int, rng=None) -> np.ndarray:
    """
    Draw random hands and count their waits, without any difficulty filter.

    Args:
        tile_count: Hand size (7, 10 or 13)
        samples: Number of hands to draw
        rng: Random source (module-level random if None)

    Returns:
        Array of wait counts, one per hand
    """
    counts = []
    for _ in range(samples):
        hand = draw_random_hand(tile_count, rng)
        counts.append(len(get_waits(hand)))
    return np.array(counts, dtype=int)
