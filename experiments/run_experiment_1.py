"""
Experiment 1: Wait-count distribution of random hands

Draws random hands of each size from a fresh 36-tile bag and counts how
many waits they have, before any difficulty filter is applied.
"""

import os
import sys
import random

# Add project root to Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import yaml
from chinitsu.utils import compute_statistics, sample_wait_counts, wait_count_distribution
from chinitsu.plotting import ensure_dir, save_wait_histogram


def run_distribution(cfg, rng=None):
    """
    Sample wait counts for every configured hand size.

    Returns:
        Dictionary mapping hand size to array of wait counts
    """
    samples = cfg.get("samples")
    if samples is None:
        raise ValueError("samples must be specified in config")
    hand_sizes = cfg.get("hand_sizes", [7, 10, 13])

    return {size: sample_wait_counts(size, samples, rng) for size in hand_sizes}


def main(cfg=None):
    if cfg is None:
        config_path = os.path.join(project_root, "configs", "base.yaml")
        with open(config_path) as f:
            cfg = yaml.safe_load(f)

    print("=" * 60)
    print("Experiment 1: Wait-count distribution of random hands")
    print("=" * 60)

    rng = random.Random(cfg.get("seed"))
    results = run_distribution(cfg, rng)

    print(f"\nSampled {cfg['samples']} hands per hand size\n")
    for size, wait_counts in results.items():
        summary = compute_statistics(wait_counts)
        histogram = wait_count_distribution(wait_counts)
        print(f"{size} tiles:")
        print(f"  Mean waits: {summary['mean']:.3f} (95% CI {summary['ci_95_lower']:.3f} - {summary['ci_95_upper']:.3f})")
        print(f"  Std: {summary['std']:.3f}")
        print(f"  Tenpai rate: {1 - histogram[0] / summary['n']:.4f}")
        print("  Histogram: " + ", ".join(f"{k}:{int(c)}" for k, c in enumerate(histogram) if c > 0))

    print("\n" + "=" * 60)

    plot_dir = os.path.join(project_root, "plots", "experiment_1")
    ensure_dir(plot_dir)
    save_wait_histogram(
        {f"{size} tiles": wait_counts for size, wait_counts in results.items()},
        "Wait Count Distribution by Hand Size",
        os.path.join(plot_dir, "wait_distribution.png")
    )
    print(f"\nPlots saved to: {plot_dir}")
    return results


if __name__ == "__main__":
    main()
