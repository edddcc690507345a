"""
Experiment 2: Difficulty acceptance

For every hand size and difficulty floor, estimates how often a random
hand is accepted by the generator and how many resampling attempts a
problem costs on average.
"""

import os
import sys
import random

# Add project root to Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import yaml
from chinitsu.utils import acceptance_rates, sample_wait_counts
from chinitsu.plotting import ensure_dir, save_bar_plot


def run_acceptance(cfg, rng=None):
    """
    Returns:
        Dictionary mapping hand size to acceptance_rates() output
    """
    samples = cfg.get("samples")
    if samples is None:
        raise ValueError("samples must be specified in config")
    hand_sizes = cfg.get("hand_sizes", [7, 10, 13])
    floors = cfg.get("difficulty_floors", [1, 2, 3])

    results = {}
    for size in hand_sizes:
        wait_counts = sample_wait_counts(size, samples, rng)
        results[size] = acceptance_rates(wait_counts, floors)
    return results


def main(cfg=None):
    if cfg is None:
        config_path = os.path.join(project_root, "configs", "base.yaml")
        with open(config_path) as f:
            cfg = yaml.safe_load(f)

    print("=" * 60)
    print("Experiment 2: Difficulty acceptance")
    print("=" * 60)

    rng = random.Random(cfg.get("seed"))
    results = run_acceptance(cfg, rng)
    max_attempts = cfg.get("max_attempts", 10000)

    for size, by_floor in results.items():
        print(f"\n{size} tiles:")
        for floor, entry in by_floor.items():
            print(f"  >= {floor} waits: acceptance {entry['rate']:.4f}, "
                  f"expected attempts {entry['expected_attempts']:.1f}")
            if entry["expected_attempts"] > max_attempts:
                print(f"    Warning: exceeds max_attempts ({max_attempts}), generation will likely fail")

    print("\n" + "=" * 60)

    plot_dir = os.path.join(project_root, "plots", "experiment_2")
    ensure_dir(plot_dir)
    for size, by_floor in results.items():
        save_bar_plot(
            [f">= {floor}" for floor in by_floor],
            [entry["rate"] for entry in by_floor.values()],
            f"Acceptance Rate by Difficulty Floor ({size} tiles)",
            os.path.join(plot_dir, f"acceptance_{size}.png"),
            xlabel="Difficulty floor",
            ylabel="Acceptance Rate"
        )
    print(f"\nPlots saved to: {plot_dir}")
    return results


if __name__ == "__main__":
    main()
