import sys
import os
import argparse
import contextlib
import logging
import yaml
from chinitsu.generator import generate_problem, GenerationFailure
from chinitsu.quiz import DIFFICULTY_LEVELS, check_answer, difficulty_floor, explain_wait, format_groups, format_hand


def run_experiment_1(cfg):
    """Run Experiment 1: Wait-count distribution"""
    import experiments.run_experiment_1 as exp1
    exp1.main(cfg)


def run_experiment_2(cfg):
    """Run Experiment 2: Difficulty acceptance"""
    import experiments.run_experiment_2_difficulty as exp2
    exp2.main(cfg)


def run_quick_demo(cfg, answer=None):
    """Generate one problem, optionally grade an answer, and explain every wait"""
    tile_count = cfg.get("tile_count", 13)
    difficulty = cfg.get("difficulty", 1)
    max_attempts = cfg.get("max_attempts", 10000)
    min_waits = difficulty_floor(difficulty)

    print("=" * 60)
    print(f"Quick Demo: {tile_count} tiles, {DIFFICULTY_LEVELS[difficulty]}")
    print("=" * 60)

    problem = generate_problem(tile_count, min_waits, max_attempts=max_attempts)

    print(f"\nHand: {format_hand(problem.hand)}  {''.join(str(t) for t in problem.hand)}")

    if answer is not None:
        result = check_answer(problem, answer)
        print(f"\nYour answer: {result.selected_waits}")
        print("Correct!" if result.is_correct else "Wrong.")

    print(f"\nWaits: {list(problem.waits)}")
    for wait in problem.waits:
        print(f"  {wait}: {format_groups(explain_wait(problem, wait))}")


class TeeStream:
    """Helper that duplicates stdout writes to multiple streams."""

    def __init__(self, *streams):
        self.streams = streams

    def write(self, data):
        for stream in self.streams:
            stream.write(data)

    def flush(self):
        for stream in self.streams:
            stream.flush()


def run_with_logging(filename, func, cfg):
    # Create output directory if it doesn't exist
    project_root = os.path.dirname(os.path.abspath(__file__))
    output_dir = os.path.join(project_root, "output")
    os.makedirs(output_dir, exist_ok=True)

    output_path = os.path.join(output_dir, filename)
    with open(output_path, "w", encoding="utf-8") as outfile:
        tee = TeeStream(sys.stdout, outfile)
        with contextlib.redirect_stdout(tee):
            func(cfg)
    print(f"\nCompleted run. Output saved to {output_path}")


def load_config(path):
    with open(path) as f:
        cfg = yaml.safe_load(f)
    for key in ("tile_count", "difficulty"):
        if cfg.get(key) is None:
            raise ValueError(f"{key} must be specified in config")
    return cfg


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Chinitsu Wait Trainer")
    parser.add_argument(
        "--experiment",
        type=int,
        choices=[1, 2],
        help="Run specific experiment (1 or 2)"
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Run all experiments"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Generate and explain a single problem"
    )
    parser.add_argument(
        "--config",
        default=os.path.join("configs", "base.yaml"),
        help="Path to YAML config"
    )
    parser.add_argument(
        "--tiles",
        type=int,
        choices=[7, 10, 13],
        help="Override hand size"
    )
    parser.add_argument(
        "--difficulty",
        type=int,
        choices=sorted(DIFFICULTY_LEVELS),
        help="Override difficulty (1-3)"
    )
    parser.add_argument(
        "--answer",
        type=int,
        nargs="+",
        help="Waits to grade against the demo problem"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    cfg = load_config(args.config)
    if args.tiles:
        cfg["tile_count"] = args.tiles
    if args.difficulty:
        cfg["difficulty"] = args.difficulty

    if args.experiment:
        experiment_map = {
            1: ("experiment1_output.txt", run_experiment_1),
            2: ("experiment2_output.txt", run_experiment_2),
        }
        filename, func = experiment_map[args.experiment]
        run_with_logging(filename, func, cfg)
    elif args.all:
        # Create output directory if it doesn't exist
        project_root = os.path.dirname(os.path.abspath(__file__))
        output_dir = os.path.join(project_root, "output")
        os.makedirs(output_dir, exist_ok=True)

        output_path = os.path.join(output_dir, "all_experiments_output.txt")
        with open(output_path, "w", encoding="utf-8") as outfile:
            tee = TeeStream(sys.stdout, outfile)
            with contextlib.redirect_stdout(tee):
                print("Running all experiments...\n")
                run_experiment_1(cfg)
                print("\n\n")
                run_experiment_2(cfg)
        print(f"\nCompleted all experiments. Output saved to {output_path}")
    else:
        if not args.demo:
            print("No experiment specified. Running quick demo...")
            print("Use --experiment N to run experiment N, --all to run all, or --demo for quick demo\n")
        try:
            run_quick_demo(cfg, answer=args.answer)
        except GenerationFailure as e:
            print(f"{e} Try a lower difficulty.")
            sys.exit(1)
