import argparse
import logging
import os
import sys

from .constants import BOXPLOT_DIR, N_MODELS, OUTPUT_DIR, PLOT_METRICS, POSITIVE_CLASS, SEED, TARGET, TREE_PARAMS
from .datasets import make_demo_dataset
from .io_utils import read_csv, save_csv, split_dataset
from .pipeline import run_bagging
from .plotting import plot_metric_boxplots


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bagged_trees",
        description="Bagged decision trees with majority vote, compared against each individual tree.",
    )
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument("--train", help="CSV with the training partition (needs --test).")
    source.add_argument("--data", help="Single CSV to split into train/test.")
    source.add_argument("--demo", action="store_true", help="Use a synthetic yes/no dataset.")
    p.add_argument("--test", help="CSV with the test partition.")
    p.add_argument("--test-size", type=float, default=0.3)
    p.add_argument("--target", default=TARGET)
    p.add_argument("--positive", default=POSITIVE_CLASS, help="Target level treated as the positive class.")
    p.add_argument("--n-models", type=int, default=N_MODELS)
    p.add_argument("--seed", type=int, default=SEED)
    p.add_argument("--n-jobs", type=int, default=1)
    p.add_argument("--max-depth", type=int, default=TREE_PARAMS["max_depth"])
    p.add_argument("--min-samples-leaf", type=int, default=TREE_PARAMS["min_samples_leaf"])
    p.add_argument("--output-dir", default=OUTPUT_DIR)
    p.add_argument("--no-plots", action="store_true")
    p.add_argument("--verbose", action="store_true")
    return p


def load_partitions(args):
    if args.demo:
        return split_dataset(make_demo_dataset(seed=args.seed), args.target, args.test_size, args.seed)
    if args.data:
        if not os.path.exists(args.data):
            raise SystemExit(f"File not found: {args.data}")
        df = read_csv(args.data)
        if args.target not in df.columns:
            raise SystemExit(f"Column {args.target} not found in {args.data}")
        return split_dataset(df, args.target, args.test_size, args.seed)
    if not args.test:
        raise SystemExit("--train requires --test")
    for path in (args.train, args.test):
        if not os.path.exists(path):
            raise SystemExit(f"File not found: {path}")
    train, test = read_csv(args.train), read_csv(args.test)
    for name, df in (("train", train), ("test", test)):
        if args.target not in df.columns:
            raise SystemExit(f"Column {args.target} not found in {name} data")
    return train, test


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    train, test = load_partitions(args)
    tree_params = dict(TREE_PARAMS, max_depth=args.max_depth, min_samples_leaf=args.min_samples_leaf)
    result = run_bagging(
        train, test,
        target=args.target,
        n_models=args.n_models,
        seed=args.seed,
        tree_params=tree_params,
        positive=args.positive,
        n_jobs=args.n_jobs,
    )

    predictions = test.copy()
    predictions["bagging_label"] = result.predictions.values
    save_csv(predictions, os.path.join(args.output_dir, "predictions.csv"))
    save_csv(result.performance, os.path.join(args.output_dir, "performance.csv"), index=True)
    if not args.no_plots:
        plot_dir = os.path.join(args.output_dir, os.path.relpath(BOXPLOT_DIR, OUTPUT_DIR))
        plot_metric_boxplots(result.performance, PLOT_METRICS, save_output_dir=plot_dir, show=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
