from __future__ import annotations

import sys
from pathlib import Path

# Ensure repository root is first on sys.path
_repo_root: Path = Path(__file__).resolve().parent.parent  # tests/ -> repo root
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

import matplotlib

matplotlib.use("Agg")

import pytest

from bagged_trees.datasets import make_demo_dataset
from bagged_trees.io_utils import split_dataset
from bagged_trees.parsing import encode_features, split_features_target


@pytest.fixture
def demo_split():
    """Small seeded train/test partition of the synthetic yes/no dataset."""
    return split_dataset(make_demo_dataset(n_samples=300, seed=7), "target", test_size=0.3, seed=7)


@pytest.fixture
def encoded_split(demo_split):
    train, test = demo_split
    X_train, y_train = split_features_target(train, "target")
    X_test, y_test = split_features_target(test, "target")
    X_train, X_test = encode_features(X_train, X_test)
    return X_train, y_train, X_test, y_test
