import numpy as np
import pytest

from bagged_trees.resampling import (
    bootstrap_indices,
    expected_inclusion_rate,
    inclusion_rate,
    out_of_bag_indices,
)


@pytest.mark.parametrize("n,m", [(1, 1), (5, 3), (50, 10), (7, 100)])
def test_bootstrap_shape_and_range(n: int, m: int) -> None:
    samples = bootstrap_indices(n, m, seed=0)
    assert len(samples) == m
    for idx in samples:
        assert idx.shape == (n,)
        assert np.issubdtype(idx.dtype, np.integer)
        assert idx.min() >= 0 and idx.max() < n


@pytest.mark.parametrize("n,m", [(0, 5), (5, 0), (-1, 1)])
def test_bootstrap_rejects_non_positive(n: int, m: int) -> None:
    with pytest.raises(ValueError):
        bootstrap_indices(n, m)


def test_same_seed_same_samples() -> None:
    first = bootstrap_indices(40, 6, seed=123)
    second = bootstrap_indices(40, 6, seed=123)
    assert all(np.array_equal(a, b) for a, b in zip(first, second))


def test_generator_seed_advances_stream() -> None:
    rng = np.random.default_rng(5)
    first = bootstrap_indices(30, 1, rng)[0]
    second = bootstrap_indices(30, 1, rng)[0]
    assert not np.array_equal(first, second)


def test_inclusion_rate_converges_to_bootstrap_constant() -> None:
    n = 200
    samples = bootstrap_indices(n, 2000, seed=2024)
    mean_rate = np.mean([inclusion_rate(idx, n) for idx in samples])
    assert mean_rate == pytest.approx(expected_inclusion_rate(n), abs=0.005)
    assert mean_rate == pytest.approx(1 - np.exp(-1), abs=0.01)


def test_out_of_bag_complements_drawn_records() -> None:
    n = 25
    idx = bootstrap_indices(n, 1, seed=3)[0]
    oob = out_of_bag_indices(idx, n)
    assert np.intersect1d(oob, idx).size == 0
    assert oob.size + np.unique(idx).size == n
