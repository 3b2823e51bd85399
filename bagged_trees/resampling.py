import logging

import numpy as np

logger = logging.getLogger(__name__)


def bootstrap_indices(n: int, m: int, seed=None) -> list:
    """
    Draw ``m`` bootstrap samples of size ``n``.

    Each sample is an integer array of length ``n`` drawn uniformly with
    replacement from ``[0, n)``. Passing the same integer seed reproduces
    the same samples; passing a ``Generator`` advances it in place so the
    caller can keep drawing from the same stream.
    """
    if n < 1:
        raise ValueError(f"training set size must be positive, got {n}")
    if m < 1:
        raise ValueError(f"number of resamples must be positive, got {m}")

    rng = np.random.default_rng(seed)
    samples = [rng.integers(0, n, size=n) for _ in range(m)]
    logger.debug("drew %d bootstrap samples of size %d", m, n)
    return samples


def out_of_bag_indices(indices: np.ndarray, n: int) -> np.ndarray:
    """Indices of ``[0, n)`` that were never drawn into this sample."""
    return np.setdiff1d(np.arange(n), indices)


def inclusion_rate(indices: np.ndarray, n: int) -> float:
    """Fraction of the original records drawn at least once."""
    return float(np.unique(indices).size / n)


def expected_inclusion_rate(n: int) -> float:
    """1 - (1 - 1/n)^n, which tends to 1 - 1/e (about 0.632) as n grows."""
    return float(1.0 - (1.0 - 1.0 / n) ** n)
