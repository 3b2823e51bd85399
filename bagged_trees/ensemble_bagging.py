import logging

import numpy as np
import pandas as pd
from joblib import Parallel, delayed
from sklearn.tree import DecisionTreeClassifier
from sklearn.utils.validation import check_is_fitted

from .constants import CLASSES, NEGATIVE_CLASS, POSITIVE_CLASS, N_MODELS, TREE_PARAMS
from .resampling import bootstrap_indices

logger = logging.getLogger(__name__)


def fit_member(X: pd.DataFrame, y: np.ndarray, params: dict, random_state) -> DecisionTreeClassifier:
    """Fit one tree on one resample. Stateless so it can run on any worker."""
    tree = DecisionTreeClassifier(random_state=random_state, **params)
    tree.fit(X, y)
    return tree


def majority_vote(votes, positive: str = POSITIVE_CLASS, negative: str = NEGATIVE_CLASS) -> str:
    """
    Majority vote over two labels for a single record. The positive label
    wins only with strictly more votes; an exact tie goes to ``negative``.
    """
    votes = list(votes)
    return positive if votes.count(positive) > votes.count(negative) else negative


def hard_voting(matrix: pd.DataFrame, positive: str = POSITIVE_CLASS, negative: str = NEGATIVE_CLASS,
                classes: list = None) -> pd.Series:
    """
    Row-wise majority vote over a prediction matrix (one column per model).
    Same rule as ``majority_vote``; the result is categorical with the
    target's levels as categories.
    """
    positive_votes = (matrix == positive).sum(axis=1)
    negative_votes = (matrix == negative).sum(axis=1)
    labels = np.where(positive_votes > negative_votes, positive, negative)
    return pd.Series(
        pd.Categorical(labels, categories=classes or [negative, positive]),
        index=matrix.index,
        name='bagging_label',
    )


class BaggingEnsemble:
    """
    Bootstrap aggregation of decision trees for a two-level target.

    Every member shares the same hyperparameters and is trained on its own
    bootstrap resample of the training rows. Test predictions are combined
    by hard (majority) voting with ties resolved to the negative level.
    """

    def __init__(self, n_models: int = N_MODELS, tree_params: dict = None, seed=None,
                 classes: list = None, positive: str = POSITIVE_CLASS, n_jobs: int = 1):
        self.n_models = n_models
        self.tree_params = dict(TREE_PARAMS if tree_params is None else tree_params)
        self.seed = seed
        self.classes = list(classes or CLASSES)
        self.positive = positive
        self.n_jobs = n_jobs

        if len(self.classes) != 2:
            raise ValueError(f"bagging vote needs exactly two classes, got {self.classes}")
        if positive not in self.classes:
            raise ValueError(f"positive class '{positive}' not in {self.classes}")
        self.negative = next(c for c in self.classes if c != positive)

    @property
    def model_names(self) -> list:
        return [f'model_{i + 1}' for i in range(self.n_models)]

    def fit(self, X_train: pd.DataFrame, y_train) -> 'BaggingEnsemble':
        y = np.asarray(y_train).astype(str)
        n = len(X_train)
        if len(y) != n:
            raise ValueError(f"X_train has {n} rows but y_train has {len(y)}")
        unknown = sorted(set(np.unique(y)) - set(self.classes))
        if unknown:
            raise ValueError(f"labels outside {self.classes}: {unknown}")

        # Indices and per-tree random states come from one stream so a fixed
        # seed reproduces both.
        rng = np.random.default_rng(self.seed)
        self.indices_ = bootstrap_indices(n, self.n_models, rng)
        self.random_states_ = rng.integers(0, 2 ** 31 - 1, size=self.n_models)

        for name, idx in zip(self.model_names, self.indices_):
            present = np.unique(y[idx])
            if present.size < 2:
                logger.warning("%s: resample holds a single class (%s); tree will predict it constantly",
                               name, present[0])

        logger.info("fitting %d trees on %d rows (n_jobs=%s)", self.n_models, n, self.n_jobs)
        self.estimators_ = Parallel(n_jobs=self.n_jobs)(
            delayed(fit_member)(X_train.iloc[idx], y[idx], self.tree_params, int(state))
            for idx, state in zip(self.indices_, self.random_states_)
        )
        return self

    def predict_matrix(self, X_test: pd.DataFrame) -> pd.DataFrame:
        """One column of predicted labels per fitted tree, in resample order."""
        check_is_fitted(self, 'estimators_')
        columns = {
            name: tree.predict(X_test)
            for name, tree in zip(self.model_names, self.estimators_)
        }
        return pd.DataFrame(columns, index=X_test.index)

    def hard_voting(self, matrix: pd.DataFrame) -> pd.Series:
        return hard_voting(matrix, self.positive, self.negative, self.classes)

    def predict(self, X_test: pd.DataFrame) -> pd.Series:
        return self.hard_voting(self.predict_matrix(X_test))
