import logging
from dataclasses import dataclass

import pandas as pd

from .constants import AGGREGATE_NAME, N_MODELS, PLOT_METRICS, POSITIVE_CLASS, TARGET
from .ensemble_bagging import BaggingEnsemble
from .evaluation import performance_table, print_report, summarize
from .parsing import encode_features, split_features_target, to_categorical

logger = logging.getLogger(__name__)


@dataclass
class BaggingResult:
    ensemble: BaggingEnsemble
    prediction_matrix: pd.DataFrame
    predictions: pd.Series
    performance: pd.DataFrame
    y_test: pd.Series

    @property
    def summary(self) -> pd.DataFrame:
        return summarize(self.performance, PLOT_METRICS)


def resolve_classes(train_labels: pd.Series, test_labels: pd.Series, positive: str) -> list:
    """Two target levels ordered ``[negative, positive]``."""
    levels = sorted(set(train_labels.dropna().astype(str)) | set(test_labels.dropna().astype(str)))
    if len(levels) != 2:
        raise ValueError(f"target must have exactly two levels, found {levels}")
    if positive not in levels:
        raise ValueError(f"positive class '{positive}' not among target levels {levels}")
    return [next(lvl for lvl in levels if lvl != positive), positive]


def run_bagging(train: pd.DataFrame, test: pd.DataFrame, target: str = TARGET, n_models: int = N_MODELS,
                seed: int = None, tree_params: dict = None,
                positive: str = POSITIVE_CLASS, classes: list = None, n_jobs: int = 1,
                print_flag: bool = True) -> BaggingResult:
    X_train_raw, y_train_raw = split_features_target(train, target)
    X_test_raw, y_test_raw = split_features_target(test, target)

    classes = classes or resolve_classes(y_train_raw, y_test_raw, positive)
    y_train = to_categorical(y_train_raw, classes)
    y_test = to_categorical(y_test_raw, classes)
    X_train, X_test = encode_features(X_train_raw, X_test_raw)
    logger.info("train: %d rows, test: %d rows, %d encoded features",
                len(X_train), len(X_test), X_train.shape[1])

    ensemble = BaggingEnsemble(
        n_models=n_models,
        tree_params=tree_params,
        seed=seed,
        classes=classes,
        positive=positive,
        n_jobs=n_jobs,
    ).fit(X_train, y_train)

    matrix = ensemble.predict_matrix(X_test)
    predictions = ensemble.hard_voting(matrix)
    performance = performance_table(matrix, predictions, y_test, ensemble.positive, ensemble.negative)
    logger.info("%s accuracy %.4f (trees: mean %.4f)", AGGREGATE_NAME,
                performance.loc[AGGREGATE_NAME, 'accuracy'],
                performance.drop(index=AGGREGATE_NAME)['accuracy'].mean())

    result = BaggingResult(ensemble, matrix, predictions, performance, y_test)
    if print_flag:
        print_report(y_test, predictions, f"Bagging hard voting - {n_models} trees")
        print(result.summary.round(4).to_string())
    return result
