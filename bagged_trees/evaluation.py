import numpy as np
import pandas as pd
from sklearn.metrics import classification_report, confusion_matrix

from .constants import AGGREGATE_NAME, NEGATIVE_CLASS, POSITIVE_CLASS


def _safe_div(num: float, den: float) -> float:
    return float(num / den) if den else np.nan


def confusion_stats(y_true, y_pred, positive: str = POSITIVE_CLASS, negative: str = NEGATIVE_CLASS) -> dict:
    """
    Confusion matrix counts plus the usual binary classification statistics,
    taking ``positive`` as the event of interest. Ratios whose denominator
    is zero come back as NaN.
    """
    y_true = np.asarray(y_true).astype(str)
    y_pred = np.asarray(y_pred).astype(str)
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[negative, positive]).ravel()
    total = tn + fp + fn + tp

    accuracy = _safe_div(tp + tn, total)
    sensitivity = _safe_div(tp, tp + fn)
    specificity = _safe_div(tn, tn + fp)
    precision = _safe_div(tp, tp + fp)
    neg_pred_value = _safe_div(tn, tn + fn)

    # Cohen's kappa from the same counts
    expected = _safe_div((tp + fp) * (tp + fn) + (fn + tn) * (fp + tn), total * total)
    kappa = _safe_div(accuracy - expected, 1.0 - expected)

    return {
        'tp': int(tp),
        'fp': int(fp),
        'fn': int(fn),
        'tn': int(tn),
        'accuracy': accuracy,
        'kappa': kappa,
        'sensitivity': sensitivity,
        'specificity': specificity,
        'pos_pred_value': precision,
        'neg_pred_value': neg_pred_value,
        'precision': precision,
        'recall': sensitivity,
        'f1': _safe_div(2 * tp, 2 * tp + fp + fn),
        'prevalence': _safe_div(tp + fn, total),
        'detection_rate': _safe_div(tp, total),
        'detection_prevalence': _safe_div(tp + fp, total),
        'balanced_accuracy': (sensitivity + specificity) / 2,
    }


def performance_table(matrix: pd.DataFrame, final, y_true, positive: str = POSITIVE_CLASS,
                      negative: str = NEGATIVE_CLASS) -> pd.DataFrame:
    """
    One row of statistics per model column in ``matrix`` plus a single
    ``bagging`` row for the voted predictions, all computed the same way.
    """
    rows = {
        name: confusion_stats(y_true, matrix[name], positive, negative)
        for name in matrix.columns
    }
    rows[AGGREGATE_NAME] = confusion_stats(y_true, final, positive, negative)
    table = pd.DataFrame.from_dict(rows, orient='index')
    table.index.name = 'model'
    return table


def summarize(table: pd.DataFrame, metrics: list) -> pd.DataFrame:
    """Mean/std/min/max of each metric across the individual models next to the aggregate."""
    members = table.drop(index=AGGREGATE_NAME)
    summary = members[metrics].agg(['mean', 'std', 'min', 'max']).T
    summary[AGGREGATE_NAME] = table.loc[AGGREGATE_NAME, metrics]
    summary['models_beaten'] = [
        float((members[m] < table.loc[AGGREGATE_NAME, m]).mean()) for m in metrics
    ]
    return summary


def print_report(y_true, y_pred, title: str) -> None:
    print(f"===== {title} =====")
    print(classification_report(np.asarray(y_true).astype(str), np.asarray(y_pred).astype(str),
                                zero_division=0))
