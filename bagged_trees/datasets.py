import numpy as np
import pandas as pd
from sklearn.datasets import make_classification

from .constants import NEGATIVE_CLASS, POSITIVE_CLASS, TARGET


def make_demo_dataset(n_samples: int = 600, seed: int = 42) -> pd.DataFrame:
    """
    Synthetic mixed-type dataset with a yes/no target: six numeric features
    plus two categorical ones binned out of informative columns, so the
    trees have something to split on in both kinds.
    """
    X, y = make_classification(
        n_samples=n_samples,
        n_features=8,
        n_informative=5,
        n_redundant=1,
        flip_y=0.05,
        class_sep=0.8,
        random_state=seed,
    )
    df = pd.DataFrame(X[:, :6], columns=[f'x{i}' for i in range(1, 7)])
    df['segment'] = pd.cut(X[:, 6], bins=[-np.inf, -0.5, 0.5, np.inf], labels=['low', 'mid', 'high']).astype(str)
    df['channel'] = np.where(X[:, 7] > 0, 'online', 'branch')
    df[TARGET] = np.where(y == 1, POSITIVE_CLASS, NEGATIVE_CLASS)
    return df
