import os
import pandas as pd
from sklearn.model_selection import train_test_split


def ensure_dir(path: str) -> None:
    """Create ``path`` (and parents) for CSV and plot outputs; no-op for an empty path."""
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


def read_csv(file_path: str) -> pd.DataFrame:
    """Load one data partition (or a whole dataset to split) from CSV."""
    return pd.read_csv(file_path)


def save_csv(df: pd.DataFrame, file_path: str, index: bool = False) -> None:
    """Wrapper to save CSV, creating the parent directory first."""
    ensure_dir(os.path.dirname(file_path) or '.')
    df.to_csv(file_path, index=index)


def split_dataset(df: pd.DataFrame, target: str, test_size: float = 0.3, seed: int = 42):
    """
    Partition a labeled frame once into disjoint train and test frames,
    stratified on the target so both levels appear on each side.
    """
    if target not in df.columns:
        raise ValueError(f"target '{target}' not found in dataframe")
    train, test = train_test_split(
        df, test_size=test_size, random_state=seed, stratify=df[target]
    )
    return train.reset_index(drop=True), test.reset_index(drop=True)
