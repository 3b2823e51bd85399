import pandas as pd


def to_categorical(labels, classes: list) -> pd.Series:
    """
    Coerce a label vector into a categorical Series whose categories are
    exactly ``classes``. Labels outside that set raise ``ValueError``
    instead of silently becoming NaN.
    """
    series = pd.Series(labels)
    unknown = sorted(set(series.dropna().astype(str)) - set(classes))
    if unknown or series.isna().any():
        raise ValueError(f"labels outside {classes}: {unknown or ['<missing>']}")
    return pd.Series(
        pd.Categorical(series.astype(str), categories=classes),
        index=series.index,
        name=series.name,
    )


def split_features_target(df: pd.DataFrame, target: str):
    """Separate the feature columns from the target column."""
    if target not in df.columns:
        raise ValueError(f"target '{target}' not found in dataframe")
    return df.drop(columns=[target]), df[target]


def encode_features(train: pd.DataFrame, test: pd.DataFrame):
    """
    One-hot encode the categorical columns of ``train`` and ``test``.

    The training frame defines the schema: dummy columns that only show up
    in the test frame are dropped and missing ones are filled with zeros,
    so both frames end up with identical columns in identical order.
    Raw columns must match; a differing schema raises ``ValueError``.
    """
    if set(train.columns) != set(test.columns):
        missing = sorted(set(train.columns) - set(test.columns))
        extra = sorted(set(test.columns) - set(train.columns))
        raise ValueError(f"feature schema mismatch: missing={missing} extra={extra}")

    categorical = [
        col for col in train.columns
        if not pd.api.types.is_numeric_dtype(train[col]) or pd.api.types.is_bool_dtype(train[col])
    ]
    train_enc = pd.get_dummies(train, columns=categorical, dtype=float)
    test_enc = pd.get_dummies(test, columns=[c for c in categorical if c in test.columns], dtype=float)
    test_enc = test_enc.reindex(columns=train_enc.columns, fill_value=0.0)
    return train_enc, test_enc
