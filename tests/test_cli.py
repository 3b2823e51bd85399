import pandas as pd
import pytest

from bagged_trees.__main__ import main
from bagged_trees.datasets import make_demo_dataset


def test_demo_run_writes_outputs(tmp_path) -> None:
    assert main(["--demo", "--n-models", "5", "--output-dir", str(tmp_path)]) == 0
    performance = pd.read_csv(tmp_path / "performance.csv", index_col=0)
    assert performance.index.tolist()[-1] == "bagging"
    assert len(performance) == 6
    assert "bagging_label" in pd.read_csv(tmp_path / "predictions.csv").columns
    assert (tmp_path / "metric_boxplots" / "accuracy.png").exists()


def test_data_file_is_split(tmp_path) -> None:
    path = tmp_path / "data.csv"
    make_demo_dataset(n_samples=200, seed=1).to_csv(path, index=False)
    out = tmp_path / "out"
    assert main(["--data", str(path), "--n-models", "3", "--max-depth", "4",
                 "--output-dir", str(out), "--no-plots"]) == 0
    assert len(pd.read_csv(out / "predictions.csv")) == 60
    assert not (out / "metric_boxplots").exists()


def test_train_needs_test(tmp_path) -> None:
    with pytest.raises(SystemExit):
        main(["--train", str(tmp_path / "train.csv")])


def test_missing_target_column(tmp_path) -> None:
    path = tmp_path / "data.csv"
    pd.DataFrame({"x": [1, 2]}).to_csv(path, index=False)
    with pytest.raises(SystemExit, match="Column target not found"):
        main(["--data", str(path)])
