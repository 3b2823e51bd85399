import pandas as pd

from bagged_trees.plotting import plot_metric_boxplots


def test_one_png_per_metric(tmp_path) -> None:
    table = pd.DataFrame(
        {"accuracy": [0.7, 0.75, 0.72, 0.8], "f1": [0.6, 0.65, 0.7, 0.74]},
        index=pd.Index(["model_1", "model_2", "model_3", "bagging"], name="model"),
    )
    figures = plot_metric_boxplots(table, ["accuracy", "f1"], save_output_dir=str(tmp_path), show=False)
    assert len(figures) == 2
    assert (tmp_path / "accuracy.png").exists()
    assert (tmp_path / "f1.png").exists()


def test_creates_missing_output_dir(tmp_path) -> None:
    table = pd.DataFrame(
        {"accuracy": [0.6, 0.7, 0.65]},
        index=pd.Index(["model_1", "model_2", "bagging"], name="model"),
    )
    out = tmp_path / "plots" / "nested"
    plot_metric_boxplots(table, ["accuracy"], save_output_dir=str(out), show=False)
    assert (out / "accuracy.png").exists()
