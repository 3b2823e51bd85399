import logging
import os

import matplotlib.pyplot as plt
import pandas as pd

from .constants import AGGREGATE_NAME, BOXPLOT_DIR, PLOT_METRICS
from .io_utils import ensure_dir

logger = logging.getLogger(__name__)


def plot_metric_boxplot(table: pd.DataFrame, metric: str, save_output_dir: str = BOXPLOT_DIR,
                        show: bool = True):
    """
    Boxplot of one metric across the individual trees, with the voted
    ensemble's value drawn over it in red.
    """
    members = table.drop(index=AGGREGATE_NAME)[metric].dropna()
    aggregate = table.loc[AGGREGATE_NAME, metric]

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.boxplot(members.values)
    ax.scatter([1], [aggregate], color='red', zorder=3, label=f'{AGGREGATE_NAME} = {aggregate:.3f}')
    if pd.notna(aggregate):
        ax.axhline(aggregate, color='red', linestyle='--', lw=1)
    ax.set_xticks([1])
    ax.set_xticklabels([f'{len(members)} trees'])
    ax.set_ylabel(metric)
    ax.set_title(f'{metric}: individual trees vs. {AGGREGATE_NAME}')
    ax.legend(loc='lower right')
    ax.grid(True, axis='y')

    fig.tight_layout()
    if save_output_dir:
        ensure_dir(save_output_dir)
        path = os.path.join(save_output_dir, f'{metric}.png')
        fig.savefig(path)
        logger.debug("saved %s", path)
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig


def plot_metric_boxplots(table: pd.DataFrame, metrics: list = None, save_output_dir: str = BOXPLOT_DIR,
                         show: bool = True) -> list:
    """One comparison figure per metric."""
    metrics = metrics or PLOT_METRICS
    figures = [plot_metric_boxplot(table, m, save_output_dir, show) for m in metrics]
    logger.info("plotted %d metrics", len(figures))
    return figures
