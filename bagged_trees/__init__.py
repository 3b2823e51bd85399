"""
Bagged decision trees

Bootstrap aggregating for a two-level target, organized as small reusable
modules:
- resampling: bootstrap index samples and out-of-bag helpers
- ensemble_bagging: one tree per resample, hard voting with ties to the negative class
- evaluation: confusion-matrix statistics per tree and for the voted ensemble
- plotting: per-metric boxplots of the trees against the ensemble
- pipeline: the whole run, from train/test frames to the performance table
"""
from .ensemble_bagging import BaggingEnsemble, hard_voting, majority_vote
from .pipeline import BaggingResult, run_bagging
from .resampling import bootstrap_indices

__all__ = [
    "BaggingEnsemble",
    "BaggingResult",
    "bootstrap_indices",
    "hard_voting",
    "majority_vote",
    "run_bagging",
]
