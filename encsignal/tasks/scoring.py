import logging
from typing import Callable, List, Tuple

import numpy as np
from sklearn.feature_selection import f_classif

from .task import Task

logger = logging.getLogger(__name__)

# task -> [(feature, score), ...] sorted by decreasing score
Scorer = Callable[[Task], List[Tuple[str, float]]]


def _rank(task: Task, scores: np.ndarray) -> [Tuple[str, float]]:
    assert scores.shape == (task.ncol, )
    # NaN scores (constant features for anova) go last, ties keep the features order
    order = np.argsort(-np.nan_to_num(scores, nan=-np.inf), kind="stable")
    return [(task.features[i], float(scores[i])) for i in order]


class VarianceScorer:
    """Sample variance of every feature"""

    def __call__(self, task: Task) -> [Tuple[str, float]]:
        if task.nrow < 2:
            raise ValueError(f"Variance requires at least 2 samples, task {task.id} has {task.nrow}")
        return _rank(task, np.var(task.data, axis=0, ddof=1))

    def __repr__(self):
        return "VarianceScorer()"


class AnovaScorer:
    """ANOVA F statistic of every feature against the class labels"""

    def __call__(self, task: Task) -> [Tuple[str, float]]:
        if task.y is None:
            raise ValueError(f"ANOVA scoring requires a task with target, {task.id} has none")
        fvalues, _ = f_classif(task.data, task.y)
        return _rank(task, np.asarray(fvalues, dtype=np.float64))

    def __repr__(self):
        return "AnovaScorer()"


__all__ = ["Scorer", "VarianceScorer", "AnovaScorer"]
