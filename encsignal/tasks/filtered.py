import logging
from typing import Callable, Optional

from .experiment import Experiment, make_names
from .scoring import Scorer, VarianceScorer
from .task import Task, TaskClassif

logger = logging.getLogger(__name__)


def to_filtered_task(taskid: str, experiment: Experiment, classvar: Optional[str] = None, nfeat: int = 100,
                     tmaker: Callable[..., Task] = TaskClassif, scorer: Scorer = None, **kwargs) -> Task:
    """
    Build a task that keeps only the nfeat best scoring features of the experiment
    :param taskid: label of the resulting task
    :param experiment: features x samples assay with sample metadata
    :param classvar: optional metadata column used as the target
    :param nfeat: number of features to keep, all of them if the experiment has fewer
    :param tmaker: task type, TaskClassif, TaskRegr or TaskClust
    :param scorer: strategy ranking the features of a task, sample variance by default
    :param kwargs: passed to tmaker for the filtered task, e.g. positive="tumor"
    """
    if nfeat < 1:
        raise ValueError(f"nfeat must be positive, got {nfeat}")
    scorer = VarianceScorer() if scorer is None else scorer

    data = experiment.assay.T
    features = make_names(experiment.features)
    y = None if classvar is None else experiment[classvar]

    tmptask = tmaker("tmp", data, features, classvar, y)
    ranked = scorer(tmptask)
    keep = [feature for feature, _ in ranked[:nfeat]]
    logger.info(f"Kept {len(keep)} of {len(features)} features with {scorer}")

    position = {f: i for i, f in enumerate(tmptask.features)}
    columns = [position[f] for f in keep]
    return tmaker(taskid, data[:, columns], keep, classvar, y, **kwargs)


__all__ = ["to_filtered_task"]
