import logging
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from .collection import ScoredIntervalCollection, Track

logger = logging.getLogger(__name__)


def _points(track: Track, log: bool):
    x = np.asarray([i.midpoint for i in track.intervals], dtype=np.float64)
    y = np.asarray(track.scores, dtype=np.float64)
    if log:
        # log scale is undefined for non positive scores
        positive = y > 0
        logger.debug(f"{track.label}: dropped {np.count_nonzero(~positive)} non positive scores")
        x, y = x[positive], y[positive]
    return x, y


def _ylabel(first: Track, second: Track) -> str:
    labels = [f"{t.record.target} {t.record.output_type}" for t in (first, second)]
    return labels[0] if labels[0] == labels[1] else " / ".join(labels)


def plot_pair(collection: ScoredIntervalCollection, log: bool = True, ax: Optional[plt.Axes] = None,
              alpha: float = 0.5, markersize: float = 8) -> plt.Axes:
    """
    Overlay the scores of exactly two tracks along the genome
    :param collection: two tracks extracted for the same region
    :param log: drop non positive scores and use logarithmic y axis
    :param ax: axes to draw on, new figure if None
    :param alpha: markers transparency
    :return: axes with the plot
    """
    if len(collection) != 2:
        raise ValueError(f"expected exactly two collection elements, got {len(collection)}")
    first, second = collection[0], collection[1]

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 5))

    for track in (first, second):
        x, y = _points(track, log)
        ax.scatter(x, y, s=markersize, alpha=alpha, label=track.label)

    if log:
        ax.set_yscale("log")
    ax.set_xlabel(f"{first.region.chrom} ({first.region.genome})")
    ax.set_ylabel(_ylabel(first, second))
    ax.legend()
    ax.grid(True, alpha=0.3)
    return ax


__all__ = ["plot_pair"]
