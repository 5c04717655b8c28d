import logging
from typing import NamedTuple, Optional, Union

from pybedtools import BedTool, Interval

from ..tracks.interval import GenomicInterval, ScoredInterval

logger = logging.getLogger(__name__)


class NearestFeature(NamedTuple):
    name: str
    chrom: str
    start: int
    end: int
    # 0 for overlapping features
    distance: int


def tointerval(interval: Union[GenomicInterval, ScoredInterval]) -> Interval:
    return Interval(interval.chrom, interval.start, interval.end)


def nearest(interval: Union[GenomicInterval, ScoredInterval], genes: Union[str, BedTool]) -> Optional[NearestFeature]:
    """
    Closest annotated feature to the interval, ties are resolved by the first feature in the file.
    Genes must be a BED file (name in the 4th column) on the same assembly and chromosome naming as the interval
    :return: None when there are no features on the interval chromosome
    """
    genes = BedTool(genes) if isinstance(genes, str) else genes
    query = BedTool([tointerval(interval)])
    hits = list(query.closest(genes.sort(), d=True, t="first"))
    assert len(hits) == 1, f"Expected single closest hit, got {len(hits)}"

    # query(3 fields) + feature fields + distance
    fields = hits[0].fields
    feature, distance = fields[3:-1], int(fields[-1])
    if distance < 0 or feature[0] == ".":
        logger.debug(f"No features on {interval.chrom}")
        return None
    name = feature[3] if len(feature) > 3 else "."
    return NearestFeature(name, feature[0], int(feature[1]), int(feature[2]), distance)


__all__ = ["NearestFeature", "nearest", "tointerval"]
