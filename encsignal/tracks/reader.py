import logging
from typing import Callable, Sequence

import pyBigWig

from .interval import GenomicInterval, ScoredInterval

logger = logging.getLogger(__name__)

# (locator, interval, genome) -> scored sub-intervals inside the interval
RangeReader = Callable[[str, GenomicInterval, str], Sequence[ScoredInterval]]


class BigWigReader:
    """
    Range restricted bigWig reader. Remote files are opened over http(s) by libBigWig, which fetches the
    index and only the data blocks covering the requested interval
    """

    def __call__(self, locator: str, interval: GenomicInterval, genome: str) -> [ScoredInterval]:
        try:
            bw = pyBigWig.open(locator)
        except RuntimeError as e:
            raise RuntimeError(f"Failed to open bigWig {locator}") from e
        if bw is None:
            raise RuntimeError(f"Failed to open bigWig {locator}")

        try:
            if not bw.isBigWig():
                raise RuntimeError(f"{locator} is not a bigWig file")
            chroms = bw.chroms()
            if interval.chrom not in chroms:
                logger.debug(f"{interval.chrom} is absent in {locator}")
                return []
            stop = min(interval.end, chroms[interval.chrom])
            if interval.start >= stop:
                return []
            # None when nothing is covered
            raw = bw.intervals(interval.chrom, interval.start, stop) or ()
        finally:
            bw.close()

        logger.debug(f"Read {len(raw)} intervals from {locator} at {interval}, genome {genome}")
        # bigWig records overlapping the window edges are clipped to it
        return [ScoredInterval(interval.chrom, max(s, interval.start), min(e, stop), value) for s, e, value in raw]

    def __repr__(self):
        return "BigWigReader()"


__all__ = ["BigWigReader", "RangeReader"]
