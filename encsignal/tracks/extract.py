import asyncio
import logging
from functools import partial
from typing import Collection, Sequence, Union

from ..catalog.meta import FileRecord, FileReferenceSet
from ..config import DEFAULT_TARGET, DEFAULT_OUTPUT_TYPE, DEFAULT_BIOSAMPLES, THREADS
from ..utils.aio import batched_gather, inexecutor
from .collection import ScoredIntervalCollection, Track, make_unique
from .interval import GenomicInterval, ScoredInterval, DEFAULT_REGION
from .reader import BigWigReader, RangeReader

logger = logging.getLogger(__name__)


def _single(region: Union[GenomicInterval, Sequence[GenomicInterval]]) -> GenomicInterval:
    if isinstance(region, GenomicInterval):
        return region
    region = list(region)
    if len(region) != 1:
        raise ValueError(f"Extraction requires exactly one genomic interval, got {len(region)}")
    if not isinstance(region[0], GenomicInterval):
        raise ValueError(f"Expected GenomicInterval, got {type(region[0]).__name__}")
    return region[0]


def _record(item, locator: str) -> ScoredInterval:
    if isinstance(item, ScoredInterval):
        return item
    # plain (chrom, start, end, score) records and (sub-interval, score) pairs
    if isinstance(item, (tuple, list)) and len(item) == 4 and isinstance(item[0], str):
        return ScoredInterval._make(item)
    if isinstance(item, (tuple, list)) and len(item) == 2 and isinstance(item[0], GenomicInterval):
        return ScoredInterval(item[0].chrom, item[0].start, item[0].end, item[1])
    raise TypeError(f"Reader returned {item!r} for {locator}, expected (chrom, start, end, score) records")


def _isrecord(item) -> bool:
    return isinstance(item, ScoredInterval) or (isinstance(item, (tuple, list)) and len(item) > 0
                                                 and isinstance(item[0], (str, GenomicInterval)))


def flatten(result: Sequence, locator: str = "reader output") -> [ScoredInterval]:
    """
    Unwrap one nesting level: [[i1, i2], [i3]] -> [i1, i2, i3], [i1, i2] is kept as is.
    Records given as plain tuples become ScoredInterval, anything else raises TypeError
    """
    flat = []
    for item in result:
        if _isrecord(item):
            flat.append(_record(item, locator))
        elif isinstance(item, (tuple, list)):
            flat.extend(_record(leaf, locator) for leaf in item)
        else:
            raise TypeError(f"Reader returned {item!r} for {locator}, expected (chrom, start, end, score) records")
    return flat


def select(files: FileReferenceSet, target: str, output_type: str, biosamples: Collection[str]) -> FileReferenceSet:
    selected = files.where(lambda r: r.target == target)
    logger.info(f"{len(selected)} of {len(files)} files target {target}")
    selected = selected.where(lambda r: r.output_type == output_type)
    logger.info(f"{len(selected)} files with output type {output_type}")
    biosamples = frozenset((biosamples,) if isinstance(biosamples, str) else biosamples)
    selected = selected.where(lambda r: r.biosample_name in biosamples)
    logger.info(f"{len(selected)} files from biosamples {sorted(biosamples)}")
    return selected


async def _read(reader: RangeReader, record: FileRecord, region: GenomicInterval) -> [ScoredInterval]:
    logger.debug(f"Reading {record.accession} ({record.biosample_name}) at {region}")
    result = await inexecutor(reader, record.url, region, region.genome)
    return flatten(result, record.url)


async def aextract(files: FileReferenceSet,
                   target: str = DEFAULT_TARGET,
                   output_type: str = DEFAULT_OUTPUT_TYPE,
                   biosamples: Collection[str] = DEFAULT_BIOSAMPLES,
                   region: Union[GenomicInterval, Sequence[GenomicInterval]] = DEFAULT_REGION,
                   reader: RangeReader = None,
                   threads: int = THREADS) -> ScoredIntervalCollection:
    """
    Select files by target, output type and biosample, then read only the scored intervals inside the region
    from each of them.
    :param files: candidate bigWig files
    :param target: required ChIP-seq target, e.g. "CREB1"
    :param output_type: required output type, e.g. "signal p-value"
    :param biosamples: biosample term names to keep
    :param region: exactly one interval, its genome must match the files assembly, this is not checked
    :param reader: range restricted reader, BigWigReader by default
    :param threads: number of files read concurrently
    :return: one track per selected file in the files order, labelled by biosample
    """
    region = _single(region)
    if threads < 1:
        raise ValueError(f"threads must be positive, got {threads}")
    reader = BigWigReader() if reader is None else reader

    selected = select(files, target, output_type, biosamples)
    mismatched = [r.accession for r in selected if r.assembly != region.genome]
    if mismatched:
        logger.debug(f"Files {mismatched} are not on {region.genome}, results might be meaningless")

    # gather keeps the files order whatever order reads finish in
    reads = [partial(_read, reader, record, region) for record in selected]
    intervals = await batched_gather(reads, batch_size=threads)
    assert len(intervals) == len(selected)

    labels = make_unique(r.biosample_name for r in selected)
    return ScoredIntervalCollection(
        Track(label, record, region, tuple(track)) for label, record, track in zip(labels, selected, intervals)
    )


def extract(files: FileReferenceSet,
            target: str = DEFAULT_TARGET,
            output_type: str = DEFAULT_OUTPUT_TYPE,
            biosamples: Collection[str] = DEFAULT_BIOSAMPLES,
            region: Union[GenomicInterval, Sequence[GenomicInterval]] = DEFAULT_REGION,
            reader: RangeReader = None,
            threads: int = THREADS) -> ScoredIntervalCollection:
    """
    Blocking version of aextract. It starts its own event loop, so inside a running one
    (e.g. a Jupyter notebook) use `await aextract(...)` instead
    """
    return asyncio.run(aextract(files, target, output_type, biosamples, region, reader, threads))


__all__ = ["aextract", "extract", "flatten", "select"]
