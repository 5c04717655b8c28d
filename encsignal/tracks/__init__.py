from .interval import GenomicInterval, ScoredInterval, DEFAULT_REGION
from .collection import ScoredIntervalCollection, Track, make_unique
from .reader import BigWigReader, RangeReader
from .extract import aextract, extract
from .paired import plot_pair
