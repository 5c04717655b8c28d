from .catalog import FileRecord, FileReferenceSet, EncodeCatalog
from .tracks import GenomicInterval, ScoredInterval, ScoredIntervalCollection, Track, BigWigReader, \
    aextract, extract, plot_pair

__version__ = "0.1.0"
