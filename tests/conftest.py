import matplotlib
matplotlib.use("Agg")

import pytest

from encsignal.catalog import FileRecord, FileReferenceSet
from encsignal.tracks import GenomicInterval, ScoredInterval


def makerecord(accession, target="CREB1", output_type="signal p-value", biosample="HepG2", assembly="GRCh38"):
    return FileRecord(
        accession=accession,
        url=f"https://www.encodeproject.org/files/{accession}/@@download/{accession}.bigWig",
        target=target,
        output_type=output_type,
        biosample_name=biosample,
        assembly=assembly,
        file_format="bigWig",
        file_size=1024,
        dataset="ENCSR000AAA",
    )


class FakeReader:
    """Deterministic reader: one interval per record, score derived from the accession number"""

    def __init__(self):
        self.calls = []

    def __call__(self, locator, interval, genome):
        self.calls.append((locator, interval, genome))
        accession = locator.rsplit('/', 1)[-1].split('.')[0]
        score = float(int(accession[-3:]))
        return [ScoredInterval(interval.chrom, interval.start, interval.start + 10, score)]


@pytest.fixture
def region():
    return GenomicInterval("chr17", 38_000_000, 38_100_000, "GRCh38")


@pytest.fixture
def reader():
    return FakeReader()


@pytest.fixture
def fileset():
    # five records: FOXA1 at 4th and "read count" at 5th position
    return FileReferenceSet([
        makerecord("ENCFF001", biosample="HepG2"),
        makerecord("ENCFF002", biosample="HepG2"),
        makerecord("ENCFF003", biosample="MCF-7"),
        makerecord("ENCFF004", target="FOXA1", biosample="A549"),
        makerecord("ENCFF005", output_type="read count", biosample="MCF-7"),
    ])


@pytest.fixture(name="makerecord")
def makerecord_fixture():
    return makerecord
