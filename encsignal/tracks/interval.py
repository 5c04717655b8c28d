from dataclasses import dataclass
from typing import NamedTuple

from ..config import DEFAULT_CHROM, DEFAULT_START, DEFAULT_END, ASSEMBLY


@dataclass(frozen=True)
class GenomicInterval:
    """0-based half open region on the genome assembly named by `genome`"""
    chrom: str
    start: int
    end: int
    genome: str

    def __post_init__(self):
        if self.start < 0 or self.start > self.end:
            raise ValueError(f"Invalid interval {self.chrom}:{self.start}-{self.end}")

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self):
        return f"{self.chrom}:{self.start}-{self.end} ({self.genome})"


class ScoredInterval(NamedTuple):
    chrom: str
    start: int
    end: int
    score: float

    @property
    def midpoint(self) -> float:
        return (self.start + self.end) / 2


DEFAULT_REGION = GenomicInterval(DEFAULT_CHROM, DEFAULT_START, DEFAULT_END, ASSEMBLY)


__all__ = ["GenomicInterval", "ScoredInterval", "DEFAULT_REGION"]
