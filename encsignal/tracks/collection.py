from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple, Union

from ..catalog.meta import FileRecord
from .interval import GenomicInterval, ScoredInterval


def make_unique(names: Iterable[str]) -> [str]:
    """
    Names that occur more than once get ".1", ".2", ... suffixes in the order of appearance,
    names seen once are kept as is: [a, a, b] -> [a.1, a.2, b]
    """
    names = list(names)
    counts = Counter(names)
    taken = {n for n, c in counts.items() if c == 1}
    nextsuffix = Counter()
    result = []
    for name in names:
        if counts[name] == 1:
            result.append(name)
            continue
        # skip suffixes that collide with names already present, e.g. [a, a, a.1]
        while True:
            nextsuffix[name] += 1
            candidate = f"{name}.{nextsuffix[name]}"
            if candidate not in taken:
                break
        taken.add(candidate)
        result.append(candidate)
    assert len(set(result)) == len(result)
    return result


@dataclass(frozen=True)
class Track:
    label: str
    record: FileRecord
    region: GenomicInterval
    intervals: Tuple[ScoredInterval, ...]

    @property
    def metadata(self) -> Dict[str, object]:
        return self.record.asdict()

    @property
    def scores(self) -> [float]:
        return [i.score for i in self.intervals]

    def __len__(self):
        return len(self.intervals)


class ScoredIntervalCollection:
    """Read only, ordered tracks addressable by position or by their unique label"""

    def __init__(self, tracks: Iterable[Track] = ()):
        self._tracks: Tuple[Track, ...] = tuple(tracks)
        self._bylabel = {t.label: t for t in self._tracks}
        if len(self._bylabel) != len(self._tracks):
            raise ValueError(f"Track labels must be unique, got {[t.label for t in self._tracks]}")

    @property
    def labels(self) -> [str]:
        return [t.label for t in self._tracks]

    @property
    def records(self) -> [FileRecord]:
        return [t.record for t in self._tracks]

    def __getitem__(self, item: Union[int, str]) -> Track:
        if isinstance(item, str):
            return self._bylabel[item]
        return self._tracks[item]

    def __contains__(self, label) -> bool:
        return label in self._bylabel

    def __iter__(self) -> Iterator[Track]:
        return iter(self._tracks)

    def __len__(self) -> int:
        return len(self._tracks)

    def __eq__(self, other):
        if not isinstance(other, ScoredIntervalCollection):
            return NotImplemented
        return self._tracks == other._tracks

    def __repr__(self):
        return f"ScoredIntervalCollection(labels={self.labels})"


__all__ = ["make_unique", "Track", "ScoredIntervalCollection"]
