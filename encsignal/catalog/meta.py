import csv
import logging
from dataclasses import dataclass, fields, asdict
from typing import Callable, Collection, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union, overload

from ..config import METADATA_COLUMNS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileRecord:
    """Remote bigWig file and the ENCODE attributes used to select it"""
    accession: str
    url: str
    target: str
    output_type: str
    biosample_name: str
    assembly: str
    file_format: str
    file_size: int
    # experiment accession
    dataset: str

    def __post_init__(self):
        if not self.url:
            raise ValueError(f"File {self.accession} has no locator")
        if self.file_size < 0:
            raise ValueError(f"File {self.accession} has negative size {self.file_size}")

    @classmethod
    def fromrow(cls, row: Mapping[str, object]) -> "FileRecord":
        """Validate a raw attribute mapping against the record schema"""
        names = [f.name for f in fields(cls)]
        missing = [n for n in names if n not in row or row[n] is None]
        if missing:
            raise ValueError(f"Record is missing attributes {missing}: {dict(row)}")
        values = {n: row[n] for n in names}
        try:
            values["file_size"] = int(values["file_size"])
        except (TypeError, ValueError):
            raise ValueError(f"Record has non integer file_size: {values['file_size']!r}")
        for n in names:
            if n != "file_size":
                values[n] = str(values[n])
        return cls(**values)

    def asdict(self) -> Dict[str, object]:
        return asdict(self)


class FileReferenceSet:
    """
    Ordered immutable collection of FileRecord. All filtering methods return a new set
    """

    def __init__(self, records: Iterable[FileRecord] = ()):
        self._records: Tuple[FileRecord, ...] = tuple(records)
        assert all(isinstance(r, FileRecord) for r in self._records)

    @classmethod
    def fromrows(cls, rows: Iterable[Mapping[str, object]]) -> "FileReferenceSet":
        return cls(FileRecord.fromrow(r) for r in rows)

    @classmethod
    def fromtsv(cls, path: str, columns: Mapping[str, str] = METADATA_COLUMNS) -> "FileReferenceSet":
        """
        Parse metadata.tsv of the ENCODE batch download
        :param path: path to the tab separated metadata file
        :param columns: file column -> FileRecord attribute
        """
        rows = []
        with open(path, 'r', newline='') as file:
            reader = csv.DictReader(file, delimiter='\t')
            absent = set(columns.keys()) - set(reader.fieldnames or ())
            if absent:
                raise ValueError(f"{path} lacks columns {sorted(absent)}")
            for line in reader:
                row = {attr: line[column] for column, attr in columns.items()}
                # "CREB1-human" -> "CREB1"
                if row["target"].endswith("-human"):
                    row["target"] = row["target"][:-len("-human")]
                rows.append(row)
        logger.debug(f"Parsed {len(rows)} records from {path}")
        return cls.fromrows(rows)

    def torows(self) -> [Dict[str, object]]:
        return [r.asdict() for r in self._records]

    def where(self, predicate: Callable[[FileRecord], bool]) -> "FileReferenceSet":
        return FileReferenceSet(r for r in self._records if predicate(r))

    def subset(self, target: Optional[str] = None, output_type: Optional[str] = None,
               biosamples: Optional[Collection[str]] = None) -> "FileReferenceSet":
        """Filters applied one after another, None disables the filter"""
        result = self
        if target is not None:
            result = result.where(lambda r: r.target == target)
        if output_type is not None:
            result = result.where(lambda r: r.output_type == output_type)
        if biosamples is not None:
            biosamples = frozenset(biosamples)
            result = result.where(lambda r: r.biosample_name in biosamples)
        return result

    def unique(self, attribute: str) -> [object]:
        """Distinct values of the attribute in the order of appearance"""
        return list(dict.fromkeys(getattr(r, attribute) for r in self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self._records)

    @overload
    def __getitem__(self, item: int) -> FileRecord: ...

    @overload
    def __getitem__(self, item: slice) -> "FileReferenceSet": ...

    def __getitem__(self, item: Union[int, slice]):
        if isinstance(item, slice):
            return FileReferenceSet(self._records[item])
        return self._records[item]

    def __eq__(self, other):
        if not isinstance(other, FileReferenceSet):
            return NotImplemented
        return self._records == other._records

    def __hash__(self):
        return hash(self._records)

    def __repr__(self):
        return f"FileReferenceSet(records={len(self._records)})"


__all__ = ["FileRecord", "FileReferenceSet"]
