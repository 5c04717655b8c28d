import re
from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

import numpy as np

_INVALID = re.compile(r"[^0-9A-Za-z._]")
_VALID_START = re.compile(r"^([A-Za-z]|\.(?![0-9]))")


def make_names(names: Sequence[str], unique: bool = True) -> [str]:
    """
    Syntactically valid feature names: "1-abc" -> "X1.abc", "a b" -> "a.b".
    With unique, repeated names after the first get ".1", ".2", ... suffixes
    """
    result = []
    for name in names:
        name = _INVALID.sub(".", str(name))
        if not _VALID_START.match(name):
            name = "X" + name
        result.append(name)
    if not unique:
        return result

    seen = set(result)
    counts = {}
    for ind, name in enumerate(result):
        if name not in counts:
            counts[name] = 0
            continue
        candidate = name
        while candidate in seen:
            counts[name] += 1
            candidate = f"{name}.{counts[name]}"
        seen.add(candidate)
        result[ind] = candidate
    return result


@dataclass(frozen=True, eq=False)
class Experiment:
    """
    Assay matrix with features in rows and samples in columns, plus per sample metadata columns
    """
    assay: np.ndarray
    features: Tuple[str, ...]
    samples: Tuple[str, ...]
    coldata: Dict[str, np.ndarray] = field(default_factory=dict)

    def __post_init__(self):
        assay = np.asarray(self.assay)
        if assay.ndim != 2:
            raise ValueError(f"assay must be a 2d matrix, got {assay.ndim} dimensions")
        if assay.shape != (len(self.features), len(self.samples)):
            raise ValueError(f"assay shape {assay.shape} doesn't match "
                             f"{len(self.features)} features x {len(self.samples)} samples")
        coldata = {k: np.asarray(v) for k, v in self.coldata.items()}
        for k, v in coldata.items():
            if v.shape != (len(self.samples), ):
                raise ValueError(f"coldata column {k} has {v.shape} values for {len(self.samples)} samples")
        # frozen dataclass, bypass __setattr__ to store normalized values
        object.__setattr__(self, "assay", assay)
        object.__setattr__(self, "features", tuple(self.features))
        object.__setattr__(self, "samples", tuple(self.samples))
        object.__setattr__(self, "coldata", coldata)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.assay.shape

    def __getitem__(self, column: str) -> np.ndarray:
        return self.coldata[column]


__all__ = ["Experiment", "make_names"]
