from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

import numpy as np


@dataclass(frozen=True, eq=False)
class Task:
    """Samples x features matrix with an optional target column"""
    id: str
    data: np.ndarray
    features: Tuple[str, ...]
    target: Optional[str] = None
    y: Optional[np.ndarray] = None

    task_type: ClassVar[str] = "unsupervised"

    def __post_init__(self):
        data = np.asarray(self.data, dtype=np.float64)
        if data.ndim != 2 or data.shape[1] != len(self.features):
            raise ValueError(f"Task {self.id}: data shape {data.shape} doesn't match {len(self.features)} features")
        if (self.target is None) != (self.y is None):
            raise ValueError(f"Task {self.id}: target name and values must be given together")
        if self.y is not None and len(self.y) != data.shape[0]:
            raise ValueError(f"Task {self.id}: {len(self.y)} target values for {data.shape[0]} samples")
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "features", tuple(self.features))

    @property
    def nrow(self) -> int:
        return self.data.shape[0]

    @property
    def ncol(self) -> int:
        return self.data.shape[1]

    def column(self, feature: str) -> np.ndarray:
        return self.data[:, self.features.index(feature)]


@dataclass(frozen=True, eq=False)
class TaskClassif(Task):
    positive: Optional[str] = None

    task_type: ClassVar[str] = "classif"

    def __post_init__(self):
        if self.target is None:
            raise ValueError(f"Classification task {self.id} requires a target")
        super().__post_init__()
        y = np.asarray(self.y).astype(str)
        object.__setattr__(self, "y", y)
        if self.positive is not None and self.positive not in self.classes:
            raise ValueError(f"Positive class {self.positive} is not among {self.classes}")

    @property
    def classes(self) -> [str]:
        return np.unique(self.y).tolist()


@dataclass(frozen=True, eq=False)
class TaskRegr(Task):
    task_type: ClassVar[str] = "regr"

    def __post_init__(self):
        if self.target is None:
            raise ValueError(f"Regression task {self.id} requires a target")
        super().__post_init__()
        object.__setattr__(self, "y", np.asarray(self.y, dtype=np.float64))


@dataclass(frozen=True, eq=False)
class TaskClust(Task):
    task_type: ClassVar[str] = "clust"

    def __post_init__(self):
        if self.target is not None:
            raise ValueError(f"Clustering task {self.id} can't have a target")
        super().__post_init__()


__all__ = ["Task", "TaskClassif", "TaskRegr", "TaskClust"]
