from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .coltypes import ColumnTypeMap
from .table import Table
from .view import ViewState

logger = logging.getLogger(__name__)


@dataclass
class Dataset:
    """One loaded file. Only the view state is replaced after loading."""
    filename: str
    delimiter: str
    table: Table
    col_types: ColumnTypeMap
    view: ViewState
    encoding: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


class DatasetStore:
    """In-memory datasets keyed by id, oldest evicted past max_datasets."""

    def __init__(self, max_datasets: int = 20):
        self.max_datasets = max_datasets
        self._datasets: "OrderedDict[str, Dataset]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._datasets)

    def add(self, dataset: Dataset) -> Dataset:
        self._datasets[dataset.id] = dataset
        while len(self._datasets) > self.max_datasets:
            evicted, _ = self._datasets.popitem(last=False)
            logger.info("Evicted dataset %s", evicted)
        return dataset

    def get(self, dataset_id: str) -> Optional[Dataset]:
        return self._datasets.get(dataset_id)

    def remove(self, dataset_id: str) -> bool:
        return self._datasets.pop(dataset_id, None) is not None

    def clear(self) -> None:
        self._datasets.clear()
