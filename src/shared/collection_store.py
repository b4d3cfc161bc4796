from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from src.shared.logging_utils import info as log_info
from src.shared.record_store import JsonRecordStore
from src.shared.settings import get_settings
from src.shared.state_common import utc_now
from src.specs.common.errors import NotFoundError, StorageError

Record = Dict[str, Any]
Document = Dict[str, Any]

# Fields an update may never overwrite
_PRESERVED_FIELDS = ("id", "createdAt")


class Collection:
    """A named array of records persisted as one JSON document."""

    def __init__(
        self,
        name: str,
        store: JsonRecordStore,
        empty_factory: Callable[[], Document],
        resource_type: str,
    ):
        self.name = name
        self.store = store
        self.empty_factory = empty_factory
        self.resource_type = resource_type

    @property
    def path(self) -> Path:
        return self.store.path

    def ensure(self) -> bool:
        return self.store.ensure(self.empty_factory())

    def _load(self) -> Optional[Document]:
        data = self.store.load()
        if data is None or not isinstance(data.get(self.name), list):
            return None
        return data

    def document(self) -> Document:
        """Current document, or a fresh empty one when the file can't be read."""
        return self._load() or self.empty_factory()

    def records(self) -> List[Record]:
        return [r for r in self.document()[self.name] if isinstance(r, dict)]

    def _find(self, data: Optional[Document], record_id: str) -> Tuple[Document, int]:
        if data is not None:
            for index, record in enumerate(data[self.name]):
                if isinstance(record, dict) and record.get("id") == record_id:
                    return data, index
        raise NotFoundError(self.resource_type, details={"id": record_id})

    def _save(self, data: Document) -> None:
        if not self.store.save(data):
            raise StorageError(
                f"Failed to write {self.name} collection", path=str(self.path)
            )

    def get(self, record_id: str) -> Record:
        data, index = self._find(self._load(), record_id)
        return data[self.name][index]

    def append(self, record: Record) -> Record:
        with self.store.lock:
            data = self.document()
            data[self.name].append(record)
            self._save(data)
        log_info("collection:appended", collection=self.name, id=record.get("id"))
        return record

    def update(
        self,
        record_id: str,
        changes: Dict[str, Any],
        validate: Optional[Callable[[Record], Record]] = None,
    ) -> Record:
        with self.store.lock:
            data, index = self._find(self._load(), record_id)
            current = data[self.name][index]
            merged = {**current, **changes}
            for field in _PRESERVED_FIELDS:
                if field in current:
                    merged[field] = current[field]
                else:
                    merged.pop(field, None)
            if validate is not None:
                merged = validate(merged)
            data[self.name][index] = merged
            self._save(data)
        log_info("collection:updated", collection=self.name, id=record_id)
        return merged

    def remove(self, record_id: str) -> Record:
        with self.store.lock:
            data, index = self._find(self._load(), record_id)
            removed = data[self.name].pop(index)
            self._save(data)
        log_info("collection:removed", collection=self.name, id=record_id)
        return removed

    def replace(self, document: Document) -> Document:
        with self.store.lock:
            self._save(document)
        log_info("collection:replaced", collection=self.name, count=len(document.get(self.name) or []))
        return document


def _empty_designs() -> Document:
    return {"designs": [], "lastUpdated": utc_now()}


def _empty_schedules() -> Document:
    return {"schedules": []}


def _empty_history() -> Document:
    return {"history": []}


@dataclass(frozen=True)
class CollectionStores:
    designs: Collection
    schedules: Collection
    history: Collection

    @classmethod
    def from_directory(cls, data_dir: Union[str, Path]) -> "CollectionStores":
        base = Path(data_dir)
        return cls(
            designs=Collection("designs", JsonRecordStore(base / "designs.json"), _empty_designs, "Design"),
            schedules=Collection("schedules", JsonRecordStore(base / "schedules.json"), _empty_schedules, "Schedule"),
            history=Collection("history", JsonRecordStore(base / "history.json"), _empty_history, "History record"),
        )

    def ensure_all(self) -> None:
        for collection in (self.designs, self.schedules, self.history):
            collection.ensure()


@lru_cache(maxsize=1)
def get_stores() -> CollectionStores:
    stores = CollectionStores.from_directory(get_settings().dataDir)
    stores.ensure_all()
    return stores
