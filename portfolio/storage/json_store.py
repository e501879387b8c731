from pathlib import Path
import json
import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..collections import COLLECTIONS, Collection
from ..utils.payloads import coerce_id

Record = Dict[str, Any]


class StoreError(Exception):
    """Base class for record store failures."""


class UnknownCollection(StoreError, KeyError):
    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"Unknown collection: {self.key}"


class NotAListCollection(StoreError, TypeError):
    def __init__(self, key: str, expected: str = "list"):
        super().__init__(f"{key} is not a {expected} collection")
        self.key = key
        self.expected = expected


class InvalidPayload(StoreError, ValueError):
    pass


class RecordNotFound(StoreError, LookupError):
    def __init__(self, key: str, record_id):
        super().__init__(f"No record {record_id!r} in {key}")
        self.key = key
        self.record_id = record_id


class PersistError(StoreError, OSError):
    def __init__(self, key: str, cause: Exception):
        super().__init__(f"Failed to save {key}: {cause}")
        self.key = key
        self.cause = cause


def _is_integral(value) -> bool:
    # 2.0 read back from a hand-edited file still addresses record 2
    if isinstance(value, bool):
        return False
    return isinstance(value, int) or (isinstance(value, float) and value.is_integer())


def next_id(records: Iterable[Mapping[str, Any]]) -> int:
    """Next free id for a list collection: highest existing id plus one, or 1."""
    ids = [r.get("id") for r in records if _is_integral(r.get("id"))]
    if not ids:
        return 1
    return int(max(ids)) + 1


class RecordStore:
    """In-memory snapshot of the portfolio collections, one JSON file per collection.

    Every mutation rewrites the affected collection's file before returning.
    """

    def __init__(
        self,
        data_dir: Path,
        collections: Optional[Mapping[str, Collection]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.collections = dict(collections if collections is not None else COLLECTIONS)
        self.logger = logger or logging.getLogger(__name__)
        self._data: Dict[str, Any] = {k: c.kind.empty() for k, c in self.collections.items()}
        self._lock = threading.RLock()

    def _collection(self, key: str) -> Collection:
        try:
            return self.collections[key]
        except KeyError:
            raise UnknownCollection(key) from None

    def _list_collection(self, key: str) -> Collection:
        c = self._collection(key)
        if not c.is_list:
            raise NotAListCollection(key)
        return c

    def _path(self, key: str) -> Path:
        return self.data_dir / self._collection(key).filename

    @staticmethod
    def _check_payload(payload) -> Record:
        if not isinstance(payload, dict):
            raise InvalidPayload("payload must be a JSON object")
        return payload

    @staticmethod
    def _valid_shape(c: Collection, value) -> bool:
        if c.is_list:
            return isinstance(value, list) and all(isinstance(r, dict) for r in value)
        return isinstance(value, dict)

    # --- loading ---

    def load(self, key: str) -> bool:
        """Read one collection from disk into memory.

        A missing file is created with the collection's empty default. A file that
        can't be parsed, or holds the wrong JSON shape, leaves the empty default in
        memory and is not touched on disk. Returns False in that case.
        """
        c = self._collection(key)
        p = self._path(key)
        with self._lock:
            if not p.exists():
                self._data[key] = c.kind.empty()
                with p.open("w", encoding="utf-8") as f:
                    json.dump(self._data[key], f)
                self.logger.info("Created %s", p.name)
                return True
            try:
                with p.open("r", encoding="utf-8") as f:
                    value = json.load(f)
                if not self._valid_shape(c, value):
                    raise ValueError(f"expected a JSON {'array of objects' if c.is_list else 'object'}")
            except (OSError, ValueError, RecursionError):
                self._data[key] = c.kind.empty()
                self.logger.exception("Failed to load %s; starting with default value", key)
                return False
            self._data[key] = value
            self.logger.info("Loaded %s", key)
            return True

    def load_all(self) -> List[str]:
        """Load every configured collection. Returns the keys that failed to load."""
        return [key for key in self.collections if not self.load(key)]

    # --- persistence ---

    def persist(self, key: str) -> None:
        p = self._path(key)
        with self._lock:
            try:
                with p.open("w", encoding="utf-8") as f:
                    json.dump(self._data[key], f, indent=2, ensure_ascii=False)
            except (OSError, TypeError, ValueError) as e:
                self.logger.exception("Failed to save %s", key)
                raise PersistError(key, e) from e
        self.logger.info("Saved %s", key)

    # --- reads ---

    def get_all(self, key: str):
        self._collection(key)
        return self._data[key]

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._data)

    def _index_of(self, key: str, record_id) -> int:
        rid = coerce_id(record_id)
        if rid is not None:
            for i, item in enumerate(self._data[key]):
                if item.get("id") == rid:
                    return i
        raise RecordNotFound(key, record_id)

    def get_by_id(self, key: str, record_id) -> Record:
        self._list_collection(key)
        with self._lock:
            return self._data[key][self._index_of(key, record_id)]

    # --- writes ---

    def create(self, key: str, payload: Record) -> Record:
        self._list_collection(key)
        payload = self._check_payload(payload)
        with self._lock:
            records = self._data[key]
            fields = {k: v for k, v in payload.items() if k != "id"}
            record = {"id": next_id(records), **fields}
            records.append(record)
            self.persist(key)
        return record

    def update(self, key: str, record_id, payload: Record) -> Record:
        self._list_collection(key)
        payload = self._check_payload(payload)
        with self._lock:
            index = self._index_of(key, record_id)
            original_id = self._data[key][index]["id"]
            record = {k: v for k, v in payload.items() if k != "id"}
            record["id"] = original_id
            self._data[key][index] = record
            self.persist(key)
        return record

    def update_singleton(self, key: str, payload: Record) -> Record:
        c = self._collection(key)
        if c.is_list:
            raise NotAListCollection(key, expected="singleton")
        payload = self._check_payload(payload)
        with self._lock:
            self._data[key] = dict(payload)
            self.persist(key)
            return self._data[key]

    def delete(self, key: str, record_id) -> None:
        self._list_collection(key)
        rid = coerce_id(record_id)
        with self._lock:
            records = self._data[key]
            remaining = [r for r in records if rid is None or r.get("id") != rid]
            if len(remaining) == len(records):
                raise RecordNotFound(key, record_id)
            self._data[key] = remaining
            self.persist(key)
