# app/services/store/memory.py
import copy
import logging
import threading
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .base import COLLECTIONS, Store, StoreOperations, _check_collection, matches

T = TypeVar("T")


class _MemoryCollections(StoreOperations):
    """Plain dict-backed collections; not thread-safe on its own."""

    def __init__(self, data: Optional[Dict[str, Dict[int, Dict[str, Any]]]] = None,
                 counters: Optional[Dict[str, int]] = None):
        self.data = data if data is not None else {name: {} for name in COLLECTIONS}
        self.counters = counters if counters is not None else {name: 0 for name in COLLECTIONS}

    def clone(self) -> "_MemoryCollections":
        return _MemoryCollections(copy.deepcopy(self.data), dict(self.counters))

    def get(self, collection, entity_id):
        _check_collection(collection)
        document = self.data[collection].get(entity_id)
        return copy.deepcopy(document) if document is not None else None

    def find(self, collection, filters=None):
        _check_collection(collection)
        return [copy.deepcopy(doc) for _, doc in sorted(self.data[collection].items())
                if matches(doc, filters)]

    def create(self, collection, data):
        _check_collection(collection)
        self.counters[collection] += 1
        entity_id = self.counters[collection]
        document = copy.deepcopy(data)
        document['id'] = entity_id
        self.data[collection][entity_id] = document
        return copy.deepcopy(document)

    def update(self, collection, entity_id, changes):
        _check_collection(collection)
        document = self.data[collection].get(entity_id)
        if document is None:
            return None
        merged = {**document, **copy.deepcopy(changes), 'id': entity_id}
        self.data[collection][entity_id] = merged
        return copy.deepcopy(merged)

    def delete(self, collection, entity_id):
        _check_collection(collection)
        return self.data[collection].pop(entity_id, None) is not None


class InMemoryStore(Store):
    """
    Process-local store guarded by a single re-entrant lock.

    Transactions run against a deep copy of all collections while holding
    the lock and the copy replaces the live data only when the callback
    returns, so every transaction is serialized and all-or-nothing.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._state = _MemoryCollections()
        logging.info("InMemoryStore initialized.")

    def get(self, collection: str, entity_id: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self._state.get(collection, entity_id)

    def find(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        with self._lock:
            return self._state.find(collection, filters)

    def create(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            return self._state.create(collection, data)

    def update(self, collection: str, entity_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self._state.update(collection, entity_id, changes)

    def delete(self, collection: str, entity_id: int) -> bool:
        with self._lock:
            return self._state.delete(collection, entity_id)

    def run_in_transaction(self, callback: Callable[[StoreOperations], T]) -> T:
        with self._lock:
            working_copy = self._state.clone()
            result = callback(working_copy)
            self._state = working_copy
            return result
