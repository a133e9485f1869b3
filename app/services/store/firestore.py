# app/services/store/firestore.py
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from firebase_admin import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from app.utils.datetime_utils import DateTimeUtils
from .base import Store, StoreError, StoreOperations, _check_collection, matches

T = TypeVar("T")

COUNTERS_COLLECTION = 'counters'


class _FirestoreTransaction(StoreOperations):
    """
    CRUD bound to one Firestore transaction.

    Firestore rejects reads after the first write of a transaction, so
    callers read everything they need before writing. Snapshots read here
    are cached so update() can return the merged document without re-reading.
    """

    def __init__(self, store: "FirestoreStore", transaction):
        self.store = store
        self.transaction = transaction
        self._cache: Dict[Tuple[str, int], Optional[Dict[str, Any]]] = {}
        self._next_ids: Dict[str, int] = {}

    def get(self, collection, entity_id):
        _check_collection(collection)
        key = (collection, entity_id)
        if key not in self._cache:
            snapshot = self.store._doc(collection, entity_id).get(transaction=self.transaction)
            self._cache[key] = DateTimeUtils.from_firestore(snapshot.to_dict()) if snapshot.exists else None
        document = self._cache[key]
        return dict(document) if document is not None else None

    def find(self, collection, filters=None):
        _check_collection(collection)
        documents = []
        for snapshot in self.store._query(collection, filters).stream(transaction=self.transaction):
            document = DateTimeUtils.from_firestore(snapshot.to_dict())
            self._cache[(collection, document['id'])] = document
            documents.append(dict(document))
        return sorted(documents, key=lambda doc: doc['id'])

    def create(self, collection, data):
        _check_collection(collection)
        if collection not in self._next_ids:
            counter = self.store._counter(collection).get(transaction=self.transaction)
            self._next_ids[collection] = (counter.get('value') if counter.exists else 0) + 1
        entity_id = self._next_ids[collection]
        self._next_ids[collection] += 1
        self.transaction.set(self.store._counter(collection), {'value': entity_id})

        document = {**data, 'id': entity_id}
        self.transaction.set(self.store._doc(collection, entity_id), DateTimeUtils.for_firestore(document))
        self._cache[(collection, entity_id)] = document
        return dict(document)

    def update(self, collection, entity_id, changes):
        current = self.get(collection, entity_id)
        if current is None:
            return None
        merged = {**current, **changes, 'id': entity_id}
        self.transaction.update(self.store._doc(collection, entity_id), DateTimeUtils.for_firestore(dict(changes)))
        self._cache[(collection, entity_id)] = merged
        return dict(merged)

    def delete(self, collection, entity_id):
        if self.get(collection, entity_id) is None:
            return False
        self.transaction.delete(self.store._doc(collection, entity_id))
        self._cache[(collection, entity_id)] = None
        return True


class FirestoreStore(Store):
    """
    Store backed by Cloud Firestore through firebase_admin.

    Documents live under '<collection>/<id>'; ids come from
    'counters/<collection>' documents incremented transactionally.
    """

    def __init__(self, client=None):
        self.db = client or firestore.client()
        logging.info("FirestoreStore initialized.")

    def _doc(self, collection: str, entity_id: int):
        return self.db.collection(collection).document(str(entity_id))

    def _counter(self, collection: str):
        return self.db.collection(COUNTERS_COLLECTION).document(collection)

    def _query(self, collection: str, filters: Optional[Dict[str, Any]]):
        query = self.db.collection(collection)
        for key, value in (filters or {}).items():
            query = query.where(filter=FieldFilter(key, '==', value))
        return query

    def get(self, collection: str, entity_id: int) -> Optional[Dict[str, Any]]:
        _check_collection(collection)
        try:
            snapshot = self._doc(collection, entity_id).get()
        except Exception as e:
            logging.error(f"Firestore read failed ({collection}/{entity_id}): {e}", exc_info=True)
            raise StoreError(f"Failed to read {collection}/{entity_id}") from e
        return DateTimeUtils.from_firestore(snapshot.to_dict()) if snapshot.exists else None

    def find(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        _check_collection(collection)
        try:
            documents = [DateTimeUtils.from_firestore(s.to_dict()) for s in self._query(collection, filters).stream()]
        except Exception as e:
            logging.error(f"Firestore query failed ({collection}, filters={filters}): {e}", exc_info=True)
            raise StoreError(f"Failed to query {collection}") from e
        # Firestore needs a composite index to order filtered queries; sort locally instead.
        return sorted((doc for doc in documents if matches(doc, filters)), key=lambda doc: doc['id'])

    def create(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.run_in_transaction(lambda tx: tx.create(collection, data))

    def update(self, collection: str, entity_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.run_in_transaction(lambda tx: tx.update(collection, entity_id, changes))

    def delete(self, collection: str, entity_id: int) -> bool:
        return self.run_in_transaction(lambda tx: tx.delete(collection, entity_id))

    def run_in_transaction(self, callback: Callable[[StoreOperations], T]) -> T:
        transaction = self.db.transaction()

        @firestore.transactional
        def _run_in_transaction(transaction):
            return callback(_FirestoreTransaction(self, transaction))

        return _run_in_transaction(transaction)
