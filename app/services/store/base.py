# app/services/store/base.py
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, TypeVar

T = TypeVar("T")

USERS = 'users'
PETS = 'pets'
SHELTERS = 'shelters'
ADOPTION_REQUESTS = 'adoption_requests'
LOST_FOUND_PETS = 'lost_found_pets'
DONATIONS = 'donations'
REVOKED_TOKENS = 'revoked_tokens'

COLLECTIONS = (USERS, PETS, SHELTERS, ADOPTION_REQUESTS, LOST_FOUND_PETS, DONATIONS, REVOKED_TOKENS)


class StoreError(RuntimeError):
    """Raised by an adapter when the backing engine fails."""


class StoreOperations(ABC):
    """
    CRUD over named collections of plain dict documents.

    Every document carries an integer 'id' unique within its collection,
    assigned on create in increasing order. Returned documents are copies;
    mutating them never changes stored state.
    """

    @abstractmethod
    def get(self, collection: str, entity_id: int) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def find(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Documents whose fields equal every given filter value, in id order."""

    @abstractmethod
    def create(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Stores a new document under the next id and returns it with 'id' set."""

    @abstractmethod
    def update(self, collection: str, entity_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Merges changes into an existing document; None when it does not exist."""

    @abstractmethod
    def delete(self, collection: str, entity_id: int) -> bool:
        ...


class Store(StoreOperations):
    """A store that can also run a group of operations atomically."""

    @abstractmethod
    def run_in_transaction(self, callback: Callable[[StoreOperations], T]) -> T:
        """
        Calls callback(tx) where tx exposes the same CRUD operations.
        Either every write made through tx is applied or none is; an
        exception raised by the callback aborts the transaction and propagates.
        """


def _check_collection(collection: str) -> None:
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {collection}")


def matches(document: Dict[str, Any], filters: Optional[Dict[str, Any]]) -> bool:
    if not filters:
        return True
    return all(document.get(key) == value for key, value in filters.items())
