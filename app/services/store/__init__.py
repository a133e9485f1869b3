# app/services/store/__init__.py
"""
Persistence adapters.

Services only talk to the Store interface; create_store() picks the
implementation from the STORAGE_BACKEND setting.
"""

from .base import (
    Store, StoreOperations, StoreError,
    USERS, PETS, SHELTERS, ADOPTION_REQUESTS, LOST_FOUND_PETS, DONATIONS, REVOKED_TOKENS,
)
from .memory import InMemoryStore


def create_store(backend: str) -> Store:
    if backend == 'memory':
        return InMemoryStore()
    if backend == 'firestore':
        # firebase_admin is only imported when Firestore is actually used
        from .firestore import FirestoreStore
        return FirestoreStore()
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")


__all__ = [
    'Store', 'StoreOperations', 'StoreError', 'InMemoryStore', 'create_store',
    'USERS', 'PETS', 'SHELTERS', 'ADOPTION_REQUESTS', 'LOST_FOUND_PETS', 'DONATIONS', 'REVOKED_TOKENS',
]
