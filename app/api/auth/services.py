# app/api/auth/services.py
import logging
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional

from app.core.exceptions import Conflict, Unauthorized
from app.core.security import hash_password, verify_password
from app.models.user import User, UserRole
from app.services.store import Store, StoreOperations, USERS, REVOKED_TOKENS
from app.utils.datetime_utils import DateTimeUtils

class AuthService:
    """Account registration, credential checks and the token blocklist."""
    def __init__(self, store: Store):
        self.store = store

    def register_user(self, user_data: Dict[str, Any]) -> User:
        """Creates an account; username and email must both be unused."""
        def _register_in_transaction(tx: StoreOperations) -> User:
            if tx.find(USERS, {'username': user_data['username']}):
                raise Conflict("Username already taken")
            if tx.find(USERS, {'email': user_data['email']}):
                raise Conflict("Email already registered")

            document = {
                'username': user_data['username'],
                'email': user_data['email'],
                'password_hash': hash_password(user_data['password']),
                'name': user_data['name'],
                'role': user_data.get('role', UserRole.ADOPTER.value),
                'phone': user_data.get('phone'),
                'bio': user_data.get('bio'),
                'profile_picture': user_data.get('profile_picture'),
                'created_at': DateTimeUtils.now(),
            }
            return User.from_dict(tx.create(USERS, document))

        user = self.store.run_in_transaction(_register_in_transaction)
        logging.info(f"User registered: {user.username} (id={user.id}, role={user.role.value})")
        return user

    def authenticate(self, username: str, password: str) -> User:
        matches = self.store.find(USERS, {'username': username})
        if not matches:
            raise Unauthorized("Invalid credentials")
        user = User.from_dict(matches[0])
        if not verify_password(user.password_hash, password):
            raise Unauthorized("Invalid credentials")
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        document = self.store.get(USERS, user_id)
        return User.from_dict(document) if document else None

    # --- Blocklist ---
    def revoke_token(self, jti: str, expires: int) -> None:
        """
        Stores the token's jti together with its expiry (epoch seconds).
        Entries whose token has already expired are dropped in the same
        transaction; an expired token is rejected without the blocklist.
        """
        revoked_at = DateTimeUtils.now()

        def _revoke_in_transaction(tx: StoreOperations) -> List[int]:
            expired_ids = [doc['id'] for doc in tx.find(REVOKED_TOKENS)
                           if doc.get('expires_at') and doc['expires_at'] <= revoked_at]
            tx.create(REVOKED_TOKENS, {
                'jti': jti,
                'revoked_at': revoked_at,
                'expires_at': datetime.fromtimestamp(expires, tz=timezone.utc),
            })
            # deletes come last: Firestore allows no reads after the first write
            for entry_id in expired_ids:
                tx.delete(REVOKED_TOKENS, entry_id)
            return expired_ids

        pruned = self.store.run_in_transaction(_revoke_in_transaction)
        logging.info(f"Token revoked. JTI: {jti[:8]}... ({len(pruned)} expired entries pruned)")

    def is_token_revoked(self, jwt_payload: dict) -> bool:
        return bool(self.store.find(REVOKED_TOKENS, {'jti': jwt_payload['jti']}))
