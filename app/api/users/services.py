# app/api/users/services.py
import logging
from typing import Dict, Any

from app.core.exceptions import NotFound, InvalidArgument
from app.models.user import User, UserRole
from app.services.store import Store, USERS

class UserService:
    """Profile reads/updates and admin role management."""
    def __init__(self, store: Store):
        self.store = store

    def get_user(self, user_id: int) -> User:
        document = self.store.get(USERS, user_id)
        if not document:
            raise NotFound("User not found")
        return User.from_dict(document)

    def update_profile(self, user_id: int, update_data: Dict[str, Any]) -> User:
        """Partial update of the caller's own profile fields."""
        if not update_data:
            raise InvalidArgument("No fields to update were provided")
        document = self.store.update(USERS, user_id, update_data)
        if not document:
            raise NotFound("User not found")
        logging.info(f"Profile updated for user {user_id} with fields: {list(update_data.keys())}")
        return User.from_dict(document)

    def change_role(self, user_id: int, role: UserRole) -> User:
        document = self.store.update(USERS, user_id, {'role': role.value})
        if not document:
            raise NotFound("User not found")
        logging.info(f"Role of user {user_id} changed to {role.value}")
        return User.from_dict(document)
