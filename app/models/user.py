# app/models/user.py
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any

from app.utils.datetime_utils import DateTimeUtils

class UserRole(Enum):
    ADOPTER = "adopter"
    RESCUER = "rescuer"
    VETERINARIAN = "veterinarian"
    SHELTER_STAFF = "shelter_staff"
    ADMIN = "admin"

@dataclass
class User:
    """
    Document structure of the 'users' collection.
    password_hash never leaves the service layer.
    """
    id: int
    username: str
    email: str
    password_hash: str
    name: str
    role: UserRole = UserRole.ADOPTER
    phone: Optional[str] = None
    bio: Optional[str] = None
    profile_picture: Optional[str] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        processed_data = data.copy()
        processed_data['role'] = UserRole(processed_data.get('role') or UserRole.ADOPTER.value)
        return cls(**processed_data)

    def to_dict(self) -> Dict[str, Any]:
        user_dict = asdict(self)
        user_dict['role'] = self.role.value
        return user_dict
