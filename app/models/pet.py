# app/models/pet.py
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, List, Dict, Any
from enum import Enum
import logging

from app.utils.datetime_utils import DateTimeUtils

class PetStatus(Enum):
    AVAILABLE = "available"
    PENDING = "pending"
    ADOPTED = "adopted"

class PetGender(Enum):
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"

class PetSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

@dataclass
class Pet:
    """
    Document structure of the 'pets' collection.
    status is the single source of truth for adoptability and is only
    changed by the adoption workflow or an explicit admin edit.
    """
    id: int
    name: str
    type: str
    breed: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    weight: Optional[str] = None
    description: Optional[str] = None
    status: PetStatus = PetStatus.AVAILABLE
    good_with_children: Optional[bool] = None
    good_with_dogs: Optional[bool] = None
    good_with_cats: Optional[bool] = None
    shelter_id: Optional[int] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)
    images: List[str] = field(default_factory=list)

    @property
    def is_available(self) -> bool:
        return self.status == PetStatus.AVAILABLE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pet":
        """
        Builds a Pet from a stored document.
        Unknown status strings fall back to AVAILABLE with a warning.
        """
        processed_data = data.copy()

        status_str = processed_data.get('status')
        if isinstance(status_str, str):
            try:
                processed_data['status'] = PetStatus(status_str)
            except ValueError:
                logging.warning(f"Invalid PetStatus value '{status_str}' for pet {processed_data.get('id')}. Defaulting to available.")
                processed_data['status'] = PetStatus.AVAILABLE
        elif status_str is None:
            processed_data['status'] = PetStatus.AVAILABLE

        if processed_data.get('images') is None:
            processed_data['images'] = []

        return cls(**processed_data)

    def to_dict(self) -> Dict[str, Any]:
        pet_dict = asdict(self)
        pet_dict['status'] = self.status.value
        return pet_dict
