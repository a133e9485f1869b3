# app/models/shelter.py
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

@dataclass
class Shelter:
    """
    Document structure of the 'shelters' collection.
    """
    id: int
    name: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    email: str
    website: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Shelter":
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
