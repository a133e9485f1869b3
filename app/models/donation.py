# app/models/donation.py
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, Dict, Any

from app.utils.datetime_utils import DateTimeUtils

@dataclass
class Donation:
    """
    Document structure of the 'donations' collection.
    amount is in the minor currency unit (cents).
    """
    id: int
    amount: int
    shelter_id: Optional[int] = None
    user_id: Optional[int] = None
    message: Optional[str] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Donation":
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
