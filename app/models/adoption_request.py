# app/models/adoption_request.py
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any

from app.utils.datetime_utils import DateTimeUtils

class AdoptionRequestStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not AdoptionRequestStatus.PENDING

@dataclass
class AdoptionRequest:
    """
    Document structure of the 'adoption_requests' collection.
    pending -> approved | rejected, both terminal.
    """
    id: int
    pet_id: int
    user_id: int
    status: AdoptionRequestStatus = AdoptionRequestStatus.PENDING
    message: Optional[str] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)
    decided_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdoptionRequest":
        processed_data = data.copy()
        processed_data['status'] = AdoptionRequestStatus(processed_data.get('status') or AdoptionRequestStatus.PENDING.value)
        return cls(**processed_data)

    def to_dict(self) -> Dict[str, Any]:
        request_dict = asdict(self)
        request_dict['status'] = self.status.value
        return request_dict
