# app/models/lost_found_pet.py
from dataclasses import dataclass, field, asdict
from datetime import date, datetime
from enum import Enum
from typing import Optional, List, Dict, Any

from app.utils.datetime_utils import DateTimeUtils

class ReportType(Enum):
    LOST = "lost"
    FOUND = "found"

class ReportStatus(Enum):
    OPEN = "open"
    CLOSED = "closed"

@dataclass
class LostFoundPet:
    """
    Document structure of the 'lost_found_pets' collection.
    reporter_id is None for reports submitted without logging in.
    """
    id: int
    type: ReportType
    pet_type: str
    description: str
    location: str
    date: date
    contact_name: str
    contact_email: str
    contact_phone: str
    name: Optional[str] = None
    breed: Optional[str] = None
    gender: Optional[str] = None
    status: ReportStatus = ReportStatus.OPEN
    reporter_id: Optional[int] = None
    images: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LostFoundPet":
        processed_data = data.copy()
        processed_data['type'] = ReportType(processed_data['type'])
        processed_data['status'] = ReportStatus(processed_data.get('status') or ReportStatus.OPEN.value)

        # Firestore stores the sighting date as a timestamp
        sighting_date = processed_data.get('date')
        if isinstance(sighting_date, datetime):
            processed_data['date'] = sighting_date.date()

        if processed_data.get('images') is None:
            processed_data['images'] = []
        return cls(**processed_data)

    def to_dict(self) -> Dict[str, Any]:
        report_dict = asdict(self)
        report_dict['type'] = self.type.value
        report_dict['status'] = self.status.value
        return report_dict
