# app/api/shelters/services.py
import logging
from typing import Dict, Any, List

from app.core.exceptions import NotFound, InvalidArgument
from app.models.shelter import Shelter
from app.services.store import Store, SHELTERS

class ShelterService:
    def __init__(self, store: Store):
        self.store = store

    def list_shelters(self) -> List[Shelter]:
        return [Shelter.from_dict(doc) for doc in self.store.find(SHELTERS)]

    def get_shelter(self, shelter_id: int) -> Shelter:
        document = self.store.get(SHELTERS, shelter_id)
        if not document:
            raise NotFound("Shelter not found")
        return Shelter.from_dict(document)

    def create_shelter(self, shelter_data: Dict[str, Any]) -> Shelter:
        shelter = Shelter.from_dict(self.store.create(SHELTERS, dict(shelter_data)))
        logging.info(f"Shelter created: {shelter.name} (id={shelter.id})")
        return shelter

    def update_shelter(self, shelter_id: int, update_data: Dict[str, Any]) -> Shelter:
        if not update_data:
            raise InvalidArgument("No fields to update were provided")
        document = self.store.update(SHELTERS, shelter_id, update_data)
        if not document:
            raise NotFound("Shelter not found")
        return Shelter.from_dict(document)
