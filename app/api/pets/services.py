# app/api/pets/services.py
import logging
from typing import Dict, Any, List, Optional

from app.core.exceptions import NotFound, InvalidArgument, InvalidState, Conflict
from app.models.pet import Pet, PetStatus
from app.models.adoption_request import AdoptionRequestStatus
from app.services.store import Store, StoreOperations, PETS, SHELTERS, ADOPTION_REQUESTS
from app.utils.datetime_utils import DateTimeUtils

class PetService:
    """Adoptable-pet catalog: listing, profile edits and admin status edits."""
    def __init__(self, store: Store):
        self.store = store
        logging.info("PetService initialized.")

    def list_pets(self, filters: Optional[Dict[str, Any]] = None) -> List[Pet]:
        """Pets matching every filter, newest first."""
        pets = [Pet.from_dict(doc) for doc in self.store.find(PETS, filters or None)]
        return sorted(pets, key=lambda pet: (pet.created_at, pet.id), reverse=True)

    def get_pet(self, pet_id: int) -> Pet:
        document = self.store.get(PETS, pet_id)
        if not document:
            raise NotFound("Pet not found")
        return Pet.from_dict(document)

    def _ensure_shelter_exists(self, shelter_id: Optional[int]) -> None:
        if shelter_id is not None and not self.store.get(SHELTERS, shelter_id):
            raise NotFound("Shelter not found")

    def create_pet(self, pet_data: Dict[str, Any]) -> Pet:
        self._ensure_shelter_exists(pet_data.get('shelter_id'))
        document = {
            **pet_data,
            'status': PetStatus.AVAILABLE.value,
            'created_at': DateTimeUtils.now(),
        }
        pet = Pet.from_dict(self.store.create(PETS, document))
        logging.info(f"Pet created: {pet.name} (id={pet.id})")
        return pet

    def update_pet(self, pet_id: int, update_data: Dict[str, Any]) -> Pet:
        """Merges profile fields. status is never part of update_data."""
        update_data = {k: v for k, v in update_data.items() if k not in ('id', 'status', 'created_at')}
        if not update_data:
            raise InvalidArgument("No fields to update were provided")
        self.get_pet(pet_id)
        if 'shelter_id' in update_data:
            self._ensure_shelter_exists(update_data['shelter_id'])

        document = self.store.update(PETS, pet_id, update_data)
        if not document:
            raise NotFound("Pet not found")
        logging.info(f"Pet profile updated for {pet_id} with fields: {list(update_data.keys())}")
        return Pet.from_dict(document)

    def set_status(self, pet_id: int, status: PetStatus) -> Pet:
        """
        [admin] Direct status edit, restricted so it cannot contradict the
        adoption requests on file:
        - 'pending' is only ever set by submitting an adoption request
        - no edit while a request is pending
        - an adopted pet with an approved request cannot be reopened
        """
        def _set_status_in_transaction(tx: StoreOperations) -> Pet:
            document = tx.get(PETS, pet_id)
            if not document:
                raise NotFound("Pet not found")
            requests = tx.find(ADOPTION_REQUESTS, {'pet_id': pet_id})
            if status == PetStatus.PENDING:
                raise InvalidState("Pet status 'pending' is set by adoption requests only")
            if any(r['status'] == AdoptionRequestStatus.PENDING.value for r in requests):
                raise InvalidState("Pet has pending adoption requests")
            if status == PetStatus.AVAILABLE and any(r['status'] == AdoptionRequestStatus.APPROVED.value for r in requests):
                raise InvalidState("Pet has an approved adoption request")
            return Pet.from_dict(tx.update(PETS, pet_id, {'status': status.value}))

        pet = self.store.run_in_transaction(_set_status_in_transaction)
        logging.info(f"Pet {pet_id} status set to {status.value} by admin")
        return pet

    def delete_pet(self, pet_id: int) -> None:
        def _delete_in_transaction(tx: StoreOperations) -> None:
            if not tx.get(PETS, pet_id):
                raise NotFound("Pet not found")
            if tx.find(ADOPTION_REQUESTS, {'pet_id': pet_id, 'status': AdoptionRequestStatus.PENDING.value}):
                raise Conflict("Pet has pending adoption requests")
            tx.delete(PETS, pet_id)

        self.store.run_in_transaction(_delete_in_transaction)
        logging.info(f"Pet {pet_id} deleted")
