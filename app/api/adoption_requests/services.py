# app/api/adoption_requests/services.py
import logging
from typing import List, Optional, Tuple, Union

from app.core.exceptions import NotFound, InvalidArgument, InvalidState
from app.models.adoption_request import AdoptionRequest, AdoptionRequestStatus
from app.models.pet import Pet, PetStatus
from app.models.user import User
from app.services.store import Store, StoreOperations, PETS, USERS, ADOPTION_REQUESTS
from app.utils.datetime_utils import DateTimeUtils

DECISION_STATUSES = (AdoptionRequestStatus.APPROVED, AdoptionRequestStatus.REJECTED)


class AdoptionRequestService:
    """
    Adoption workflow.

    Pet:     available -> pending -> adopted, or back to available
    Request: pending -> approved | rejected (both terminal)

    Each operation runs in one store transaction: the request, the pet and
    every sibling request change together or not at all, and no other
    mutation interleaves. Inside the transaction all reads happen before
    the first write.
    """
    def __init__(self, store: Store):
        self.store = store

    def submit_request(self, pet_id: int, user_id: int, message: Optional[str] = None) -> AdoptionRequest:
        """Opens a pending request for an available pet and marks the pet pending."""
        def _submit_in_transaction(tx: StoreOperations) -> AdoptionRequest:
            pet_doc = tx.get(PETS, pet_id)
            if not pet_doc:
                raise NotFound("Pet not found")
            if not Pet.from_dict(pet_doc).is_available:
                raise InvalidState("Pet is not available for adoption")

            request_doc = tx.create(ADOPTION_REQUESTS, {
                'pet_id': pet_id,
                'user_id': user_id,
                'status': AdoptionRequestStatus.PENDING.value,
                'message': message,
                'created_at': DateTimeUtils.now(),
                'decided_at': None,
            })
            tx.update(PETS, pet_id, {'status': PetStatus.PENDING.value})
            return AdoptionRequest.from_dict(request_doc)

        adoption_request = self.store.run_in_transaction(_submit_in_transaction)
        logging.info(f"Adoption request {adoption_request.id} submitted by user {user_id} for pet {pet_id}; pet is now pending")
        return adoption_request

    def decide_request(self, request_id: int, target_status: Union[str, AdoptionRequestStatus]) -> AdoptionRequest:
        """
        Approves or rejects a pending request.

        approve: pet -> adopted, every other pending request for the pet -> rejected
        reject:  pet -> available once no request for it is pending or approved

        A request that is already approved/rejected cannot be decided again.
        """
        status = self._parse_decision(target_status)
        decided_at = DateTimeUtils.now()

        def _decide_in_transaction(tx: StoreOperations) -> Tuple[AdoptionRequest, List[int]]:
            request_doc = tx.get(ADOPTION_REQUESTS, request_id)
            if not request_doc:
                raise NotFound("Adoption request not found")
            adoption_request = AdoptionRequest.from_dict(request_doc)
            if adoption_request.status.is_terminal:
                raise InvalidState("Adoption request has already been decided")

            pet_id = adoption_request.pet_id
            if not tx.get(PETS, pet_id):
                raise NotFound("Pet not found")
            siblings = [AdoptionRequest.from_dict(doc)
                        for doc in tx.find(ADOPTION_REQUESTS, {'pet_id': pet_id})
                        if doc['id'] != request_id]

            if status == AdoptionRequestStatus.APPROVED:
                if any(s.status == AdoptionRequestStatus.APPROVED for s in siblings):
                    raise InvalidState("Pet already has an approved adoption request")

                updated_doc = tx.update(ADOPTION_REQUESTS, request_id,
                                        {'status': status.value, 'decided_at': decided_at})
                tx.update(PETS, pet_id, {'status': PetStatus.ADOPTED.value})
                auto_rejected = [s.id for s in siblings if s.status == AdoptionRequestStatus.PENDING]
                for sibling_id in auto_rejected:
                    tx.update(ADOPTION_REQUESTS, sibling_id,
                              {'status': AdoptionRequestStatus.REJECTED.value, 'decided_at': decided_at})
                return AdoptionRequest.from_dict(updated_doc), auto_rejected

            updated_doc = tx.update(ADOPTION_REQUESTS, request_id,
                                    {'status': status.value, 'decided_at': decided_at})
            still_open = any(s.status in (AdoptionRequestStatus.PENDING, AdoptionRequestStatus.APPROVED)
                             for s in siblings)
            if not still_open:
                tx.update(PETS, pet_id, {'status': PetStatus.AVAILABLE.value})
            return AdoptionRequest.from_dict(updated_doc), []

        decided, auto_rejected = self.store.run_in_transaction(_decide_in_transaction)
        logging.info(f"Adoption request {request_id} {decided.status.value} (pet {decided.pet_id})")
        if auto_rejected:
            logging.info(f"Auto-rejected competing requests for pet {decided.pet_id}: {auto_rejected}")
        return decided

    @staticmethod
    def _parse_decision(target_status: Union[str, AdoptionRequestStatus]) -> AdoptionRequestStatus:
        try:
            status = AdoptionRequestStatus(target_status)
        except ValueError:
            raise InvalidArgument("Invalid status")
        if status not in DECISION_STATUSES:
            raise InvalidArgument("Invalid status")
        return status

    def get_request(self, request_id: int) -> AdoptionRequest:
        document = self.store.get(ADOPTION_REQUESTS, request_id)
        if not document:
            raise NotFound("Adoption request not found")
        return AdoptionRequest.from_dict(document)

    def list_for_user(self, user_id: int) -> List[Tuple[AdoptionRequest, Optional[Pet]]]:
        """The user's requests, each joined with its pet (None if the pet was deleted)."""
        results = []
        for document in self.store.find(ADOPTION_REQUESTS, {'user_id': user_id}):
            pet_doc = self.store.get(PETS, document['pet_id'])
            results.append((AdoptionRequest.from_dict(document), Pet.from_dict(pet_doc) if pet_doc else None))
        return results

    def list_for_pet(self, pet_id: int) -> List[Tuple[AdoptionRequest, Optional[User]]]:
        """All requests for a pet, each joined with the requesting user."""
        results = []
        for document in self.store.find(ADOPTION_REQUESTS, {'pet_id': pet_id}):
            user_doc = self.store.get(USERS, document['user_id'])
            results.append((AdoptionRequest.from_dict(document), User.from_dict(user_doc) if user_doc else None))
        return results
