# app/api/donations/services.py
import logging
from typing import Dict, Any, List, Optional

from app.core.exceptions import NotFound
from app.models.donation import Donation
from app.models.user import User
from app.services.store import Store, StoreOperations, DONATIONS, SHELTERS
from app.utils.datetime_utils import DateTimeUtils

class DonationService:
    def __init__(self, store: Store):
        self.store = store

    def create_donation(self, donation_data: Dict[str, Any], donor: Optional[User] = None) -> Donation:
        shelter_id = donation_data.get('shelter_id')

        def _create_in_transaction(tx: StoreOperations) -> Dict[str, Any]:
            if shelter_id is not None and not tx.get(SHELTERS, shelter_id):
                raise NotFound("Shelter not found")
            return tx.create(DONATIONS, {
                'amount': donation_data['amount'],
                'shelter_id': shelter_id,
                'user_id': donor.id if donor else None,
                'message': donation_data.get('message'),
                'created_at': DateTimeUtils.now(),
            })

        donation = Donation.from_dict(self.store.run_in_transaction(_create_in_transaction))
        logging.info(f"Donation {donation.id} of {donation.amount} received (shelter: {shelter_id}, user: {donation.user_id})")
        return donation

    def list_for_user(self, user_id: int) -> List[Donation]:
        return [Donation.from_dict(doc) for doc in self.store.find(DONATIONS, {'user_id': user_id})]

    def list_for_shelter(self, shelter_id: int) -> List[Donation]:
        return [Donation.from_dict(doc) for doc in self.store.find(DONATIONS, {'shelter_id': shelter_id})]
