# app/services/seed.py
"""
Demo data for local development (SEED_DEMO_DATA=1).

Goes through the domain services so the records look exactly like ones
created over the API. Does nothing when the store already has users.
"""
import logging
from datetime import date
from typing import Dict, Any

from app.models.user import UserRole
from app.services.store import USERS

DEMO_USERS = [
    {
        'username': 'admin', 'password': 'admin123', 'email': 'admin@petrescuehub.com',
        'name': 'Admin User', 'role': UserRole.ADMIN.value, 'bio': 'System administrator',
    },
    {
        'username': 'user', 'password': 'user123', 'email': 'user@example.com',
        'name': 'Regular User', 'role': UserRole.ADOPTER.value, 'bio': 'Pet lover',
    },
]

DEMO_SHELTERS = [
    {
        'name': 'Happy Paws Rescue', 'address': '123 Main St', 'city': 'Springfield', 'state': 'IL',
        'zip': '62701', 'phone': '555-123-4567', 'email': 'info@happypawsrescue.org',
        'website': 'https://www.happypawsrescue.org',
        'description': 'We specialize in rescuing and rehoming dogs and cats of all ages.',
    },
    {
        'name': 'Second Chance Animal Shelter', 'address': '456 Oak Ave', 'city': 'Riverdale', 'state': 'NY',
        'zip': '10471', 'phone': '555-987-6543', 'email': 'contact@secondchanceshelter.org',
        'website': 'https://www.secondchanceshelter.org',
        'description': 'Our mission is to rescue abandoned and stray animals and find them loving forever homes.',
    },
]

# shelter_index points into DEMO_SHELTERS
DEMO_PETS = [
    {
        'name': 'Max', 'type': 'dog', 'breed': 'Golden Retriever', 'age': 3, 'gender': 'male',
        'size': 'large', 'color': 'golden', 'weight': '65 lbs',
        'description': 'Friendly and energetic dog who loves to play fetch.',
        'good_with_children': True, 'good_with_dogs': True, 'good_with_cats': False,
        'shelter_index': 0, 'images': ['https://images.unsplash.com/photo-1552053831-71594a27632d?w=500'],
    },
    {
        'name': 'Luna', 'type': 'cat', 'breed': 'Siamese', 'age': 2, 'gender': 'female',
        'size': 'medium', 'color': 'cream with brown points', 'weight': '9 lbs',
        'description': 'Elegant and vocal cat who enjoys being the center of attention.',
        'good_with_children': True, 'good_with_dogs': False, 'good_with_cats': True,
        'shelter_index': 1, 'images': ['https://images.unsplash.com/photo-1513360371669-4adf3dd7dff8?w=500'],
    },
    {
        'name': 'Charlie', 'type': 'dog', 'breed': 'Beagle', 'age': 5, 'gender': 'male',
        'size': 'medium', 'color': 'tricolor', 'weight': '25 lbs',
        'description': 'Sweet beagle with a gentle disposition. Loves long walks and cuddles.',
        'good_with_children': True, 'good_with_dogs': True, 'good_with_cats': True,
        'shelter_index': 0, 'images': ['https://images.unsplash.com/photo-1530126483408-aa533e55bdb2?w=500'],
    },
]

# reporter is a username from DEMO_USERS
DEMO_REPORTS = [
    {
        'type': 'lost', 'pet_type': 'dog', 'breed': 'Labrador Retriever', 'name': 'Buddy', 'gender': 'male',
        'description': 'Black lab with white spot on chest, wearing red collar with tags.',
        'location': 'Lincoln Park, Chicago', 'date': date(2025, 4, 10), 'reporter': 'user',
        'contact_name': 'John Smith', 'contact_email': 'john@example.com', 'contact_phone': '555-123-4567',
        'images': ['https://images.unsplash.com/photo-1543466835-00a7907e9de1?w=500'],
    },
    {
        'type': 'found', 'pet_type': 'cat', 'breed': 'Tabby', 'name': None, 'gender': 'unknown',
        'description': 'Orange tabby cat, no collar, very friendly and appears well-fed.',
        'location': 'Maple Street, Springfield', 'date': date(2025, 4, 15), 'reporter': 'admin',
        'contact_name': 'Jane Doe', 'contact_email': 'jane@example.com', 'contact_phone': '555-987-6543',
        'images': ['https://images.unsplash.com/photo-1596854407944-bf87f6fdd49e?w=500'],
    },
]


def seed_demo_data(services: Dict[str, Any]) -> bool:
    """Returns True when data was written."""
    if services['store'].find(USERS):
        logging.info("Store already has users; demo data skipped")
        return False

    users = {data['username']: services['auth'].register_user(data) for data in DEMO_USERS}
    shelters = [services['shelters'].create_shelter(data) for data in DEMO_SHELTERS]

    for data in DEMO_PETS:
        pet_data = {key: value for key, value in data.items() if key != 'shelter_index'}
        pet_data['shelter_id'] = shelters[data['shelter_index']].id
        services['pets'].create_pet(pet_data)

    for data in DEMO_REPORTS:
        report_data = {key: value for key, value in data.items() if key != 'reporter'}
        services['lost_found'].create_report(report_data, users[data['reporter']])

    logging.info(f"Demo data seeded: {len(users)} users, {len(shelters)} shelters, "
                 f"{len(DEMO_PETS)} pets, {len(DEMO_REPORTS)} lost/found reports")
    return True
