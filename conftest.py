# conftest.py
"""
Shared pytest fixtures.

Every test gets a fresh app on an empty in-memory store (TestingConfig).
"""
import itertools

import pytest
from flask_jwt_extended import create_access_token

from app import create_app
from app.models.user import UserRole

_counter = itertools.count(1)


@pytest.fixture
def app():
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.services['store']


@pytest.fixture
def services(app):
    return app.services


@pytest.fixture
def make_user(services):
    """make_user(role=UserRole.ADOPTER, **fields) -> User, registered through AuthService."""
    def _make_user(role=UserRole.ADOPTER, **fields):
        n = next(_counter)
        data = {
            'username': f"user{n}",
            'email': f"user{n}@example.com",
            'password': 'secret123',
            'name': f"Test User {n}",
            'role': role.value,
        }
        data.update(fields)
        return services['auth'].register_user(data)
    return _make_user


@pytest.fixture
def auth_headers(app):
    """auth_headers(user) -> Authorization header with a fresh access token."""
    def _auth_headers(user):
        with app.app_context():
            token = create_access_token(identity=str(user.id))
        return {'Authorization': f"Bearer {token}"}
    return _auth_headers


@pytest.fixture
def headers_for(make_user, auth_headers):
    """headers_for(role) -> headers of a newly created user with that role."""
    def _headers_for(role=UserRole.ADOPTER):
        return auth_headers(make_user(role))
    return _headers_for


@pytest.fixture
def shelter(services):
    return services['shelters'].create_shelter({
        'name': 'Happy Paws Rescue', 'address': '123 Main St', 'city': 'Springfield', 'state': 'IL',
        'zip': '62701', 'phone': '555-123-4567', 'email': 'info@happypawsrescue.org',
    })


@pytest.fixture
def make_pet(services, shelter):
    """make_pet(name='Max', **fields) -> available Pet in the default shelter."""
    def _make_pet(name='Max', **fields):
        data = {
            'name': name, 'type': 'dog', 'breed': 'Golden Retriever', 'age': 3, 'gender': 'male',
            'size': 'large', 'color': 'golden', 'weight': '65 lbs',
            'description': 'Friendly and energetic dog who loves to play fetch.',
            'shelter_id': shelter.id, 'images': [],
        }
        data.update(fields)
        return services['pets'].create_pet(data)
    return _make_pet
