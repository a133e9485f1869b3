# app/api/donations/test_routes.py
import pytest

from app.models.user import UserRole


def test_guest_donation(client, shelter):
    response = client.post('/api/donations', json={'amount': 2500, 'shelter_id': shelter.id})

    assert response.status_code == 201
    body = response.get_json()
    assert body['amount'] == 2500
    assert body['user_id'] is None


def test_donation_without_shelter(client):
    response = client.post('/api/donations', json={'amount': 1000, 'message': 'For the dogs'})

    assert response.status_code == 201
    assert response.get_json()['shelter_id'] is None


@pytest.mark.parametrize("payload", [{}, {'amount': 0}, {'amount': -5}, {'amount': '10'}, {'amount': 9.5}])
def test_donation_validation(client, payload):
    response = client.post('/api/donations', json=payload)

    assert response.status_code == 400


def test_donation_to_unknown_shelter(client):
    response = client.post('/api/donations', json={'amount': 100, 'shelter_id': 77})

    assert response.status_code == 404
    assert response.get_json()['message'] == 'Shelter not found'


def test_my_donations(client, shelter, make_user, auth_headers):
    donor = make_user()
    client.post('/api/donations', json={'amount': 500, 'shelter_id': shelter.id}, headers=auth_headers(donor))
    client.post('/api/donations', json={'amount': 700, 'shelter_id': shelter.id})

    response = client.get('/api/donations/user', headers=auth_headers(donor))

    assert [d['amount'] for d in response.get_json()] == [500]
    assert client.get('/api/donations/user').status_code == 401


def test_shelter_donations_for_staff(client, shelter, headers_for):
    client.post('/api/donations', json={'amount': 500, 'shelter_id': shelter.id})
    client.post('/api/donations', json={'amount': 300})

    response = client.get(f'/api/donations/shelter/{shelter.id}', headers=headers_for(UserRole.SHELTER_STAFF))

    assert response.status_code == 200
    assert [d['amount'] for d in response.get_json()] == [500]
    assert client.get(f'/api/donations/shelter/{shelter.id}', headers=headers_for()).status_code == 403
    assert client.get('/api/donations/shelter/x', headers=headers_for(UserRole.ADMIN)).status_code == 400
