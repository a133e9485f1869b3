# app/api/users/test_routes.py
from app.models.user import UserRole


def test_public_profile_hides_contact_details(client, make_user):
    user = make_user(phone='555-0100', bio='Dog person')

    response = client.get(f'/api/users/{user.id}')

    assert response.status_code == 200
    body = response.get_json()
    assert body['bio'] == 'Dog person'
    assert 'email' not in body and 'phone' not in body and 'password_hash' not in body


def test_profile_not_found_and_bad_id(client):
    assert client.get('/api/users/123').status_code == 404
    assert client.get('/api/users/abc').status_code == 400


def test_update_own_profile_ignores_role(client, make_user, auth_headers):
    user = make_user()

    response = client.patch('/api/users/me', json={'bio': 'Cat person', 'role': 'admin'},
                            headers=auth_headers(user))

    assert response.status_code == 200
    body = response.get_json()
    assert body['bio'] == 'Cat person'
    assert body['role'] == 'adopter'


def test_update_profile_needs_fields(client, headers_for):
    response = client.patch('/api/users/me', json={}, headers=headers_for())

    assert response.status_code == 400
    assert response.get_json()['error_code'] == 'INVALID_ARGUMENT'


def test_admin_changes_role(client, make_user, headers_for):
    user = make_user()

    response = client.put(f'/api/users/{user.id}/role', json={'role': 'shelter_staff'},
                          headers=headers_for(UserRole.ADMIN))

    assert response.status_code == 200
    assert response.get_json()['role'] == 'shelter_staff'


def test_role_change_rules(client, make_user, headers_for):
    user = make_user()
    admin = headers_for(UserRole.ADMIN)

    assert client.put(f'/api/users/{user.id}/role', json={'role': 'admin'},
                      headers=headers_for(UserRole.SHELTER_STAFF)).status_code == 403
    assert client.put(f'/api/users/{user.id}/role', json={'role': 'overlord'}, headers=admin).status_code == 400
    assert client.put('/api/users/999/role', json={'role': 'rescuer'}, headers=admin).status_code == 404
