# app/api/adoption_requests/test_routes.py
import pytest

from app.models.user import UserRole


@pytest.fixture
def staff_headers(headers_for):
    return headers_for(UserRole.SHELTER_STAFF)


def _submit(client, headers, pet_id, message=None):
    body = {'pet_id': pet_id}
    if message is not None:
        body['message'] = message
    return client.post('/api/adoption-requests', json=body, headers=headers)


def test_submit_requires_login(client, make_pet):
    response = _submit(client, {}, make_pet().id)

    assert response.status_code == 401
    assert response.get_json()['error_code'] == 'UNAUTHORIZED'


def test_submit_uses_token_user(client, make_pet, make_user, auth_headers):
    adopter = make_user()
    pet = make_pet()

    response = client.post('/api/adoption-requests',
                           json={'pet_id': pet.id, 'user_id': 999, 'message': 'Please!'},
                           headers=auth_headers(adopter))

    assert response.status_code == 201
    body = response.get_json()
    assert body['user_id'] == adopter.id
    assert body['status'] == 'pending'
    assert body['message'] == 'Please!'
    assert client.get(f'/api/pets/{pet.id}').get_json()['status'] == 'pending'


@pytest.mark.parametrize("payload", [{}, {'pet_id': 'abc'}, {'pet_id': '1'}, {'pet_id': 0}, []])
def test_submit_validation(client, headers_for, payload):
    response = client.post('/api/adoption-requests', json=payload, headers=headers_for())

    assert response.status_code == 400
    body = response.get_json()
    assert body['error_code'] == 'VALIDATION_ERROR'
    assert body['errors']


def test_submit_missing_pet(client, headers_for):
    response = _submit(client, headers_for(), 999)

    assert response.status_code == 404
    assert response.get_json()['message'] == 'Pet not found'


def test_submit_unavailable_pet(client, headers_for, make_pet):
    pet = make_pet()
    assert _submit(client, headers_for(), pet.id).status_code == 201

    response = _submit(client, headers_for(), pet.id)

    assert response.status_code == 400
    assert response.get_json() == {'error_code': 'INVALID_STATE', 'message': 'Pet is not available for adoption'}


def test_decide_requires_staff(client, headers_for, make_pet):
    adopter_headers = headers_for()
    request_id = _submit(client, adopter_headers, make_pet().id).get_json()['id']

    response = client.put(f'/api/adoption-requests/{request_id}', json={'status': 'approved'},
                          headers=adopter_headers)

    assert response.status_code == 403
    assert response.get_json()['error_code'] == 'FORBIDDEN'


@pytest.mark.parametrize("role", [UserRole.SHELTER_STAFF, UserRole.ADMIN])
def test_staff_approves(client, headers_for, make_pet, role):
    pet = make_pet()
    request_id = _submit(client, headers_for(), pet.id).get_json()['id']

    response = client.put(f'/api/adoption-requests/{request_id}', json={'status': 'approved'},
                          headers=headers_for(role))

    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'approved'
    assert body['decided_at'] is not None
    assert client.get(f'/api/pets/{pet.id}').get_json()['status'] == 'adopted'


def test_reject_reopens_pet(client, headers_for, staff_headers, make_pet):
    pet = make_pet()
    request_id = _submit(client, headers_for(), pet.id).get_json()['id']

    response = client.put(f'/api/adoption-requests/{request_id}', json={'status': 'rejected'},
                          headers=staff_headers)

    assert response.status_code == 200
    assert client.get(f'/api/pets/{pet.id}').get_json()['status'] == 'available'


@pytest.mark.parametrize("payload", [{'status': 'pending'}, {'status': 'maybe'}, {}])
def test_decide_invalid_status(client, headers_for, staff_headers, make_pet, payload):
    request_id = _submit(client, headers_for(), make_pet().id).get_json()['id']

    response = client.put(f'/api/adoption-requests/{request_id}', json=payload, headers=staff_headers)

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Invalid status'


def test_decide_twice(client, headers_for, staff_headers, make_pet):
    request_id = _submit(client, headers_for(), make_pet().id).get_json()['id']
    client.put(f'/api/adoption-requests/{request_id}', json={'status': 'rejected'}, headers=staff_headers)

    response = client.put(f'/api/adoption-requests/{request_id}', json={'status': 'approved'},
                          headers=staff_headers)

    assert response.status_code == 400
    assert response.get_json()['error_code'] == 'INVALID_STATE'


def test_decide_missing_request(client, staff_headers):
    response = client.put('/api/adoption-requests/77', json={'status': 'approved'}, headers=staff_headers)

    assert response.status_code == 404
    assert response.get_json()['message'] == 'Adoption request not found'


def test_decide_bad_id(client, staff_headers):
    response = client.put('/api/adoption-requests/abc', json={'status': 'approved'}, headers=staff_headers)

    assert response.status_code == 400
    assert response.get_json()['error_code'] == 'INVALID_ARGUMENT'


def test_my_requests_include_pet(client, make_user, auth_headers, headers_for, make_pet):
    adopter = make_user()
    max_ = make_pet('Max')
    _submit(client, auth_headers(adopter), max_.id)
    _submit(client, headers_for(), make_pet('Luna').id)

    response = client.get('/api/adoption-requests/user', headers=auth_headers(adopter))

    assert response.status_code == 200
    body = response.get_json()
    assert len(body) == 1
    assert body[0]['pet']['name'] == 'Max'
    assert body[0]['pet']['status'] == 'pending'


def test_pet_requests_include_user_without_password(client, make_user, auth_headers, staff_headers, make_pet):
    adopter = make_user(name="Jamie Doe")
    pet = make_pet()
    _submit(client, auth_headers(adopter), pet.id, "We love dogs")

    response = client.get(f'/api/adoption-requests/pet/{pet.id}', headers=staff_headers)

    assert response.status_code == 200
    body = response.get_json()
    assert body[0]['user']['name'] == 'Jamie Doe'
    assert body[0]['message'] == 'We love dogs'
    assert 'password' not in body[0]['user']
    assert 'password_hash' not in body[0]['user']


def test_pet_requests_bad_id(client, staff_headers):
    response = client.get('/api/adoption-requests/pet/xyz', headers=staff_headers)

    assert response.status_code == 400


def test_pet_requests_forbidden_for_adopters(client, headers_for, make_pet):
    response = client.get(f'/api/adoption-requests/pet/{make_pet().id}', headers=headers_for())

    assert response.status_code == 403
