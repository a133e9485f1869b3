# app/api/lost_found/test_routes.py
import pytest

from app.models.user import UserRole

REPORT = {
    'type': 'lost', 'pet_type': 'dog', 'name': 'Buddy', 'breed': 'Labrador Retriever', 'gender': 'male',
    'description': 'Black lab with white spot on chest, wearing red collar with tags.',
    'location': 'Lincoln Park, Chicago', 'date': '2025-04-10',
    'contact_name': 'John Smith', 'contact_email': 'john@example.com', 'contact_phone': '555-123-4567',
}


def test_anonymous_report(client):
    response = client.post('/api/lost-found-pets', json=REPORT)

    assert response.status_code == 201
    body = response.get_json()
    assert body['reporter_id'] is None
    assert body['status'] == 'open'
    assert body['date'] == '2025-04-10'


def test_logged_in_report_records_reporter(client, make_user, auth_headers):
    user = make_user()

    response = client.post('/api/lost-found-pets', json={**REPORT, 'reporter_id': 99},
                           headers=auth_headers(user))

    assert response.get_json()['reporter_id'] == user.id


@pytest.mark.parametrize("text", ["04/10/2025", "2025-04-10T08:30:00Z", "April 10, 2025"])
def test_date_text_is_parsed(client, text):
    response = client.post('/api/lost-found-pets', json={**REPORT, 'date': text})

    assert response.status_code == 201
    assert response.get_json()['date'] == '2025-04-10'


@pytest.mark.parametrize("overrides, field", [
    ({'date': 'someday'}, 'date'),
    ({'type': 'stolen'}, 'type'),
    ({'contact_email': 'john'}, 'contact_email'),
    ({'location': ''}, 'location'),
])
def test_report_validation(client, overrides, field):
    response = client.post('/api/lost-found-pets', json={**REPORT, **overrides})

    assert response.status_code == 400
    assert field in [e['field'] for e in response.get_json()['errors']]


def test_list_by_type(client):
    client.post('/api/lost-found-pets', json=REPORT)
    client.post('/api/lost-found-pets', json={**REPORT, 'type': 'found', 'name': None})

    assert len(client.get('/api/lost-found-pets').get_json()) == 2
    found = client.get('/api/lost-found-pets?type=found').get_json()
    assert [r['type'] for r in found] == ['found']
    assert client.get('/api/lost-found-pets?type=other').status_code == 400


def test_get_report(client):
    report_id = client.post('/api/lost-found-pets', json=REPORT).get_json()['id']

    assert client.get(f'/api/lost-found-pets/{report_id}').get_json()['name'] == 'Buddy'
    assert client.get('/api/lost-found-pets/50').status_code == 404


def test_reporter_can_close_report(client, make_user, auth_headers):
    headers = auth_headers(make_user())
    report_id = client.post('/api/lost-found-pets', json=REPORT, headers=headers).get_json()['id']

    response = client.put(f'/api/lost-found-pets/{report_id}', json={'status': 'closed'}, headers=headers)

    assert response.status_code == 200
    assert response.get_json()['status'] == 'closed'
    assert response.get_json()['date'] == '2025-04-10'


def test_other_users_cannot_edit(client, make_user, auth_headers, headers_for):
    report_id = client.post('/api/lost-found-pets', json=REPORT,
                            headers=auth_headers(make_user())).get_json()['id']

    response = client.put(f'/api/lost-found-pets/{report_id}', json={'status': 'closed'},
                          headers=headers_for(UserRole.SHELTER_STAFF))

    assert response.status_code == 403
    assert response.get_json()['message'] == 'Unauthorized to update this report'


def test_anonymous_report_is_admin_editable_only(client, headers_for):
    report_id = client.post('/api/lost-found-pets', json=REPORT).get_json()['id']

    assert client.put(f'/api/lost-found-pets/{report_id}', json={'status': 'closed'}).status_code == 401
    assert client.put(f'/api/lost-found-pets/{report_id}', json={'status': 'closed'},
                      headers=headers_for()).status_code == 403
    assert client.put(f'/api/lost-found-pets/{report_id}', json={'status': 'closed'},
                      headers=headers_for(UserRole.ADMIN)).status_code == 200


def test_update_missing_report(client, headers_for):
    response = client.put('/api/lost-found-pets/8', json={'status': 'closed'}, headers=headers_for(UserRole.ADMIN))

    assert response.status_code == 404


@pytest.mark.parametrize("text", ["5", "March", "2019", "12:30", "Monday"])
def test_incomplete_date_text_is_rejected(client, store, text):
    response = client.post('/api/lost-found-pets', json={**REPORT, 'date': text})

    assert response.status_code == 400
    assert 'date' in [e['field'] for e in response.get_json()['errors']]
    assert store.find('lost_found_pets') == []
