# app/core/test_security.py
import pytest
from flask import jsonify

from app.core.exceptions import Unauthorized, Forbidden
from app.core.security import check_access, role_required, login_required, hash_password, verify_password, STAFF_ROLES
from app.models.user import User, UserRole


def _user(role):
    return User(id=1, username='u', email='u@example.com', password_hash='x', name='U', role=role)


def test_check_access_without_user():
    with pytest.raises(Unauthorized):
        check_access(None)
    with pytest.raises(Unauthorized):
        check_access(None, [UserRole.ADMIN])


@pytest.mark.parametrize("role", list(UserRole))
def test_check_access_authenticated_only(role):
    check_access(_user(role))


def test_check_access_with_roles():
    check_access(_user(UserRole.ADMIN), STAFF_ROLES)
    check_access(_user(UserRole.SHELTER_STAFF), STAFF_ROLES)

    for role in (UserRole.ADOPTER, UserRole.RESCUER, UserRole.VETERINARIAN):
        with pytest.raises(Forbidden):
            check_access(_user(role), STAFF_ROLES)


def test_password_hashing():
    password_hash = hash_password('secret123')

    assert password_hash != 'secret123'
    assert verify_password(password_hash, 'secret123')
    assert not verify_password(password_hash, 'wrong')


@pytest.fixture
def guarded_app(app):
    @app.route('/_guarded/login')
    @login_required
    def only_logged_in():
        return jsonify(ok=True)

    @app.route('/_guarded/admin')
    @role_required(UserRole.ADMIN)
    def only_admin():
        return jsonify(ok=True)

    return app


def test_decorators(guarded_app, headers_for):
    client = guarded_app.test_client()
    adopter = headers_for(UserRole.ADOPTER)
    admin = headers_for(UserRole.ADMIN)

    assert client.get('/_guarded/login').status_code == 401
    assert client.get('/_guarded/login', headers=adopter).status_code == 200
    assert client.get('/_guarded/admin').status_code == 401
    assert client.get('/_guarded/admin', headers=adopter).status_code == 403
    assert client.get('/_guarded/admin', headers=admin).status_code == 200


def test_malformed_token_is_rejected(guarded_app):
    client = guarded_app.test_client()

    response = client.get('/_guarded/login', headers={'Authorization': 'Bearer not-a-jwt'})

    assert response.status_code == 401
    assert response.get_json()['error_code'] == 'UNAUTHORIZED'


def test_token_of_deleted_user_is_rejected(guarded_app, make_user, auth_headers, store):
    user = make_user()
    headers = auth_headers(user)
    store.delete('users', user.id)

    response = guarded_app.test_client().get('/_guarded/login', headers=headers)

    assert response.status_code == 401
