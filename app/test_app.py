# app/test_app.py
import pytest

from app import create_app
from app.services.store import USERS, SHELTERS, PETS, LOST_FOUND_PETS


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}


def test_unknown_route_returns_json(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == 404
    assert response.get_json()['error_code'] == 'NOT_FOUND'


def test_unexpected_errors_are_hidden(app):
    @app.route('/_boom')
    def boom():
        raise RuntimeError("database password is hunter2")

    response = app.test_client().get('/_boom')

    assert response.status_code == 500
    body = response.get_json()
    assert body['error_code'] == 'INTERNAL_SERVER_ERROR'
    assert 'hunter2' not in body['message']


def test_testing_config_starts_empty(store):
    assert store.find(USERS) == []
    assert store.find(PETS) == []


def test_demo_data(monkeypatch):
    monkeypatch.setattr('app.core.config.TestingConfig.SEED_DEMO_DATA', True)
    app = create_app('testing')
    store = app.services['store']

    assert [u['username'] for u in store.find(USERS)] == ['admin', 'user']
    assert len(store.find(SHELTERS)) == 2
    assert [p['name'] for p in store.find(PETS)] == ['Max', 'Luna', 'Charlie']
    assert all(p['status'] == 'available' for p in store.find(PETS))
    assert len(store.find(LOST_FOUND_PETS)) == 2

    login = app.test_client().post('/api/auth/login', json={'username': 'admin', 'password': 'admin123'})
    assert login.get_json()['user']['role'] == 'admin'


def test_production_requires_jwt_secret(monkeypatch):
    monkeypatch.setattr('app.core.config.ProductionConfig.JWT_SECRET_KEY', None)

    with pytest.raises(ValueError, match="JWT_SECRET_KEY"):
        create_app('production')


def test_production_starts_with_secret(monkeypatch):
    monkeypatch.setattr('app.core.config.ProductionConfig.JWT_SECRET_KEY', 'production-secret-with-enough-length-for-hs256')
    monkeypatch.setattr('app.core.config.ProductionConfig.STORAGE_BACKEND', 'memory')
    monkeypatch.setattr('app.core.config.ProductionConfig.SEED_DEMO_DATA', False)

    app = create_app('production')

    assert app.test_client().get('/health').status_code == 200
