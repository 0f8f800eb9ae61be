import pytest

from wanderlist import create_app
from wanderlist.config import TestConfig


class MemoryTestConfig(TestConfig):
    STORAGE_BACKEND = 'memory'


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def memory_app():
    return create_app(MemoryTestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    with app.app_context():
        yield app.extensions['user_store']


def register(client, username='traveler', password='secret'):
    return client.post('/register', data={'username': username, 'password': password})


def login(client, username='traveler', password='secret'):
    return client.post('/login', data={'username': username, 'password': password})


@pytest.fixture()
def logged_in_client(client):
    register(client)
    login(client)
    return client
