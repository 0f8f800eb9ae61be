from datetime import timedelta

import pytest
from flask import session
from flask_login import current_user

from conftest import login, register
from wanderlist.auth.decorators import require_login
from wanderlist.auth.validators import validate_registration
from wanderlist.errors import ValidationError


def test_root_redirects_to_login(client):
    r = client.get('/')
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/login')


def test_login_and_registration_pages_are_public(client):
    assert client.get('/login').status_code == 200
    assert client.get('/registration').status_code == 200


def test_register_success_redirects_to_login_with_message(client, store):
    r = register(client)
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/login')
    assert store.find_user_by_name('traveler') is not None

    body = client.get('/login').get_data(as_text=True)
    assert 'Registration successful! You can now log in.' in body


def test_short_username_is_rejected_without_storing(client, store):
    r = register(client, username='ab', password='secret')
    assert r.headers['Location'].endswith('/registration')
    assert store.find_user_by_name('ab') is None

    body = client.get('/registration').get_data(as_text=True)
    assert 'Username must be at least 3 characters long.' in body


def test_short_password_is_rejected(client, store):
    r = register(client, username='traveler', password='abc')
    assert r.headers['Location'].endswith('/registration')
    assert store.find_user_by_name('traveler') is None
    assert 'Password must be at least 4 characters long.' in client.get('/registration').get_data(as_text=True)


def test_empty_credentials_are_rejected(client):
    register(client, username='', password='')
    assert 'Username and password cannot be empty.' in client.get('/registration').get_data(as_text=True)


def test_duplicate_registration_fails_second_time(client):
    register(client)
    client.get('/login')  # consume the success message
    r = register(client, password='another')
    assert r.headers['Location'].endswith('/registration')
    body = client.get('/registration').get_data(as_text=True)
    assert 'Username already taken. Please choose a different username.' in body


def test_flash_message_is_shown_once(client):
    register(client, username='ab')
    assert 'at least 3 characters' in client.get('/registration').get_data(as_text=True)
    assert 'at least 3 characters' not in client.get('/registration').get_data(as_text=True)


def test_login_authenticates_session(client, app):
    register(client)
    with client.session_transaction() as sess:
        assert 'username' not in sess

    r = login(client)
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/home')
    with client.session_transaction() as sess:
        assert sess['username'] == 'traveler'
        assert sess.permanent
    assert app.permanent_session_lifetime == timedelta(hours=24)


def test_wrong_password_leaves_session_anonymous(client):
    register(client)
    r = login(client, password='wrong')
    assert r.headers['Location'].endswith('/login')
    with client.session_transaction() as sess:
        assert 'username' not in sess
    assert 'Invalid username or password. Please try again.' in client.get('/login').get_data(as_text=True)


def test_login_with_missing_fields(client):
    r = login(client, username='traveler', password='')
    assert r.headers['Location'].endswith('/login')
    assert 'Please enter both username and password.' in client.get('/login').get_data(as_text=True)


def test_login_success_banner_is_one_shot(client):
    register(client)
    login(client)
    assert 'Login successful!' in client.get('/home').get_data(as_text=True)
    assert 'Login successful!' not in client.get('/home').get_data(as_text=True)


def test_logout_destroys_session(client):
    register(client)
    login(client)
    assert client.get('/home').status_code == 200

    r = client.post('/logout')
    assert r.headers['Location'].endswith('/login')
    with client.session_transaction() as sess:
        assert 'username' not in sess

    r = client.get('/home')
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/login')


def test_root_redirects_home_when_logged_in(logged_in_client):
    r = logged_in_client.get('/')
    assert r.headers['Location'].endswith('/home')


def test_registration_errors_are_reported_generically(client, app, monkeypatch):
    def broken_create_user(username, password):
        raise RuntimeError('disk full')

    monkeypatch.setattr(app.extensions['user_store'], 'create_user', broken_create_user)
    r = register(client)
    assert r.headers['Location'].endswith('/registration')
    assert 'An error occurred during registration.' in client.get('/registration').get_data(as_text=True)


def test_require_login_is_a_function_of_session(app):
    with app.test_request_context('/home'):
        assert require_login({'username': 'traveler'}) is None

        denied = require_login({})
        assert denied.status_code == 302
        assert denied.headers['Location'].endswith('/login')

        assert require_login({'username': ''}) is not None


def test_login_manager_loads_user_from_store(client, app):
    register(client)
    login(client)
    with client:
        client.get('/home')
        assert current_user.is_authenticated
        assert current_user.username == 'traveler'
        assert session['username'] == 'traveler'


@pytest.mark.parametrize('username,password,message', [
    ('', 'secret', 'cannot be empty'),
    ('abc', '', 'cannot be empty'),
    ('ab', 'secret', 'Username must be at least 3'),
    ('abc', 'abc', 'Password must be at least 4'),
])
def test_validate_registration_messages(username, password, message):
    with pytest.raises(ValidationError, match=message):
        validate_registration(username, password)


def test_validate_registration_accepts_minimum_lengths():
    validate_registration('abc', 'abcd')
