"""
Session Manager

Thin layer over Flask's signed-cookie session and Flask-Login.
A session holding a ``username`` is authenticated; anything else is
anonymous.
"""

from flask import flash, session
from flask_login import login_user, logout_user

USERNAME_KEY = 'username'
LOGIN_SUCCESS_KEY = 'login_success'


def start_session(user):
    """Anonymous -> Authenticated.

    Drops whatever the anonymous session carried, including unread flash
    messages, so the new session starts clean.
    """
    session.clear()
    session.permanent = True
    login_user(user)
    session[USERNAME_KEY] = user.username
    session[LOGIN_SUCCESS_KEY] = True


def end_session():
    """Authenticated -> Anonymous."""
    logout_user()
    session.clear()


def current_username():
    return session.get(USERNAME_KEY)


def is_authenticated(session_data):
    return bool(session_data.get(USERNAME_KEY))


def take_login_success():
    """Read and clear the one-shot login-success flag."""
    return bool(session.pop(LOGIN_SUCCESS_KEY, False))


def flash_message(message, category='info'):
    """Queue a one-shot message for the next rendered page.

    Templates consume it with ``get_flashed_messages``, which clears it.
    """
    flash(message, category)
