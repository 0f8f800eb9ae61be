"""
Auth Gate

Guards views that need a logged-in user.
"""

from functools import wraps
from flask import session, redirect, url_for

from wanderlist.auth.session import is_authenticated


def require_login(session_data):
    """Return None when the session is authenticated, else a redirect to login.

    Depends only on the given session mapping.
    """
    if is_authenticated(session_data):
        return None
    return redirect(url_for('auth.login'))


def login_required(f):
    """Decorator to ensure the request comes from a logged-in user."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        denied = require_login(session)
        if denied is not None:
            return denied
        return f(*args, **kwargs)
    return wrapper
