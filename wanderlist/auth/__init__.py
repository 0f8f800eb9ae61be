"""
Auth Blueprint

Registration, login and logout for site users.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from wanderlist.auth import routes  # noqa: E402, F401
