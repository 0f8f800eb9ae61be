"""
Travel Blueprint

Pages that require a logged-in user.
"""

from flask import Blueprint

travel_bp = Blueprint('travel', __name__)

from wanderlist.travel import routes  # noqa: E402, F401
