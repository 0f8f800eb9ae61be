"""
Flask Extensions
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance, used by the SQL user store
db = SQLAlchemy()

# Login manager; users are loaded from the active user store
login_manager = LoginManager()
