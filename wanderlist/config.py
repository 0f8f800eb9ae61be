"""
Configuration settings for the Wanderlist travel site
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'travel-website-secret-key'

    # Sessions expire one day after login
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True

    # Storage backend: sql, mongodb or memory
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND') or 'sql'

    # SQL database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'wanderlist.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # MongoDB configuration
    MONGO_URI = os.environ.get('MONGO_URI') or 'mongodb://localhost:27017'
    MONGO_DATABASE = 'myDB'
    MONGO_COLLECTION = 'myCollection'
    MONGO_TIMEOUT_MS = int(os.environ.get('MONGO_TIMEOUT_MS') or 2000)

    # Registration rules
    MIN_USERNAME_LENGTH = 3
    MIN_PASSWORD_LENGTH = 4

    # Server
    HOST = os.environ.get('HOST') or '0.0.0.0'
    PORT = 3000
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    STORAGE_BACKEND = 'sql'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    MONGO_TIMEOUT_MS = 100
