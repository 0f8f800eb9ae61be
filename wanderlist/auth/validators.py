"""
Credential Validation
"""

from wanderlist.errors import ValidationError


def validate_registration(username, password, min_username=3, min_password=4):
    """Raise ValidationError with a user-facing message if the form is invalid."""
    if not username or not password:
        raise ValidationError('Username and password cannot be empty.')

    if len(username) < min_username:
        raise ValidationError(f'Username must be at least {min_username} characters long.')

    if len(password) < min_password:
        raise ValidationError(f'Password must be at least {min_password} characters long.')


def validate_login(username, password):
    if not username or not password:
        raise ValidationError('Please enter both username and password.')
