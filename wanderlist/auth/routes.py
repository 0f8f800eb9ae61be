"""
Auth Routes

Registration, login and logout.
"""

import logging

from flask import current_app, render_template, request, redirect, url_for

from wanderlist.auth import auth_bp
from wanderlist.auth.session import current_username, end_session, flash_message, start_session
from wanderlist.auth.validators import validate_login, validate_registration
from wanderlist.errors import DuplicateUser, ValidationError
from wanderlist.storage import get_user_store

logger = logging.getLogger(__name__)


@auth_bp.route('/')
def index():
    """Redirect to home if logged in, otherwise to login"""
    if current_username():
        return redirect(url_for('travel.home'))
    return redirect(url_for('auth.login'))


@auth_bp.route('/login', methods=['GET'])
def login():
    """Login form"""
    return render_template('auth/login.html')


@auth_bp.route('/registration', methods=['GET'])
def registration():
    """Registration form"""
    return render_template('auth/registration.html')


@auth_bp.route('/register', methods=['POST'])
def register():
    """Create a new user from the registration form"""
    username = request.form.get('username', '').strip()
    password = request.form.get('password', '')

    try:
        validate_registration(
            username, password,
            min_username=current_app.config['MIN_USERNAME_LENGTH'],
            min_password=current_app.config['MIN_PASSWORD_LENGTH'],
        )
        get_user_store().create_user(username, password)
    except ValidationError as e:
        flash_message(str(e), 'danger')
        return redirect(url_for('auth.registration'))
    except DuplicateUser:
        flash_message('Username already taken. Please choose a different username.', 'danger')
        return redirect(url_for('auth.registration'))
    except Exception:
        logger.exception('Registration error for %s', username)
        flash_message('An error occurred during registration. Please try again.', 'danger')
        return redirect(url_for('auth.registration'))

    logger.info('New user registered: %s', username)
    flash_message('Registration successful! You can now log in.', 'success')
    return redirect(url_for('auth.login'))


@auth_bp.route('/login', methods=['POST'])
def login_submit():
    """Check credentials and start an authenticated session"""
    username = request.form.get('username', '').strip()
    password = request.form.get('password', '')

    try:
        validate_login(username, password)
        user = get_user_store().find_user_by_credentials(username, password)
    except ValidationError as e:
        flash_message(str(e), 'danger')
        return redirect(url_for('auth.login'))
    except Exception:
        logger.exception('Login error for %s', username)
        flash_message('An error occurred during login. Please try again.', 'danger')
        return redirect(url_for('auth.login'))

    if user is None:
        flash_message('Invalid username or password. Please try again.', 'danger')
        return redirect(url_for('auth.login'))

    start_session(user)
    logger.info('User logged in: %s', username)
    return redirect(url_for('travel.home'))


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """End the session"""
    username = current_username()
    end_session()
    if username:
        logger.info('User logged out: %s', username)
    return redirect(url_for('auth.login'))
