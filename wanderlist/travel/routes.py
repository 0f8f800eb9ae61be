"""
Travel Routes

Catalog browsing, search and the want-to-go list.
"""

import logging

from flask import abort, render_template, request, redirect, url_for

from wanderlist.auth.decorators import login_required
from wanderlist.auth.session import current_username, flash_message, take_login_success
from wanderlist.catalog import (
    Category,
    destinations_in,
    find_by_name,
    find_by_slug,
    resolve_names,
    search,
)
from wanderlist.errors import AlreadyPresent, UnknownDestination
from wanderlist.storage import get_user_store
from wanderlist.travel import travel_bp

logger = logging.getLogger(__name__)


@travel_bp.route('/home')
@login_required
def home():
    """Landing page after login"""
    return render_template('travel/home.html',
                           username=current_username(),
                           login_success=take_login_success(),
                           categories=list(Category))


@travel_bp.route('/wanttogo')
@login_required
def want_to_go():
    """The user's want-to-go list resolved to catalog entries"""
    username = current_username()
    try:
        names = get_user_store().get_wishlist(username)
    except Exception:
        logger.exception('Error fetching want-to-go list for %s', username)
        return 'Internal Server Error', 500

    return render_template('travel/wanttogo.html',
                           destinations=resolve_names(names),
                           username=username)


@travel_bp.route('/searchresults')
@login_required
def search_results():
    """Search destinations by name"""
    search_query = request.args.get('search', '')
    return render_template('travel/searchresults.html',
                           search_results=search(search_query),
                           search_query=search_query,
                           username=current_username())


@travel_bp.route('/addToWantToGo', methods=['POST'])
@login_required
def add_to_want_to_go():
    """Append a destination to the user's list and return to its page"""
    username = current_username()
    name = request.form.get('destination', '')

    try:
        destination = find_by_name(name)
        if destination is None:
            raise UnknownDestination(name)
        get_user_store().append_to_wishlist(username, destination.name)
    except UnknownDestination:
        flash_message('That destination does not exist.', 'danger')
        return redirect(url_for('travel.home'))
    except AlreadyPresent:
        flash_message('This destination is already in your want-to-go list.', 'warning')
        return redirect(url_for('travel.browse', slug=destination.slug))
    except Exception:
        logger.exception('Error adding %s to want-to-go list of %s', name, username)
        flash_message('An error occurred while adding to your list.', 'danger')
        return redirect(url_for('travel.home'))

    logger.info('%s added %s to their list', username, destination.name)
    flash_message('Destination added to your want-to-go list!', 'success')
    return redirect(url_for('travel.browse', slug=destination.slug))


@travel_bp.route('/<slug>')
@login_required
def browse(slug):
    """Category page or destination page, depending on the slug"""
    category = Category.from_slug(slug)
    if category is not None:
        return render_template('travel/category.html',
                               category=category,
                               destinations=destinations_in(category),
                               username=current_username())

    destination = find_by_slug(slug)
    if destination is None:
        abort(404)

    return render_template('travel/destination.html',
                           destination=destination,
                           username=current_username())
