"""
Wanderlist Travel Site
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the wanderlist package.
"""

import logging
import sys

from wanderlist import create_app
from wanderlist.config import Config
from wanderlist.log import configure_logging

logger = logging.getLogger('wanderlist')


def main():
    configure_logging(Config.LOG_LEVEL)
    try:
        app = create_app()
    except Exception:
        logger.exception('Could not start the application')
        sys.exit(1)

    store = app.extensions['user_store']
    logger.info('Travel site running at http://localhost:%s (storage: %s)',
                app.config['PORT'], store.backend_name)
    app.run(host=app.config['HOST'], port=app.config['PORT'])


if __name__ == '__main__':
    main()
