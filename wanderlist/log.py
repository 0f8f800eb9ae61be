"""
Logging configuration.
"""

import logging
import sys


def configure_logging(level='INFO'):
    """Send application logs to stdout with a timestamp and logger name."""
    logging.basicConfig(
        format='[%(asctime)s] %(levelname)s %(name)s: %(message)s',
        datefmt='%H:%M:%S',
        level=getattr(logging, str(level).upper(), logging.INFO),
        handlers=[logging.StreamHandler(sys.stdout)],
    )
