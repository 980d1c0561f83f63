"""
Logging configuration for the dashboard and the terminal watcher.
"""

import logging
import sys


def setup_logging(component_name, level=logging.INFO, format_string=None):
    """
    Configure root logging for a Mission Control process.

    Args:
        component_name: Process identifier (e.g., 'dashboard', 'watch')
        level: Logging level name or number
        format_string: Custom format string (default provided)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if format_string is None:
        format_string = f'[%(asctime)s] [{component_name.upper()}] %(levelname)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logger = logging.getLogger(component_name)
    logger.info("%s logging initialized (level=%s)",
                component_name.upper(), logging.getLevelName(level))
    return logger
