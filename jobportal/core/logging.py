"""Logging configuration for the jobportal package.

This module provides a standardized logging configuration for the entire
jobportal package so every router and feature logs with the same format.

Example:
    ```python
    from jobportal.core.logging import setup_logging

    logger = setup_logging('job_listing')
    logger.info('Fetched 3 jobs')
    logger.warning('Backend unavailable, using sample data')
    ```
"""
import logging
import os


def setup_logging(logger_name: str) -> logging.Logger:
    """Set up standardized logging configuration.

    Creates and configures a logger with consistent formatting and behavior.
    If the logger already has handlers, it will not be reconfigured.

    Args:
        logger_name: The name for the logger, typically the feature name

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        level = getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), logging.INFO)
        logger.setLevel(level)

        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(handler)

    return logger

# Make sure the root logger has a handler to avoid "no handler found" warnings
logging.getLogger().addHandler(logging.NullHandler())
