"""Centralized logging configuration for the entity generator.

This module provides a configured logger instance that can be imported and used
throughout the application. ``setup_logger`` installs a console handler and a
rotating file handler behind a queue using settings from logging_config.json.

Usage:
    from entity_generator.logger import logger

    logger.info("This is an info message")
    logger.warning("This is a warning message")
    logger.debug("This is a debug message")
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
