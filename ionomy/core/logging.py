"""
Unified Logging Configuration

This module sets up the logging used across the client library.
All modules should obtain their logger through get_logger() instead of
calling print().

Usage:
    from ionomy.core.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("Detailed debugging information")

Log Levels (from most to least verbose):
    DEBUG    - Request/response tracing (e.g., "API Request: ionomy public/markets")
    INFO     - General informational messages (e.g., "Configuration validated")
    WARNING  - Potential issues (e.g., "Only one of key/secret configured")
    ERROR    - Failures reported to the user (CLI only)

Configuration:
    Log level is controlled by the IONOMY_LOG_LEVEL setting (see core.config).
    The library itself never logs secrets or request signatures.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "ionomy"


def setup_logging(
    log_level: str = "INFO",
    log_format: Optional[str] = None,
    include_timestamp: bool = True,
    include_module: bool = True
) -> logging.Logger:
    """
    Configure and return the library logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string (uses default if None)
        include_timestamp: Include timestamp in log messages
        include_module: Include logger name in log messages

    Returns:
        logging.Logger: Configured "ionomy" logger

    Example:
        >>> logger = setup_logging(log_level="DEBUG")
        >>> logger.info("Client ready")
        2024-01-01 12:00:00 [INFO] ionomy: Client ready
    """
    if log_format is None:
        format_parts = []

        if include_timestamp:
            format_parts.append("%(asctime)s")

        format_parts.append("[%(levelname)s]")

        if include_module:
            format_parts.append("%(name)s:")

        format_parts.append("%(message)s")

        log_format = " ".join(format_parts)

    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    return logger


# Library logger. Handlers are only attached by setup_logging(), which
# applications (and the CLI) call explicitly.
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger of the library logger.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        logging.Logger: Logger named "ionomy.<name>", or the name itself
        when it already lives under the ionomy namespace

    Example:
        >>> get_logger("ionomy.api_client").name
        'ionomy.api_client'
        >>> get_logger("scripts.smoke").name
        'ionomy.scripts.smoke'
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def set_log_level(level: str) -> None:
    """
    Change the library log level at runtime.

    Args:
        level: New log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))


# ============================================
# Log Helper Functions
# ============================================

def log_api_request(endpoint: str, params: Optional[dict] = None, signed: bool = False) -> None:
    """
    Log an outgoing API request at DEBUG level.

    Only the endpoint, the query parameters and whether the request is
    signed are logged. Credentials and signatures are never passed here.

    Example:
        >>> log_api_request("account/balance", {"currency": "hive"}, signed=True)
        [DEBUG] API Request: ionomy account/balance (signed) | Params: {'currency': 'hive'}
    """
    auth_str = " (signed)" if signed else ""
    if params:
        logger.debug(f"API Request: ionomy {endpoint}{auth_str} | Params: {params}")
    else:
        logger.debug(f"API Request: ionomy {endpoint}{auth_str}")


def log_api_response(endpoint: str, status: int, response_time: Optional[float] = None) -> None:
    """
    Log an API response with status and timing information.

    Example:
        >>> log_api_response("public/markets", 200, 0.342)
        [DEBUG] API Response: ionomy public/markets | Status: 200 | Time: 0.342s
    """
    time_str = f" | Time: {response_time:.3f}s" if response_time is not None else ""
    logger.debug(f"API Response: ionomy {endpoint} | Status: {status}{time_str}")
