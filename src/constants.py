import os
from typing import Optional

# System state
TESTING: bool = False
INITIALIZED: bool = False


def is_development_mode() -> bool:
    """
    Check if the application is running in development mode.

    :return: True if FLASK_ENV is set to 'development', False otherwise
    """
    flask_env = os.getenv('FLASK_ENV', 'production').lower()
    return flask_env == 'development'

# Get the src directory
SRC_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(SRC_DIR)

_PROD_LOG_DIR = os.getenv('BBLEX_LOG_DIR', os.path.join(PROJECT_ROOT, "logs"))
LOG_DIR = _PROD_LOG_DIR

# Largest document accepted by the web tokenize endpoint, in characters
_DEFAULT_MAX_INPUT_LENGTH = 64 * 1024


def get_max_input_length() -> int:
    """
    Read the input size limit for the web API.

    :return: Value of BBLEX_MAX_INPUT_LENGTH, or the default if unset or invalid
    """
    raw = os.getenv('BBLEX_MAX_INPUT_LENGTH')
    if not raw:
        return _DEFAULT_MAX_INPUT_LENGTH
    try:
        value = int(raw)
    except ValueError:
        return _DEFAULT_MAX_INPUT_LENGTH
    return value if value > 0 else _DEFAULT_MAX_INPUT_LENGTH

MAX_INPUT_LENGTH = get_max_input_length()


def init_testing(log_dir: Optional[str] = None) -> None:
    """
    Initialize system for testing mode.

    :param log_dir: Optional log directory, defaults to the production one
    """
    global TESTING, INITIALIZED, LOG_DIR, MAX_INPUT_LENGTH
    TESTING = True
    INITIALIZED = True
    LOG_DIR = log_dir or _PROD_LOG_DIR
    MAX_INPUT_LENGTH = get_max_input_length()


def init_production() -> None:
    """Initialize system for production mode."""
    global TESTING, INITIALIZED, LOG_DIR, MAX_INPUT_LENGTH
    TESTING = False
    INITIALIZED = True
    LOG_DIR = _PROD_LOG_DIR
    MAX_INPUT_LENGTH = get_max_input_length()


def reset() -> None:
    """Reset to uninitialized state (primarily for testing)."""
    global TESTING, INITIALIZED, LOG_DIR, MAX_INPUT_LENGTH
    TESTING = False
    INITIALIZED = False
    LOG_DIR = _PROD_LOG_DIR
    MAX_INPUT_LENGTH = get_max_input_length()
