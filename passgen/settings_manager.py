# --- START OF FILE passgen/settings_manager.py ---

import os
from threading import Lock
from dotenv import find_dotenv, load_dotenv

DEFAULT_SETTINGS = {
    'min_length': '16',
    'max_length': '16',
    'lowercase_min': '1',
    'uppercase_min': '1',
    'digits_min': '1',
    'symbols': '',
    'symbols_min': '0',
    'log_dir': 'logs',
    'log_level': 'INFO',
    'log_to_file': 'False'
}

# Every setting can be overridden with an environment variable, e.g. PASSGEN_MIN_LENGTH.
ENV_PREFIX = 'PASSGEN_'

# A simple in-memory cache for settings to avoid re-reading the environment.
settings_cache = {}
cache_lock = Lock()


def _load_settings():
    global settings_cache
    load_dotenv(find_dotenv(usecwd=True))
    env_settings = {
        key: os.environ[ENV_PREFIX + key.upper()]
        for key in DEFAULT_SETTINGS
        if ENV_PREFIX + key.upper() in os.environ
    }
    # Merge env settings with defaults, so new defaults are always available
    settings_cache = {**DEFAULT_SETTINGS, **env_settings}


def get_all_settings():
    """
    Loads all settings from the environment (and a .env file, if present),
    falling back to defaults for any that are missing. This populates the cache.
    """
    with cache_lock:
        _load_settings()
        return settings_cache.copy()


def get_setting(key, default=None):
    """
    Retrieves a single setting value by key, using the cache.
    Populates the cache on first run.
    """
    with cache_lock:
        if not settings_cache:
            _load_settings()

        value_str = settings_cache.get(key)

        # Handle boolean conversion for 'True'/'False' strings
        if isinstance(value_str, str):
            if value_str.lower() == 'true':
                return True
            if value_str.lower() == 'false':
                return False

        # Return the value, or the provided default if it's None in the cache
        return value_str if value_str is not None else default


TRUE_VALUES = ('true', '1', 'yes', 'on')
FALSE_VALUES = ('false', '0', 'no', 'off', '')


def get_bool_setting(key, default=False):
    """
    Retrieves a flag setting. Accepts true/false, 1/0, yes/no and on/off in any
    case; anything else raises ValueError instead of being treated as enabled.
    """
    value = get_setting(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value {value!r} for setting '{key}'.")


def clear_cache():
    """Drops cached settings so the next lookup re-reads the environment."""
    with cache_lock:
        settings_cache.clear()

# --- END OF FILE passgen/settings_manager.py ---
