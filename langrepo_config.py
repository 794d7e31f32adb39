import os, sys
from pathlib import Path

def resource_path(relative_path):
    """Get absolute path to resource, works for dev and for PyInstaller."""
    try:
        # PyInstaller creates a temp folder and stores path in _MEIPASS
        base_path = sys._MEIPASS
    except AttributeError:
        # Development mode: use directory containing this config file (project root)
        base_path = os.path.dirname(os.path.abspath(__file__))

    return os.path.join(base_path, relative_path)

VERSION = "0.4.0"

# Language resources live at <LANG_DIR>/<language_id><LANG_FILE_EXTENSION>
LANG_DIR = "lang"
LANG_FILE_EXTENSION = ".ini"
LANG_FILE_ENCODING = "utf-8"

DEFAULT_LANGUAGE_ID = "en_US"
DEFAULT_FALLBACK_LANGUAGE_ID = "en_US"
DEFAULT_LANG_OVERRIDE_PATH = ""
DEFAULT_SAVE_MISSED_KEYS = False

# Returned by lookups made without a key
INVALID_KEY_TEXT = "ERROR"

APP_DIR = Path.home() / ".langrepo"
SETTINGS_DIR = APP_DIR
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"

__all__ = [
    "VERSION", "resource_path",
    "LANG_DIR", "LANG_FILE_EXTENSION", "LANG_FILE_ENCODING",
    "DEFAULT_LANGUAGE_ID", "DEFAULT_FALLBACK_LANGUAGE_ID",
    "DEFAULT_LANG_OVERRIDE_PATH", "DEFAULT_SAVE_MISSED_KEYS",
    "INVALID_KEY_TEXT",
    "APP_DIR", "SETTINGS_DIR", "SETTINGS_FILE_PATH", "Path",
]

# Import logger at the end to avoid circular imports
from langrepo_logger import get_logger
_logger = get_logger("config")
_logger.debug("langrepo_config.py loaded")
