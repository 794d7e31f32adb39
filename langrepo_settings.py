"""
LangRepo Settings Module
Handles loading and saving of language settings.
"""

import json
import langrepo_config as config
from langrepo_exceptions import SettingsLoadError
from langrepo_logger import get_logger
logger = get_logger("settings")


def default_settings():
    """Return a fresh dict of default settings."""
    return {
        "language_id": config.DEFAULT_LANGUAGE_ID,
        "fallback_language_id": config.DEFAULT_FALLBACK_LANGUAGE_ID,
        "lang_override_path": config.DEFAULT_LANG_OVERRIDE_PATH,
        "save_missed_keys": config.DEFAULT_SAVE_MISSED_KEYS,
    }


def _read_settings_file(settings_file):
    try:
        with settings_file.open('r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise SettingsLoadError(f"Settings file is not valid JSON: {settings_file}", details=str(e)) from e
    except OSError as e:
        raise SettingsLoadError(f"Settings file could not be read: {settings_file}", details=str(e)) from e


def load_settings():
    """Load settings from JSON file, or return defaults if not found."""

    settings_file = config.SETTINGS_FILE_PATH
    defaults = default_settings()

    if not settings_file.is_file():
        logger.info(f"Settings file not found ({settings_file}). Using defaults.")
        return defaults

    try:
        logger.debug(f"Loading settings: {settings_file}")
        loaded_data = _read_settings_file(settings_file)
    except SettingsLoadError as e:
        logger.error(f"{e}. Using defaults.")
        return defaults

    if not isinstance(loaded_data, dict):
        logger.warning("Settings file format is invalid (not a dict). Using defaults.")
        return defaults

    settings = defaults.copy()
    settings.update(loaded_data)

    # Language ids end up in file names, so they must be plain non-empty strings
    for key in ("language_id", "fallback_language_id"):
        value = settings.get(key)
        if not isinstance(value, str) or not value or "/" in value or "\\" in value:
            logger.warning(f"Invalid '{key}' value ({value!r}). Using default.")
            settings[key] = defaults[key]

    if not isinstance(settings.get("lang_override_path"), str):
        logger.warning("Invalid 'lang_override_path' value. Using default.")
        settings["lang_override_path"] = defaults["lang_override_path"]

    if not isinstance(settings.get("save_missed_keys"), bool):
        logger.warning("Invalid 'save_missed_keys' value. Using default.")
        settings["save_missed_keys"] = defaults["save_missed_keys"]

    logger.debug("Settings loaded.")
    return settings


def save_settings(settings_data):
    """Save settings to JSON file. Returns True on success."""

    settings_file = config.SETTINGS_FILE_PATH
    try:
        logger.debug(f"Saving settings: {settings_file}")
        settings_file.parent.mkdir(parents=True, exist_ok=True)
        with settings_file.open('w', encoding='utf-8') as f:
            json.dump(settings_data, f, indent=4, ensure_ascii=False)
    except (OSError, TypeError) as e:
        logger.critical(f"Settings could not be saved ({settings_file}): {e}")
        return False

    logger.info("Settings saved.")
    return True
