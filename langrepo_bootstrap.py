# -*- coding: utf-8 -*-
"""
LangRepo Bootstrap (Composition Root)

Creates the single LanguageRepository for an application run and loads the
configured language. The returned repository is meant to be passed to every
consumer explicitly.
"""

from typing import Any, Dict, Optional

import langrepo_settings as lr_settings
from core.i18n import LanguageRepository
from core.vfs import VFS
from langrepo_logger import get_logger

logger = get_logger("bootstrap")


def bootstrap(settings: Optional[Dict[str, Any]] = None, vfs: Optional[VFS] = None) -> LanguageRepository:
    """
    Build the repository and load the configured language.

    Falls back to ``fallback_language_id`` from the default lang/ directory
    when the configured language cannot be loaded. If neither loads, the
    repository stays empty and every lookup returns its default text.

    Args:
        settings: Settings dict; loaded from disk when omitted
        vfs: Resource locator; the package resource directory when omitted

    Returns:
        The repository
    """
    logger.info("=== LangRepo Bootstrap Starting ===")

    if settings is None:
        settings = lr_settings.load_settings()

    repository = LanguageRepository(vfs)

    language_id = settings["language_id"]
    override_path = settings.get("lang_override_path", "")
    if repository.load_ini(language_id, override_path):
        logger.info(f"=== LangRepo Bootstrap Complete ({language_id}) ===")
        return repository

    fallback_id = settings.get("fallback_language_id")
    if fallback_id and (fallback_id != language_id or override_path):
        logger.warning(f"Language '{language_id}' unavailable, falling back to '{fallback_id}'")
        if repository.load_ini(fallback_id):
            logger.info(f"=== LangRepo Bootstrap Complete ({fallback_id}) ===")
            return repository

    logger.error(f"No language could be loaded (last error: {repository.last_error}). Using built-in defaults.")
    return repository


def shutdown(repository: LanguageRepository, settings: Dict[str, Any]) -> bool:
    """
    Persist missed keys (when enabled) and release the repository.

    Returns:
        False only if saving was attempted and failed
    """
    saved = True
    if settings.get("save_missed_keys") and repository.has_missed_keys():
        language_id = repository.language_id or settings["language_id"]
        saved = repository.save_ini(language_id)
        if not saved:
            logger.error(f"Missed keys for '{language_id}' were not saved: {repository.last_error}")

    repository.close()
    logger.info("=== LangRepo Shutdown Complete ===")
    return saved
