# -*- coding: utf-8 -*-
"""
LangRepo Translation Repository

In-memory translation table grouped into categories, with tracking of keys
that were looked up but not found. Missed keys can be written back to the
language file without touching existing translations.

Usage:
    repo = LanguageRepository(VFS([app_dir]))
    repo.load_ini("de_DE")
    main = repo.get_category("Main")
    label = main.t("Hello", "Hello")
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

import langrepo_config as config
from core.text_utils import escape_newlines, unescape_newlines
from core.vfs import VFS
from langrepo_exceptions import LangRepoError, ResourceNotFoundError
from langrepo_logger import get_logger
from parser.ini_file import IniFile, IniSection

logger = get_logger("core.i18n")


@dataclass(frozen=True)
class TranslationEntry:
    """A single translated string."""
    text: str


class Category:
    """
    A named group of translations, e.g. one UI screen.

    Categories are owned by a LanguageRepository; callers only ever borrow them
    through LanguageRepository.get_category().
    """

    def __init__(self, name: str):
        self._name = name
        self._map: Dict[str, TranslationEntry] = {}
        self._missed: Dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def t(self, key: Optional[str], default: Optional[str] = None) -> str:
        """
        Translate ``key``. Never raises.

        Args:
            key: Lookup key; may contain literal newlines
            default: Text to return (and to record as a miss) when the key is absent

        Returns:
            The stored translation, else ``default``, else ``key`` unchanged.
            A missing key returns the INVALID_KEY_TEXT sentinel.
        """
        if not key:
            return config.INVALID_KEY_TEXT

        # Keys are stored single-line, so match on the escaped form
        modified_key = escape_newlines(key)

        entry = self._map.get(modified_key)
        if entry is not None:
            return entry.text

        self._missed[modified_key] = default if default is not None else modified_key
        logger.debug(f"Missed translation key in {self._name}: {modified_key}")
        return default if default is not None else key

    def set_map(self, source: Mapping[str, str]) -> None:
        """Merge ``source`` into the confirmed entries. Existing keys are kept."""
        for key, value in source.items():
            if key not in self._map:
                self._map[key] = TranslationEntry(unescape_newlines(value))

    def get_map(self) -> Mapping[str, TranslationEntry]:
        return MappingProxyType(self._map)

    def missed(self) -> Mapping[str, str]:
        return MappingProxyType(self._missed)

    def has_missed_keys(self) -> bool:
        return bool(self._missed)

    def clear_missed(self) -> None:
        self._missed.clear()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and escape_newlines(key) in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"Category(name={self._name!r}, entries={len(self._map)}, missed={len(self._missed)})"


class LanguageRepository:
    """
    Owner of every Category for the running application.

    Create one at startup and pass it to whatever needs translations. Loading
    a language replaces all categories; saving merges missed keys into the
    language file without overwriting what translators already wrote.
    """

    def __init__(self, vfs: Optional[VFS] = None):
        self._vfs = vfs if vfs is not None else VFS()
        self._categories: Dict[str, Category] = {}
        self._language_id: Optional[str] = None
        # Why the most recent load/save failed, if it did
        self.last_error: Optional[LangRepoError] = None

    @property
    def vfs(self) -> VFS:
        return self._vfs

    @property
    def language_id(self) -> Optional[str]:
        """Id of the last successfully loaded language."""
        return self._language_id

    # =========================================================================
    # CATEGORIES
    # =========================================================================

    def get_category(self, name: str) -> Category:
        """Return the category called ``name``, creating an empty one if needed."""
        category = self._categories.get(name)
        if category is None:
            category = Category(name)
            self._categories[name] = category
        return category

    def category_names(self) -> List[str]:
        return list(self._categories)

    def has_missed_keys(self) -> bool:
        return any(category.has_missed_keys() for category in self._categories.values())

    def clear(self) -> None:
        """Drop every category."""
        self._categories.clear()

    def close(self) -> None:
        self.clear()
        self._language_id = None

    def __enter__(self) -> 'LanguageRepository':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # LANGUAGE FILES
    # =========================================================================

    def get_ini_path(self, language_id: str) -> str:
        return f"{config.LANG_DIR}/{language_id}{config.LANG_FILE_EXTENSION}"

    def ini_exists(self, language_id: str) -> bool:
        info = self._vfs.get_file_info(self.get_ini_path(language_id))
        return info.exists and not info.is_directory

    def load_ini(self, language_id: str, override_path: str = "") -> bool:
        """
        Replace all categories with the contents of a language file.

        Args:
            language_id: Language to load, e.g. 'en_US'
            override_path: Directory prefix used instead of the default lang/ path

        Returns:
            True on success. On failure nothing is changed and the cause is
            kept in ``last_error``.
        """
        if override_path:
            ini_path = override_path + language_id + config.LANG_FILE_EXTENSION
        else:
            ini_path = self.get_ini_path(language_id)

        logger.debug(f"Loading language file {ini_path}")
        ini = IniFile()
        try:
            ini.load_from_vfs(self._vfs, ini_path)
        except LangRepoError as e:
            self.last_error = e
            logger.warning(f"Could not load language '{language_id}' from {ini_path}: {e}")
            return False

        self.clear()
        for section in ini.sections():
            # The anonymous section holds no translations
            if section.name:
                self._load_section(section)

        self._language_id = language_id
        self.last_error = None
        logger.info(f"Loaded language '{language_id}' ({len(self._categories)} categories) from {ini_path}")
        return True

    def _load_section(self, section: IniSection) -> None:
        # A repeated section merges into the first one
        self.get_category(section.name).set_map(section.to_map())

    def save_ini(self, language_id: str) -> bool:
        """
        Merge missed keys and confirmed entries into the language file.

        Existing file entries are only overwritten by confirmed entries; missed
        keys fill gaps. Always writes to the default path for ``language_id``.
        Missed keys are cleared only once the file has been written.

        Returns:
            True if the file was written
        """
        ini_path = self._vfs.local_path(self.get_ini_path(language_id))

        ini = IniFile()
        try:
            ini.load(ini_path)
        except ResourceNotFoundError:
            logger.debug(f"No existing language file at {ini_path}, creating it")
        except LangRepoError as e:
            # Never replace a file we could not read
            self.last_error = e
            logger.error(f"Refusing to save language '{language_id}': existing file unreadable: {e}")
            return False

        for name, category in self._categories.items():
            self._save_section(ini.get_or_create_section(name), category)

        try:
            ini.save(ini_path)
        except LangRepoError as e:
            self.last_error = e
            logger.error(f"Could not save language '{language_id}': {e}")
            return False

        for category in self._categories.values():
            category.clear_missed()

        self.last_error = None
        logger.info(f"Saved language '{language_id}' to {ini_path}")
        return True

    def _save_section(self, section: IniSection, category: Category) -> None:
        for key, text in category.missed().items():
            if not section.exists(key):
                section.set(key, escape_newlines(text))

        for key, entry in category.get_map().items():
            section.set(key, escape_newlines(entry.text))

    def __repr__(self) -> str:
        return f"LanguageRepository(language={self._language_id!r}, categories={len(self._categories)})"
