# -*- coding: utf-8 -*-
"""
LangRepo Core Package

Translation repository, resource lookup and text escaping.
"""

from core.i18n import TranslationEntry, Category, LanguageRepository
from core.vfs import VFS, FileInfo

__all__ = [
    'TranslationEntry',
    'Category',
    'LanguageRepository',
    'VFS',
    'FileInfo',
]
