# -*- coding: utf-8 -*-
"""
LangRepo Parser Package

Reader/writer for the INI-style section files that hold translations.
"""

from parser.patterns import IniPatterns
from parser.ini_file import IniFile, IniSection, IniLine

__all__ = [
    'IniPatterns',
    'IniFile',
    'IniSection',
    'IniLine',
]
