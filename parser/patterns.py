# -*- coding: utf-8 -*-
"""
Section File Regex Patterns

Centralized regex patterns for parsing INI-style language files.
"""

import re


class IniPatterns:
    """
    Collection of regex patterns for the section file syntax.

    Organized by category:
    - Structure (section headers)
    - Content (key/value pairs)
    - Ignorable lines (comments, blanks)
    """

    # =========================================================================
    # STRUCTURE PATTERNS
    # =========================================================================

    # [Section Name]
    SECTION_HEADER = re.compile(r'^\s*\[([^\]]*)\]\s*$')
    # A line that opens a header but never closes it (and is not a key line)
    BROKEN_SECTION_HEADER = re.compile(r'^\s*\[[^\]=]*$')

    # =========================================================================
    # CONTENT PATTERNS
    # =========================================================================

    # "key" = value, for keys that cannot be written bare
    QUOTED_KEY_VALUE = re.compile(r'^\s*"((?:\\.|[^"\\])*)"\s*=\s*(.*?)\s*$')

    # key = value (split on the first '=')
    KEY_VALUE = re.compile(r'^([^=]+?)\s*=\s*(.*?)\s*$')

    # A whole value wrapped in double quotes
    QUOTED = re.compile(r'^"((?:\\.|[^"\\])*)"$')
    ESCAPED_CHAR = re.compile(r'\\(.)')

    # Leading characters a bare key may not start with
    KEY_RESERVED_START = ('[', '#', ';', '"')

    # =========================================================================
    # IGNORABLE LINES
    # =========================================================================

    COMMENT = re.compile(r'^\s*[#;]')
    BLANK = re.compile(r'^\s*$')

    @classmethod
    def is_ignorable(cls, line: str) -> bool:
        """Check if a line carries no section or key data."""
        return bool(cls.BLANK.match(line) or cls.COMMENT.match(line))
