# -*- coding: utf-8 -*-
"""
Unit Tests for newline escaping helpers.
"""

from core.text_utils import escape_newlines, unescape_newlines


class TestNewlineEscaping:

    def test_escape_replaces_every_newline(self):
        assert escape_newlines("a\nb\nc") == "a\\nb\\nc"

    def test_unescape_restores_newlines(self):
        assert unescape_newlines("a\\nb") == "a\nb"

    def test_plain_text_untouched(self):
        assert escape_newlines("plain") == "plain"
        assert unescape_newlines("plain") == "plain"

    def test_empty_text(self):
        assert escape_newlines("") == ""
        assert unescape_newlines("") == ""
