# -*- coding: utf-8 -*-
"""
Unit Tests for the VFS resource locator.
"""

import pytest

from core.vfs import VFS
from langrepo_exceptions import ResourceNotFoundError


class TestVFS:

    def test_file_info_for_existing_file(self, app_root, write_lang_file):
        write_lang_file("en_US", "[Main]\n")
        vfs = VFS([app_root])

        info = vfs.get_file_info("lang/en_US.ini")

        assert info.exists
        assert not info.is_directory
        assert info.full_path == app_root / "lang" / "en_US.ini"

    def test_file_info_for_missing_file(self, vfs):
        info = vfs.get_file_info("lang/xx_XX.ini")

        assert not info.exists
        assert info.full_path is None

    def test_directory_reported_as_directory(self, vfs):
        info = vfs.get_file_info("lang")

        assert info.exists
        assert info.is_directory

    def test_roots_searched_in_mount_order(self, tmp_path):
        user_dir = tmp_path / "user"
        bundled_dir = tmp_path / "bundled"
        for root, text in ((user_dir, "user"), (bundled_dir, "bundled")):
            (root / "lang").mkdir(parents=True)
            (root / "lang" / "en_US.ini").write_text(text, encoding="utf-8")
        (bundled_dir / "lang" / "fr_FR.ini").write_text("fr", encoding="utf-8")

        vfs = VFS([user_dir, bundled_dir])

        assert vfs.read_bytes("lang/en_US.ini") == b"user"
        assert vfs.read_bytes("lang/fr_FR.ini") == b"fr"

    def test_find_file_missing_raises(self, vfs):
        with pytest.raises(ResourceNotFoundError):
            vfs.find_file("lang/none.ini")

    def test_absolute_path_bypasses_roots(self, tmp_path, vfs):
        outside = tmp_path / "elsewhere.ini"
        outside.write_text("x", encoding="utf-8")

        assert vfs.read_bytes(str(outside)) == b"x"

    def test_local_path_uses_first_root(self, tmp_path):
        vfs = VFS([tmp_path / "a", tmp_path / "b"])

        assert vfs.local_path("lang/en_US.ini") == tmp_path / "a" / "lang" / "en_US.ini"

    def test_mount_ignores_duplicates(self, tmp_path):
        vfs = VFS([tmp_path])
        vfs.mount(tmp_path)

        assert vfs.roots == [tmp_path]
