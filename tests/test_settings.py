# -*- coding: utf-8 -*-
"""
Unit Tests for settings persistence.
"""

import json

import langrepo_settings as lr_settings


class TestLoadSettings:

    def test_defaults_when_file_missing(self, settings_file):
        assert lr_settings.load_settings() == lr_settings.default_settings()

    def test_values_loaded_from_file(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"language_id": "de_DE", "save_missed_keys": True}), encoding="utf-8")

        settings = lr_settings.load_settings()

        assert settings["language_id"] == "de_DE"
        assert settings["save_missed_keys"] is True
        assert settings["fallback_language_id"] == "en_US"

    def test_invalid_values_replaced_by_defaults(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({
            "language_id": "../../etc/passwd",
            "fallback_language_id": 5,
            "lang_override_path": None,
            "save_missed_keys": "yes",
        }), encoding="utf-8")

        assert lr_settings.load_settings() == lr_settings.default_settings()

    def test_corrupt_json_uses_defaults(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("{not json", encoding="utf-8")

        assert lr_settings.load_settings() == lr_settings.default_settings()

    def test_non_dict_uses_defaults(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("[1, 2]", encoding="utf-8")

        assert lr_settings.load_settings() == lr_settings.default_settings()


class TestSaveSettings:

    def test_save_then_load(self, settings_file):
        settings = lr_settings.default_settings()
        settings["language_id"] = "ja_JP"

        assert lr_settings.save_settings(settings) is True
        assert lr_settings.load_settings()["language_id"] == "ja_JP"

    def test_save_failure_returns_false(self, settings_file):
        settings_file.parent.parent.joinpath("settings").write_text("blocker", encoding="utf-8")

        assert lr_settings.save_settings(lr_settings.default_settings()) is False
