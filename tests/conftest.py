# -*- coding: utf-8 -*-
"""
LangRepo Test Fixtures

Shared fixtures for all tests.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# LANGUAGE FILE FIXTURES
# =============================================================================

@pytest.fixture
def sample_ini_text() -> str:
    """A small language file with two categories."""
    return '\n'.join([
        '; German UI strings',
        '',
        '[Main]',
        'Hello = Hallo',
        'Goodbye = Auf Wiedersehen',
        'Two\\nLines = Zwei\\nZeilen',
        '',
        '[Settings]',
        'Volume = Lautstärke',
        '',
    ])


@pytest.fixture
def app_root(tmp_path) -> Path:
    """Application directory with an empty lang/ folder."""
    (tmp_path / "lang").mkdir()
    return tmp_path


@pytest.fixture
def write_lang_file(app_root):
    """Write a language file under app_root/lang and return its path."""
    def _write(language_id: str, text: str) -> Path:
        path = app_root / "lang" / f"{language_id}.ini"
        path.write_text(text, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def vfs(app_root):
    """VFS rooted at the temporary application directory."""
    from core.vfs import VFS
    return VFS([app_root])


@pytest.fixture
def repository(vfs):
    """Fresh LanguageRepository reading from the temporary VFS."""
    from core.i18n import LanguageRepository
    return LanguageRepository(vfs)


@pytest.fixture
def loaded_repository(repository, write_lang_file, sample_ini_text):
    """Repository with the sample German file loaded."""
    write_lang_file("de_DE", sample_ini_text)
    assert repository.load_ini("de_DE")
    return repository


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================

@pytest.fixture
def settings_file(tmp_path, monkeypatch) -> Path:
    """Point the settings module at a temporary settings.json."""
    import langrepo_config as config
    path = tmp_path / "settings" / "settings.json"
    monkeypatch.setattr(config, "SETTINGS_FILE_PATH", path)
    return path
