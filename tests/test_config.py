"""Tests for settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from book_registry.config import Settings
from book_registry.registry import BookRegistry


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)  # no stray .env
        monkeypatch.delenv("BOOK_REGISTRY_ENFORCE_REVISION_YEAR", raising=False)
        settings = Settings()

        assert settings.enforce_revision_year is False
        assert settings.catalog_path == Path("data") / "catalog.json"
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BOOK_REGISTRY_ENFORCE_REVISION_YEAR", "true")
        monkeypatch.setenv("BOOK_REGISTRY_DATA_DIR", str(tmp_path / "books"))
        monkeypatch.setenv("BOOK_REGISTRY_CATALOG_FILE", "library.json")
        settings = Settings()

        assert settings.enforce_revision_year is True
        assert settings.catalog_path == tmp_path / "books" / "library.json"

    def test_registry_reads_setting(self, monkeypatch):
        from book_registry import registry as registry_module

        monkeypatch.setattr(
            registry_module,
            "get_settings",
            lambda: Settings(enforce_revision_year=True),
        )
        assert BookRegistry().enforce_revision_year is True
        assert BookRegistry(enforce_revision_year=False).enforce_revision_year is False

    def test_log_level_normalized(self):
        assert Settings(log_level="info").log_level == "INFO"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")
