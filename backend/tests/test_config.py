"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from studynotes.config import Settings


class TestSettings:

    def test_storage_backend_is_normalised(self):
        assert Settings(storage_backend="MEMORY").storage_backend == "memory"

    def test_unknown_storage_backend_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(storage_backend="nosql")

    def test_log_level_is_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_cors_origins_are_split(self):
        settings = Settings(cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite+aiosqlite:///x.db").is_sqlite is True
        assert Settings(database_url="postgresql+asyncpg://u:p@h/db").is_sqlite is False
