"""
Tests for settings loading.
"""
from redirect_app.config import Settings


class TestDatabaseSettings:
    """database_url comes from DATABASE_URL or VIA_ALIAS_DB"""

    def test_database_url_wins(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./primary.db")
        monkeypatch.setenv("VIA_ALIAS_DB", "other.db")

        assert Settings(_env_file=None).database_url == "sqlite:///./primary.db"

    def test_via_alias_db_file_path(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("VIA_ALIAS_DB", "via-alias.db")

        assert Settings(_env_file=None).database_url == "sqlite:///via-alias.db"

    def test_via_alias_db_full_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("VIA_ALIAS_DB", "postgresql://localhost/redirects")

        assert Settings(_env_file=None).database_url == "postgresql://localhost/redirects"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("VIA_ALIAS_DB", raising=False)

        assert Settings(_env_file=None).database_url == "sqlite:///./via-alias.db"
