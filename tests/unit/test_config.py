"""Unit tests for configuration loading."""

from househunt.config import Settings


class TestSettings:
    """Tests for Settings environment loading."""

    def test_defaults(self, monkeypatch, tmp_path):
        """Without environment or .env file the built-in defaults apply."""
        monkeypatch.chdir(tmp_path)
        for name in ("DATABASE_URL", "SEED_DEMO_DATA", "LOG_LEVEL", "LOCALE", "DATABASE_ECHO"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.database_url == "sqlite:///./data/house-hunting.db"
        assert settings.seed_demo_data is True
        assert settings.database_echo is False
        assert settings.log_level == "INFO"
        assert settings.locale == "en_GB"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DATABASE_URL", "sqlite:///other.db")
        monkeypatch.setenv("SEED_DEMO_DATA", "false")
        monkeypatch.setenv("LOCALE", "en_US")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.database_url == "sqlite:///other.db"
        assert settings.seed_demo_data is False
        assert settings.locale == "en_US"
        assert settings.log_level == "debug"

    def test_env_file_is_read(self, monkeypatch, tmp_path):
        """Values in ./.env are picked up; unknown keys are ignored."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("DATABASE_URL", raising=False)
        (tmp_path / ".env").write_text(
            "DATABASE_URL=sqlite:///from-env-file.db\nUNRELATED_SETTING=1\n"
        )

        settings = Settings()

        assert settings.database_url == "sqlite:///from-env-file.db"
