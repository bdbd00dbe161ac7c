"""Unit tests for configuration loading."""

from backoffice.config import Config


class TestConfig:
    def test_empty_database_url_uses_data_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BACKOFFICE_DATA_DIR", str(tmp_path))
        monkeypatch.delenv("BACKOFFICE_DATABASE__URL", raising=False)

        config = Config()

        assert config.database.url == f"sqlite+aiosqlite:///{tmp_path / 'backoffice.db'}"

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("BACKOFFICE_AUTH__JWT__ACCESS_TOKEN_EXPIRE_MINUTES", "15")

        assert Config().auth.jwt.access_token_expire_minutes == 15

    def test_yaml_file_is_read(self, monkeypatch, tmp_path):
        config_file = tmp_path / "backoffice.yaml"
        config_file.write_text("server:\n  name: Staging back-office\n")
        monkeypatch.setenv("BACKOFFICE_CONFIG_FILE", str(config_file))

        assert Config().server.name == "Staging back-office"

    def test_env_beats_yaml(self, monkeypatch, tmp_path):
        config_file = tmp_path / "backoffice.yaml"
        config_file.write_text("logging:\n  level: DEBUG\n")
        monkeypatch.setenv("BACKOFFICE_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("BACKOFFICE_LOGGING__LEVEL", "WARNING")

        assert Config().logging.level == "WARNING"
