"""Unit tests for environment configuration and logging setup"""

import logging

import pytest

from amharic_search.config import Settings, get_settings, load_environment
from amharic_search.logging_config import setup_logging


class TestSettings:
    """Test reading settings from the environment"""

    def test_defaults(self):
        settings = get_settings()

        assert settings == Settings()
        assert settings.console_level == logging.INFO

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.console_level == logging.DEBUG

    def test_unknown_log_level_falls_back_to_info(self):
        assert Settings(log_level="LOUD").console_level == logging.INFO

    def test_word_list_files(self, monkeypatch, tmp_path):
        stopwords = tmp_path / "stop.txt"
        stopwords.write_text("ግን\n", encoding="utf-8")
        monkeypatch.setenv("AMHARIC_STOPWORDS_FILE", str(stopwords))

        assert get_settings().stopwords_file == stopwords

    def test_missing_file_names_variable(self, monkeypatch, tmp_path):
        monkeypatch.setenv("AMHARIC_STEM_EXCLUSIONS_FILE", str(tmp_path / "missing.txt"))

        with pytest.raises(ValueError, match="AMHARIC_STEM_EXCLUSIONS_FILE"):
            get_settings()


class TestLoadEnvironment:
    """Test .env.local / .env discovery"""

    def test_env_local_preferred(self, tmp_path):
        (tmp_path / ".env.local").write_text("LOG_LEVEL=DEBUG\n")
        (tmp_path / ".env").write_text("LOG_LEVEL=ERROR\n")

        loaded = load_environment(tmp_path)

        assert loaded == tmp_path / ".env.local"
        assert get_settings().log_level == "DEBUG"

    def test_env_fallback(self, tmp_path):
        (tmp_path / ".env").write_text("LOG_LEVEL=WARNING\n")

        assert load_environment(tmp_path) == tmp_path / ".env"
        assert get_settings().log_level == "WARNING"

    def test_no_env_file(self, tmp_path):
        assert load_environment(tmp_path) is None


class TestSetupLogging:
    """Test console + rotating file logging"""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers[:]:
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)

    def test_console_only(self):
        assert setup_logging(log_file=None) is None
        assert len(logging.getLogger().handlers) == 1

    def test_session_file_created(self, tmp_path):
        session_log = setup_logging(log_file=str(tmp_path / "logs" / "amharic.log"))

        assert session_log.parent == tmp_path / "logs"
        assert session_log.name.startswith("amharic_")
        assert session_log.exists()
        assert len(logging.getLogger().handlers) == 2

    def test_old_sessions_pruned(self, tmp_path):
        for i in range(6):
            (tmp_path / f"amharic_2020010{i}_000000.log").write_text("")

        setup_logging(log_file=str(tmp_path / "amharic.log"))

        # 4 newest old sessions + the new one
        assert len(list(tmp_path.glob("amharic_*.log"))) == 5
