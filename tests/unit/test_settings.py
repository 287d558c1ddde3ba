import pytest
from pydantic import ValidationError

from pan_validation.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_source(self) -> None:
        s = Settings()
        assert s.source == "csv"
        assert s.input_column == "pan_number"

    def test_default_sink(self) -> None:
        s = Settings()
        assert s.sink == "csv"

    def test_default_report_path(self) -> None:
        s = Settings()
        assert s.report_path == "output/pan_validation_report.json"
        assert s.writes_report is True

    def test_blank_report_path_disables_report(self) -> None:
        s = Settings(report_path="  ")
        assert s.writes_report is False

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432

    def test_csv_only_run_does_not_use_database(self) -> None:
        s = Settings(source="csv", sink="log")
        assert s.uses_database is False


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_input_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_PATH", "/data/pans.csv")
        s = Settings()
        assert s.input_path == "/data/pans.csv"

    def test_database_source_uses_database(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOURCE", "database")
        s = Settings()
        assert s.uses_database is True

    def test_database_sink_uses_database(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SINK", "DATABASE")
        s = Settings()
        assert s.uses_database is True

    def test_loads_db_host(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db.example.com")
        s = Settings()
        assert s.db_host == "db.example.com"


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()
