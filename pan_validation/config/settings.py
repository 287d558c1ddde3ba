from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    source: str = "csv"
    input_path: str = "data/pan_numbers.csv"
    input_column: str = "pan_number"

    sink: str = "csv"
    output_path: str = "output/pan_validation_results.csv"
    report_path: str = "output/pan_validation_report.json"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "pan_validation"
    db_username: str = "pan_validation"
    db_password: str = "secret"

    @property
    def writes_report(self) -> bool:
        return bool(self.report_path.strip())

    @property
    def uses_database(self) -> bool:
        return self.source.lower() == "database" or self.sink.lower() == "database"
