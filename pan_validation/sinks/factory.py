from pathlib import Path

from pan_validation.config.settings import Settings
from pan_validation.database.repositories.pan_repository import PanRepository
from pan_validation.sinks.base import BaseResultSink
from pan_validation.sinks.csv_sink import CsvResultSink
from pan_validation.sinks.database_sink import DatabaseResultSink
from pan_validation.sinks.log_sink import LogResultSink


class ResultSinkFactory:
    """Creates the result sink selected in settings."""

    SINKS = ("csv", "database", "log")

    @classmethod
    def create(cls, settings: Settings) -> BaseResultSink:
        sink = settings.sink.lower()
        if sink == "csv":
            return CsvResultSink(Path(settings.output_path))
        if sink == "database":
            return DatabaseResultSink(PanRepository())
        if sink == "log":
            return LogResultSink()
        raise ValueError(
            f"Unknown sink '{sink}'. Choose from: {list(cls.SINKS)}"
        )
