from pathlib import Path

from pan_validation.config.settings import Settings
from pan_validation.database.repositories.pan_repository import PanRepository
from pan_validation.sources.base import BaseRawSource
from pan_validation.sources.csv_source import CsvRawSource
from pan_validation.sources.database_source import DatabaseRawSource


class RawSourceFactory:
    """Creates the raw source selected in settings."""

    SOURCES = ("csv", "database")

    @classmethod
    def create(cls, settings: Settings) -> BaseRawSource:
        source = settings.source.lower()
        if source == "csv":
            return CsvRawSource(Path(settings.input_path), column=settings.input_column)
        if source == "database":
            return DatabaseRawSource(PanRepository())
        raise ValueError(
            f"Unknown source '{source}'. Choose from: {list(cls.SOURCES)}"
        )
