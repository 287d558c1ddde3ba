from pan_validation.database.repositories.pan_repository import PanRepository
from pan_validation.sources.base import BaseRawSource


class DatabaseRawSource(BaseRawSource):
    """Reads raw values from the pan_numbers_dataset table."""

    def __init__(self, repo: PanRepository) -> None:
        self._repo = repo

    def read(self) -> list[str | None]:
        return self._repo.fetch_raw_values()
