import csv
from pathlib import Path

from pan_validation.sources.base import BaseRawSource
from pan_validation.sources.exceptions import SourceReadError


class CsvRawSource(BaseRawSource):
    """Reads one column of a header-row CSV file.

    Every line after the header is one record. A blank line or a row too
    short to contain the column is returned as None; an empty cell is
    returned as an empty string.
    """

    def __init__(self, path: Path, column: str = "pan_number") -> None:
        self._path = path
        self._column = column

    def read(self) -> list[str | None]:
        try:
            with self._path.open(newline="", encoding="utf-8-sig") as handle:
                reader = csv.reader(handle)
                index = self._column_index(next(reader, None))
                return [row[index] if index < len(row) else None for row in reader]
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise SourceReadError(f"Failed to read {self._path}: {exc}") from exc

    def _column_index(self, header: list[str] | None) -> int:
        if header is None or self._column not in header:
            raise SourceReadError(f"Column '{self._column}' not found in {self._path}")
        return header.index(self._column)
