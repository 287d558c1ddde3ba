import csv
from pathlib import Path

from pan_validation.classification.models import ClassificationResult
from pan_validation.logging.logger import Log
from pan_validation.reporting.models import SummaryCounts
from pan_validation.reporting.report_builder import result_to_row
from pan_validation.sinks.base import BaseResultSink
from pan_validation.sinks.exceptions import SinkWriteError

FIELDNAMES = ("pan_number", "status", "reasons")


class CsvResultSink(BaseResultSink):
    """Writes one row per result to a CSV file, replacing any previous file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def write(self, results: list[ClassificationResult], summary: SummaryCounts) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", newline="", encoding="utf-8") as handle:
                writer = csv.DictWriter(handle, fieldnames=FIELDNAMES)
                writer.writeheader()
                writer.writerows(result_to_row(result) for result in results)
        except OSError as exc:
            raise SinkWriteError(f"Failed to write {self._path}: {exc}") from exc
        Log.info(
            f"Wrote {len(results)} results to {self._path} "
            f"({summary.total_valid} valid, {summary.total_invalid} invalid)"
        )
