from pan_validation.classification.models import ClassificationResult
from pan_validation.database.repositories.pan_repository import PanRepository
from pan_validation.logging.logger import Log
from pan_validation.reporting.models import SummaryCounts
from pan_validation.sinks.base import BaseResultSink


class DatabaseResultSink(BaseResultSink):
    """Replaces the pan_validation_results table with the current run."""

    def __init__(self, repo: PanRepository) -> None:
        self._repo = repo

    def write(self, results: list[ClassificationResult], summary: SummaryCounts) -> None:
        self._repo.replace_results(results)
        stored = sum(self._repo.count_results_by_status().values())
        Log.info(
            f"Stored {stored} results "
            f"({summary.total_valid} valid, {summary.total_invalid} invalid)"
        )
        if stored != len(results):
            Log.warning(f"Results table holds {stored} rows, expected {len(results)}")
