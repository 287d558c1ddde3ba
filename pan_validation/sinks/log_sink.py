from pan_validation.classification.models import ClassificationResult
from pan_validation.logging.logger import Log
from pan_validation.reporting.models import SummaryCounts
from pan_validation.sinks.base import BaseResultSink


class LogResultSink(BaseResultSink):
    """Emits results through the application log only."""

    def write(self, results: list[ClassificationResult], summary: SummaryCounts) -> None:
        if Log.is_debug_enabled():
            for result in results:
                Log.debug(f"{result.pan_number}: {result.verdict.value}")
        Log.info(
            f"Processed {summary.total_raw} records: "
            f"{summary.total_valid} valid, {summary.total_invalid} invalid, "
            f"{summary.total_missing} missing"
        )
