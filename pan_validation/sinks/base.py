from abc import ABC, abstractmethod

from pan_validation.classification.models import ClassificationResult
from pan_validation.reporting.models import SummaryCounts


class BaseResultSink(ABC):
    """Contract for all classification result sinks."""

    @abstractmethod
    def write(self, results: list[ClassificationResult], summary: SummaryCounts) -> None:
        """Store or emit the classified results of one run.

        Raises:
            SinkWriteError: if the results cannot be written.
        """
