from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pan_validation.classification.models import ClassificationResult
from pan_validation.cleaning.models import DataQualityProfile
from pan_validation.reporting.models import SummaryCounts


@dataclass(slots=True)
class PipelineContext:
    raw_values: list[str | None] = field(default_factory=list)
    profile: DataQualityProfile | None = None
    candidates: frozenset[str] | None = None
    results: list[ClassificationResult] | None = None
    summary: SummaryCounts | None = None
    report: dict[str, object] = field(default_factory=dict)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
