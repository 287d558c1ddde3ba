from pathlib import Path

from pan_validation.classification.classifier import Classifier
from pan_validation.cleaning.normalizer import Normalizer
from pan_validation.cleaning.profiler import DataQualityProfiler
from pan_validation.config.settings import Settings
from pan_validation.logging.logger import Log
from pan_validation.processor.pipeline import PipelineContext, PipelineStep
from pan_validation.processor.steps import (
    BuildReportStep,
    ClassifyStep,
    LoadRawValuesStep,
    NormalizeStep,
    PersistReportStep,
    PersistResultsStep,
    ProfileStep,
    SummarizeStep,
)
from pan_validation.reporting.report_builder import ReportBuilder
from pan_validation.sinks.factory import ResultSinkFactory
from pan_validation.sinks.report_sink import JsonReportSink
from pan_validation.sources.factory import RawSourceFactory


class Processor:
    """Runs the validation pipeline steps in order.

    Pipeline: load -> profile -> normalize -> classify -> summarize -> report
    -> persist results -> persist report (when a report path is set).
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, context: PipelineContext | None = None) -> PipelineContext:
        """Run every step and return the final context. Step errors propagate."""
        if context is None:
            context = PipelineContext()
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                Log.error(f"Step {type(step).__name__} failed: {exc}")
                raise
        return context


def build_steps(settings: Settings) -> list[PipelineStep]:
    """Build the default step list with the configured source and sinks."""
    steps: list[PipelineStep] = [
        LoadRawValuesStep(RawSourceFactory.create(settings)),
        ProfileStep(DataQualityProfiler()),
        NormalizeStep(Normalizer()),
        ClassifyStep(Classifier()),
        SummarizeStep(),
        BuildReportStep(ReportBuilder()),
        PersistResultsStep(ResultSinkFactory.create(settings)),
    ]
    if settings.writes_report:
        steps.append(PersistReportStep(JsonReportSink(Path(settings.report_path))))
    return steps


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    return Processor(steps=build_steps(settings))
