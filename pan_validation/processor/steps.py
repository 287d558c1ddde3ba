from pan_validation.classification.classifier import Classifier
from pan_validation.cleaning.normalizer import Normalizer
from pan_validation.cleaning.profiler import DataQualityProfiler
from pan_validation.logging.logger import Log
from pan_validation.processor.exceptions import PipelineStateError
from pan_validation.processor.pipeline import PipelineContext, PipelineStep
from pan_validation.reporting.report_builder import ReportBuilder
from pan_validation.reporting.summary import summarize
from pan_validation.sinks.base import BaseResultSink
from pan_validation.sinks.report_sink import JsonReportSink
from pan_validation.sources.base import BaseRawSource


class LoadRawValuesStep(PipelineStep):
    def __init__(self, source: BaseRawSource) -> None:
        self._source = source

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_values = self._source.read()
        Log.info(f"Loaded {len(context.raw_values)} raw records")
        return context


class ProfileStep(PipelineStep):
    def __init__(self, profiler: DataQualityProfiler) -> None:
        self._profiler = profiler

    def run(self, context: PipelineContext) -> PipelineContext:
        profile = self._profiler.profile(context.raw_values)
        context.profile = profile
        Log.info(
            f"Data quality: {profile.missing_count} missing, "
            f"{profile.blank_count} blank, {profile.untrimmed_count} untrimmed, "
            f"{profile.not_uppercase_count} not upper case, "
            f"{len(profile.duplicates)} duplicated values"
        )
        return context


class NormalizeStep(PipelineStep):
    def __init__(self, normalizer: Normalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.candidates = self._normalizer.normalize(context.raw_values)
        Log.info(f"Cleaned {len(context.candidates)} unique candidates")
        return context


class ClassifyStep(PipelineStep):
    def __init__(self, classifier: Classifier) -> None:
        self._classifier = classifier

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.candidates is None:
            raise PipelineStateError(
                "PipelineContext.candidates must be set before classification"
            )
        context.results = self._classifier.classify_all(context.candidates)
        Log.info(f"Classified {len(context.results)} candidates")
        return context


class SummarizeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.candidates is None or context.results is None:
            raise PipelineStateError(
                "PipelineContext.candidates and results must be set before summary"
            )
        summary = summarize(len(context.raw_values), context.candidates, context.results)
        context.summary = summary
        Log.info(
            f"Summary: {summary.total_raw} raw, {summary.total_cleaned} cleaned, "
            f"{summary.total_valid} valid, {summary.total_invalid} invalid, "
            f"{summary.total_missing} missing"
        )
        return context


class BuildReportStep(PipelineStep):
    def __init__(self, report_builder: ReportBuilder) -> None:
        self._report_builder = report_builder

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.results is None or context.summary is None:
            raise PipelineStateError(
                "PipelineContext.results and summary must be set before reporting"
            )
        context.report = self._report_builder.build(
            context.results, context.summary, context.profile
        )
        return context


class PersistResultsStep(PipelineStep):
    def __init__(self, sink: BaseResultSink) -> None:
        self._sink = sink

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.results is None or context.summary is None:
            raise PipelineStateError(
                "PipelineContext.results and summary must be set before persist"
            )
        self._sink.write(context.results, context.summary)
        return context


class PersistReportStep(PipelineStep):
    def __init__(self, report_sink: JsonReportSink) -> None:
        self._report_sink = report_sink

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.report:
            raise PipelineStateError("PipelineContext.report must be built before persist")
        self._report_sink.write(context.report)
        return context
