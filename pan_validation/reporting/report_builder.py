from dataclasses import asdict

from pan_validation.classification.models import ClassificationResult
from pan_validation.cleaning.models import DataQualityProfile
from pan_validation.reporting.models import SummaryCounts


class ReportBuilder:
    """Converts a run's outputs to a JSON-serializable structure."""

    def build(
        self,
        results: list[ClassificationResult],
        summary: SummaryCounts,
        profile: DataQualityProfile | None = None,
    ) -> dict[str, object]:
        """Assemble the report payload.

        Returns:
            Dict with 'summary', 'profile' and 'results' keys. 'profile' is
            None when no profile was computed.
        """
        return {
            "summary": self._summary_to_dict(summary),
            "profile": self._profile_to_dict(profile) if profile is not None else None,
            "results": [result_to_row(r) for r in results],
        }

    def _summary_to_dict(self, summary: SummaryCounts) -> dict[str, int]:
        payload = asdict(summary)
        payload["total_missing"] = summary.total_missing
        return payload

    def _profile_to_dict(self, profile: DataQualityProfile) -> dict[str, object]:
        payload = asdict(profile)
        payload["duplicates"] = dict(profile.duplicates)
        payload["duplicate_count"] = profile.duplicate_count
        return payload


def result_to_row(result: ClassificationResult) -> dict[str, str]:
    """Flatten a result into the row shape shared by every sink."""
    return {
        "pan_number": result.pan_number,
        "status": result.verdict.value,
        "reasons": ";".join(reason.value for reason in result.reasons),
    }
