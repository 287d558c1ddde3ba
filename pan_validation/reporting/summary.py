from collections.abc import Collection, Iterable

from pan_validation.classification.models import ClassificationResult
from pan_validation.logging.logger import Log
from pan_validation.reporting.models import SummaryCounts


def summarize(
    total_raw: int,
    candidates: Collection[str],
    results: Iterable[ClassificationResult],
) -> SummaryCounts:
    """Count valid and invalid results against the cleaned candidate set.

    A non-zero unclassified count means some candidate never received a
    verdict. It is logged as an error and reported, never raised.
    """
    total_valid = 0
    total_invalid = 0
    for result in results:
        if result.is_valid:
            total_valid += 1
        else:
            total_invalid += 1

    total_cleaned = len(candidates)
    summary = SummaryCounts(
        total_raw=total_raw,
        total_cleaned=total_cleaned,
        total_valid=total_valid,
        total_invalid=total_invalid,
        total_unclassified=total_cleaned - (total_valid + total_invalid),
    )
    if not summary.is_consistent:
        Log.error(
            f"Classification is not total: {summary.total_unclassified} of "
            f"{total_cleaned} candidates unaccounted for"
        )
    return summary
