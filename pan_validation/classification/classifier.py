from collections.abc import Iterable

from pan_validation.classification.models import (
    ClassificationResult,
    RejectionReason,
    Verdict,
)
from pan_validation.classification.rules import (
    DIGITS_SLICE,
    PREFIX_SLICE,
    has_adjacent_repeat,
    is_strict_ascending_sequence,
    matches_pan_format,
)
from pan_validation.logging.logger import Log


class Classifier:
    """Applies the PAN rule set to cleaned candidates.

    A candidate is valid only when it matches the PAN format, contains no
    adjacent repeated characters, and neither the five-letter prefix nor the
    four-digit block is a strict ascending run. All rules are evaluated so the
    result carries every reason for rejection.
    """

    def classify(self, pan_number: str) -> ClassificationResult:
        reasons: list[RejectionReason] = []
        if not matches_pan_format(pan_number):
            reasons.append(RejectionReason.FORMAT_MISMATCH)
        if has_adjacent_repeat(pan_number):
            reasons.append(RejectionReason.ADJACENT_REPEAT)
        if is_strict_ascending_sequence(pan_number[PREFIX_SLICE]):
            reasons.append(RejectionReason.SEQUENTIAL_PREFIX)
        if is_strict_ascending_sequence(pan_number[DIGITS_SLICE]):
            reasons.append(RejectionReason.SEQUENTIAL_DIGITS)
        return ClassificationResult(pan_number=pan_number, reasons=tuple(reasons))

    def classify_all(self, candidates: Iterable[str]) -> list[ClassificationResult]:
        """Classify every candidate, ordered by PAN number for stable output."""
        results = [self.classify(candidate) for candidate in sorted(candidates)]
        valid = sum(1 for result in results if result.is_valid)
        Log.debug(f"Classified {len(results)} candidates: {valid} valid")
        return results


_default_classifier = Classifier()


def classify(pan_number: str) -> Verdict:
    """Return only the verdict for a single cleaned PAN number."""
    return _default_classifier.classify(pan_number).verdict
