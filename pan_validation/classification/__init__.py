from pan_validation.classification.classifier import Classifier, classify
from pan_validation.classification.models import (
    ClassificationResult,
    RejectionReason,
    Verdict,
)
from pan_validation.classification.rules import (
    has_adjacent_repeat,
    is_strict_ascending_sequence,
    matches_pan_format,
)

__all__ = [
    "ClassificationResult",
    "Classifier",
    "RejectionReason",
    "Verdict",
    "classify",
    "has_adjacent_repeat",
    "is_strict_ascending_sequence",
    "matches_pan_format",
]
