from dataclasses import dataclass, field
from enum import Enum


class Verdict(str, Enum):
    """Classification outcome. Values match the legacy report's status column."""

    VALID = "Valid PAN"
    INVALID = "Invalid PAN"


class RejectionReason(str, Enum):
    """A single rule a candidate failed."""

    FORMAT_MISMATCH = "format_mismatch"
    ADJACENT_REPEAT = "adjacent_repeat"
    SEQUENTIAL_PREFIX = "sequential_prefix"
    SEQUENTIAL_DIGITS = "sequential_digits"


@dataclass(frozen=True)
class ClassificationResult:
    """Verdict for one cleaned PAN number."""

    pan_number: str
    reasons: tuple[RejectionReason, ...] = field(default_factory=tuple)

    @property
    def verdict(self) -> Verdict:
        return Verdict.INVALID if self.reasons else Verdict.VALID

    @property
    def is_valid(self) -> bool:
        return not self.reasons
