from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryCounts:
    """Aggregate counts for one validation run."""

    total_raw: int
    total_cleaned: int
    total_valid: int
    total_invalid: int
    total_unclassified: int

    @property
    def total_missing(self) -> int:
        """Raw records that did not produce a verdict (nulls, blanks, duplicates)."""
        return self.total_raw - (self.total_valid + self.total_invalid)

    @property
    def is_consistent(self) -> bool:
        return self.total_unclassified == 0
