from dataclasses import dataclass


@dataclass(frozen=True)
class DataQualityProfile:
    """Issues found in the raw values before cleaning."""

    total_records: int
    missing_count: int = 0
    blank_count: int = 0
    untrimmed_count: int = 0
    not_uppercase_count: int = 0
    # (raw value, occurrences) for values seen more than once, sorted by value
    duplicates: tuple[tuple[str, int], ...] = ()

    @property
    def duplicate_count(self) -> int:
        """Number of surplus copies across all duplicated raw values."""
        return sum(count - 1 for _value, count in self.duplicates)
