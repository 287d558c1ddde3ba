"""Data-quality checks run against raw values before they are cleaned."""

from collections import Counter
from collections.abc import Sequence

from pan_validation.cleaning.models import DataQualityProfile


class DataQualityProfiler:
    """Counts missing, blank, padded, lower-case and duplicated raw values."""

    def profile(self, raw_values: Sequence[str | None]) -> DataQualityProfile:
        present = [value for value in raw_values if value is not None]
        counts = Counter(present)
        return DataQualityProfile(
            total_records=len(raw_values),
            missing_count=len(raw_values) - len(present),
            blank_count=sum(1 for value in present if not value.strip()),
            untrimmed_count=sum(1 for value in present if value != value.strip()),
            not_uppercase_count=sum(1 for value in present if value != value.upper()),
            duplicates=tuple(
                sorted((value, count) for value, count in counts.items() if count > 1)
            ),
        )
