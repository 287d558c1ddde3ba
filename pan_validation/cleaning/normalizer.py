from collections.abc import Iterable

from pan_validation.logging.logger import Log


def normalize_value(raw: str | None) -> str | None:
    """Trim and upper-case a raw value. Returns None when nothing is left."""
    if raw is None:
        return None
    trimmed = raw.strip()
    if not trimmed:
        return None
    return trimmed.upper()


def normalize(raw_values: Iterable[str | None]) -> frozenset[str]:
    """Build the deduplicated candidate set from raw values."""
    candidates: set[str] = set()
    for raw in raw_values:
        value = normalize_value(raw)
        if value is not None:
            candidates.add(value)
    return frozenset(candidates)


class Normalizer:
    """Cleans raw PAN values into the candidate set used for classification."""

    def normalize(self, raw_values: list[str | None]) -> frozenset[str]:
        candidates = normalize(raw_values)
        Log.debug(
            f"Normalized {len(raw_values)} raw values into "
            f"{len(candidates)} candidates"
        )
        return candidates
