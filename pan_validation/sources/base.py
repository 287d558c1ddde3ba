from abc import ABC, abstractmethod


class BaseRawSource(ABC):
    """Contract for all raw PAN value sources."""

    @abstractmethod
    def read(self) -> list[str | None]:
        """Read every raw value exactly as stored.

        Returns:
            Raw values in source order. Missing values are None.

        Raises:
            SourceReadError: if the source cannot be read.
        """
