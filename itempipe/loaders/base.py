from abc import ABC, abstractmethod
from typing import ClassVar

from itempipe.config.settings import Settings
from itempipe.processor.classifier import classify
from itempipe.processor.models import ProcessingRecord

LOADED_FROM_KEY = "Loaded From"
SOURCE_PATH_KEY = "Source Path"


class BaseLoader(ABC):
    """Contract for all acquisition adapters."""

    loaded_from: ClassVar[str] = ""
    initial_description: ClassVar[str] = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> "BaseLoader":
        """Build the loader from application settings."""
        _ = settings
        return cls()

    @abstractmethod
    def load(self, source_id: str) -> ProcessingRecord:
        """Produce the initial record for a source.

        Args:
            source_id: Full source identifier including its scheme.

        Returns:
            ProcessingRecord with origin, category, description and
            provenance annotations stamped; ``done`` is False.

        Raises:
            AcquisitionError: if the source cannot be acquired.
        """

    def _make_record(self, source_id: str, origin: str, payload: bytes = b"") -> ProcessingRecord:
        return ProcessingRecord(
            category=classify(source_id),
            source_id=source_id,
            origin=origin,
            description=self.initial_description,
            annotations={
                LOADED_FROM_KEY: self.loaded_from,
                SOURCE_PATH_KEY: source_id,
            },
            payload=payload,
        )
