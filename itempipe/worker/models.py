from dataclasses import dataclass

from itempipe.processor.models import ProcessingRecord


@dataclass
class SourceResult:
    """Outcome of running one source through acquisition and dispatch."""

    source_id: str
    record: ProcessingRecord | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
