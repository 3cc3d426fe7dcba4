from itempipe.processor.models import Category


class ProcessorError(Exception):
    """Base exception for all dispatch-related errors."""


class CycleLimitExceededError(ProcessorError):
    """Raised when a record keeps re-entering dispatch without finishing."""

    def __init__(self, source_id: str, category: Category, transitions: int) -> None:
        super().__init__(
            f"Cycle limit exceeded for '{source_id}': still '{category.value}' "
            f"after {transitions} category transitions"
        )
        self.source_id = source_id
        self.category = category
        self.transitions = transitions
