from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    """Content kind of a record; selects which handlers run next."""

    IMAGE = "image"
    JSON = "json"
    COMPRESSED = "compressed"
    UNKNOWN = "unknown"


@dataclass
class ProcessingRecord:
    """Accumulates state as an item moves through the dispatch loop.

    ``origin`` is stamped by the loader and never touched by handlers.
    ``annotations`` only grows or overwrites keys; later actions supersede
    earlier entries under the same key.
    """

    category: Category
    source_id: str
    origin: str
    description: str
    done: bool = False
    annotations: dict[str, str] = field(default_factory=dict)
    payload: bytes = b""
