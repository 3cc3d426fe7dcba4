import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar

from itempipe.logging.logger import Log
from itempipe.processor.classifier import classify
from itempipe.processor.models import ProcessingRecord

DEFAULT_EXTENSIONS: tuple[str, ...] = (".jpg", ".json", ".zip")

ACTION_KEY = "Action"
UNCOMPRESSED_KEY = "File Uncompressed"


class BaseHandler(ABC):
    """Contract for a transformation applied to a record in place.

    A handler that sets ``record.done`` ends dispatch for that record; one
    that leaves it unset is expected to change ``record.category``.
    """

    name: ClassVar[str] = "handler"

    @abstractmethod
    def process(self, record: ProcessingRecord) -> None:
        raise NotImplementedError


class DecompressHandler(BaseHandler):
    """Simulates unpacking an archive into a randomly typed artifact.

    Does not finish the record: the new source id is re-classified and the
    record goes back to dispatch under its new category.
    """

    name: ClassVar[str] = "decompress"

    def __init__(
        self,
        rng: random.Random | None = None,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        if not extensions:
            raise ValueError("DecompressHandler requires at least one extension")
        self._rng = rng if rng is not None else random.Random()
        self._extensions = tuple(extensions)

    def process(self, record: ProcessingRecord) -> None:
        extension = self._rng.choice(self._extensions)
        stem, dot, _ = record.source_id.rpartition(".")
        new_source_id = (stem if dot else record.source_id) + extension

        Log.info(f"Decompressing {record.source_id} -> {new_source_id}")
        record.source_id = new_source_id
        record.description = "Decompressed Content"
        record.category = classify(new_source_id)
        record.annotations[UNCOMPRESSED_KEY] = extension
        record.annotations[ACTION_KEY] = "File Decompressed"


class ImageDecodeHandler(BaseHandler):
    name: ClassVar[str] = "image_decode"

    def process(self, record: ProcessingRecord) -> None:
        Log.info(f"Decoding image {record.source_id}")
        record.description = "Decoded Image"
        record.annotations[ACTION_KEY] = "Image Decoded"
        record.done = True


class JsonParseHandler(BaseHandler):
    name: ClassVar[str] = "json_parse"

    def process(self, record: ProcessingRecord) -> None:
        Log.info(f"Parsing JSON {record.source_id}")
        record.description = "JSON Parsed"
        record.annotations[ACTION_KEY] = "JSON Parsed"
        record.done = True


class UnknownHandler(BaseHandler):
    """Terminal handler for unsupported content; also the engine's fallback."""

    name: ClassVar[str] = "unknown"

    def process(self, record: ProcessingRecord) -> None:
        Log.warning(f"Unsupported file type for {record.source_id}")
        record.description = "Unsupported File Type"
        record.annotations[ACTION_KEY] = "No action"
        record.done = True
