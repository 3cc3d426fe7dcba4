from typing import ClassVar

from itempipe.loaders.base import BaseLoader
from itempipe.logging.logger import Log
from itempipe.processor.models import ProcessingRecord


class BundleLoader(BaseLoader):
    """Loads ``bundle://`` sources packaged with the application."""

    loaded_from: ClassVar[str] = "Bundle"
    initial_description: ClassVar[str] = "Initial Bundle Content"

    def load(self, source_id: str) -> ProcessingRecord:
        Log.info(f"Loading data from Bundle: {source_id}")
        return self._make_record(source_id, origin="bundle")
