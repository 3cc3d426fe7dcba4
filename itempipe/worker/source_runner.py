from itempipe.config.settings import Settings
from itempipe.loaders.exceptions import AcquisitionError
from itempipe.loaders.factory import LoaderFactory
from itempipe.logging.logger import Log
from itempipe.processor.engine import DispatchEngine
from itempipe.processor.exceptions import ProcessorError
from itempipe.worker.models import SourceResult


class SourceRunner:
    """Run one source: acquire, dispatch, and turn domain errors into a result."""

    def __init__(
        self,
        engine: DispatchEngine,
        settings: Settings,
        loader_factory: type[LoaderFactory] = LoaderFactory,
    ) -> None:
        self._engine = engine
        self._settings = settings
        self._loader_factory = loader_factory

    def run(self, source_id: str) -> SourceResult:
        """Process a single source.

        AcquisitionError and ProcessorError are reported in the result;
        anything else propagates to the caller.
        """
        Log.info(f"Processing: {source_id}")
        try:
            loader = self._loader_factory.create(source_id, self._settings)
            record = loader.load(source_id)
        except AcquisitionError as exc:
            Log.error(f"No suitable loader or source unavailable for {source_id}: {exc}")
            return SourceResult(source_id=source_id, error=str(exc))

        try:
            self._engine.process(record)
        except ProcessorError as exc:
            Log.error(f"Dispatch failed for {source_id}: {exc}")
            return SourceResult(source_id=source_id, record=record, error=str(exc))

        Log.info(f"Processing completed for: {record.source_id}")
        return SourceResult(source_id=source_id, record=record)
