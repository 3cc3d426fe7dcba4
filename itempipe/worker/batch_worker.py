from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from itempipe.config.settings import Settings
from itempipe.logging.logger import Log
from itempipe.worker.models import SourceResult
from itempipe.worker.source_runner import SourceRunner


class BatchWorker:
    """Runs a batch of independent sources, optionally on a thread pool.

    Each source gets its own record, so tasks share nothing but the
    engine's read-only registry. Results keep the input order.
    """

    def __init__(self, runner: SourceRunner, settings: Settings) -> None:
        self._runner = runner
        self._settings = settings

    def run(self, source_ids: Iterable[str]) -> list[SourceResult]:
        sources = list(source_ids)
        workers = self._settings.batch_max_workers
        Log.info(f"Batch started: {len(sources)} sources, {workers} worker(s)")

        if workers <= 1 or len(sources) <= 1:
            results = [self._runner.run(source_id) for source_id in sources]
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                results = list(pool.map(self._runner.run, sources))

        failed = sum(1 for result in results if not result.succeeded)
        Log.info(f"Batch finished: {len(results) - failed} succeeded, {failed} failed")
        return results
