import random

from itempipe.config.settings import Settings
from itempipe.logging.logger import Log
from itempipe.processor.exceptions import CycleLimitExceededError
from itempipe.processor.handlers import (
    BaseHandler,
    DecompressHandler,
    ImageDecodeHandler,
    JsonParseHandler,
    UnknownHandler,
)
from itempipe.processor.models import Category, ProcessingRecord

DEFAULT_MAX_TRANSITIONS = 16


class DispatchEngine:
    """Routes a record through per-category handler lists until it is done.

    One dispatch pass runs the handler list registered for the record's
    current category. A pass that ends without ``done`` is a category
    transition and triggers another pass. At most ``max_transitions``
    transitions are allowed before the record is rejected with
    CycleLimitExceededError.

    The registry is only written during setup; ``process`` never mutates it,
    so one engine may serve concurrent calls on distinct records.
    """

    def __init__(
        self,
        max_transitions: int = DEFAULT_MAX_TRANSITIONS,
        fallback: BaseHandler | None = None,
    ) -> None:
        if max_transitions < 0:
            raise ValueError(f"max_transitions must be >= 0, got {max_transitions}")
        self._registry: dict[Category, list[BaseHandler]] = {}
        self._max_transitions = max_transitions
        self._fallback = fallback if fallback is not None else UnknownHandler()

    @property
    def max_transitions(self) -> int:
        return self._max_transitions

    def register(self, category: Category, handler: BaseHandler) -> "DispatchEngine":
        """Append a handler to the category's list; handlers run in registration order."""
        self._registry.setdefault(category, []).append(handler)
        Log.debug(f"Registered handler '{handler.name}' for category '{category.value}'")
        return self

    def handlers_for(self, category: Category) -> tuple[BaseHandler, ...]:
        return tuple(self._registry.get(category, ()))

    def process(self, record: ProcessingRecord) -> ProcessingRecord:
        """Drive *record* to completion in place and return it.

        A record that is already done is returned untouched.

        Raises:
            CycleLimitExceededError: if the record is still not done after
                the initial pass plus ``max_transitions`` re-entries.
        """
        for transition in range(self._max_transitions + 1):
            if record.done:
                break
            if transition:
                Log.debug(
                    f"Re-dispatching {record.source_id} as '{record.category.value}' "
                    f"(transition {transition})"
                )
            self._dispatch_once(record)
        else:
            if not record.done:
                raise CycleLimitExceededError(
                    record.source_id, record.category, self._max_transitions
                )
        return record

    def _dispatch_once(self, record: ProcessingRecord) -> None:
        handlers = self._registry.get(record.category)
        if handlers is None:
            Log.warning(
                f"No handlers registered for '{record.category.value}', "
                f"using fallback '{self._fallback.name}'"
            )
            self._fallback.process(record)
            # The fallback must terminate dispatch even if a custom one forgets to.
            record.done = True
            return

        for handler in handlers:
            handler.process(record)
            if record.done:
                return


def build_engine(settings: Settings, rng: random.Random | None = None) -> DispatchEngine:
    """Build a DispatchEngine with the standard handler for each category."""
    if rng is None:
        rng = random.Random(settings.random_seed)
    engine = DispatchEngine(max_transitions=settings.max_category_transitions)
    engine.register(
        Category.COMPRESSED,
        DecompressHandler(rng=rng, extensions=settings.decompress_extensions),
    )
    engine.register(Category.IMAGE, ImageDecodeHandler())
    engine.register(Category.JSON, JsonParseHandler())
    engine.register(Category.UNKNOWN, UnknownHandler())
    return engine
