import random
from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from itempipe.processor.models import Category, ProcessingRecord


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables from leaking into Settings defaults."""
    for name in (
        "APP_ENV",
        "LOG_LEVEL",
        "MAX_CATEGORY_TRANSITIONS",
        "DECOMPRESS_EXTENSIONS",
        "RANDOM_SEED",
        "BATCH_MAX_WORKERS",
        "ACQUISITION_READ_PAYLOAD",
        "FILES_ROOT",
        "HTTP_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def make_rng() -> Callable[..., MagicMock]:
    """Build a random source whose ``choice`` returns the given extensions in order."""

    def _make(*extensions: str) -> MagicMock:
        rng = MagicMock(spec=random.Random)
        if len(extensions) == 1:
            rng.choice.return_value = extensions[0]
        else:
            rng.choice.side_effect = list(extensions)
        return rng

    return _make


@pytest.fixture()
def make_record() -> Callable[..., ProcessingRecord]:
    def _make(
        source_id: str = "file://example.jpg",
        category: Category = Category.IMAGE,
        origin: str = "file",
        description: str = "Initial File Content",
    ) -> ProcessingRecord:
        return ProcessingRecord(
            category=category,
            source_id=source_id,
            origin=origin,
            description=description,
        )

    return _make
