from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture()
def quiet_log() -> Iterator[MagicMock]:
    """Stop the CLI from attaching a stdout handler during output capture."""
    with patch("itempipe.main.Log") as mock_log:
        yield mock_log
