from typing import ClassVar

import httpx

from itempipe.config.settings import Settings
from itempipe.loaders.base import BaseLoader
from itempipe.loaders.exceptions import SourceNetworkError
from itempipe.logging.logger import Log
from itempipe.processor.models import ProcessingRecord


class HttpLoader(BaseLoader):
    """Loads ``http://`` and ``https://`` sources, optionally fetching the body."""

    loaded_from: ClassVar[str] = "URL"
    initial_description: ClassVar[str] = "Initial URL Content"

    def __init__(
        self,
        *,
        timeout_seconds: int = 30,
        read_payload: bool = False,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._read_payload = read_payload
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpLoader":
        return cls(
            timeout_seconds=settings.http_timeout_seconds,
            read_payload=settings.acquisition_read_payload,
        )

    def load(self, source_id: str) -> ProcessingRecord:
        Log.info(f"Loading data from URL: {source_id}")
        origin = "https" if source_id.startswith("https://") else "http"
        payload = self._fetch(source_id) if self._read_payload else b""
        return self._make_record(source_id, origin=origin, payload=payload)

    def _fetch(self, url: str) -> bytes:
        try:
            with httpx.Client(timeout=self._timeout_seconds, transport=self._transport) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise SourceNetworkError(
                f"HTTP {exc.response.status_code} fetching {url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceNetworkError(f"Network error fetching {url}: {exc}") from exc
        Log.debug(f"Fetched {len(response.content)} bytes from {url}")
        return response.content
