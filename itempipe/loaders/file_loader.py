from pathlib import Path
from typing import ClassVar

from itempipe.config.settings import Settings
from itempipe.loaders.base import BaseLoader
from itempipe.loaders.exceptions import (
    SourceNotFoundError,
    SourceOutsideRootError,
    SourceReadError,
)
from itempipe.logging.logger import Log
from itempipe.processor.models import ProcessingRecord

SCHEME = "file://"
PLACEHOLDER_PAYLOAD = b"X" * 100


def source_file_path(files_root: Path, source_id: str) -> Path:
    """Build path to a file source: {files_root}/{path after file://}

    Raises:
        SourceOutsideRootError: if the path resolves outside *files_root*
            (absolute paths, ``..`` segments, symlinks leading out).
    """
    root = files_root.resolve()
    path = (root / source_id.removeprefix(SCHEME)).resolve()
    if not path.is_relative_to(root):
        raise SourceOutsideRootError(f"Source '{source_id}' resolves outside {root}")
    return path


class FileLoader(BaseLoader):
    """Loads ``file://`` sources, optionally reading their bytes from disk."""

    loaded_from: ClassVar[str] = "File System"
    initial_description: ClassVar[str] = "Initial File Content"

    def __init__(self, files_root: Path | None = None, read_payload: bool = False) -> None:
        self._files_root = files_root if files_root is not None else Path(".")
        self._read_payload = read_payload

    @classmethod
    def from_settings(cls, settings: Settings) -> "FileLoader":
        return cls(
            files_root=Path(settings.files_root),
            read_payload=settings.acquisition_read_payload,
        )

    def load(self, source_id: str) -> ProcessingRecord:
        """Stamp a file record; payload is a placeholder unless reading is enabled.

        Raises:
            SourceOutsideRootError: if reading is enabled and the path leaves files_root.
            SourceNotFoundError: if reading is enabled and the file is missing.
            SourceReadError: if reading is enabled and the file cannot be read.
        """
        Log.info(f"Loading file: {source_id}")
        payload = self._read(source_id) if self._read_payload else PLACEHOLDER_PAYLOAD
        return self._make_record(source_id, origin="file", payload=payload)

    def _read(self, source_id: str) -> bytes:
        path = source_file_path(self._files_root, source_id)
        if not path.is_file():
            raise SourceNotFoundError(f"File not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise SourceReadError(f"Failed to read {path}: {exc}") from exc
