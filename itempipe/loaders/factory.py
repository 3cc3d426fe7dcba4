from typing import ClassVar

from itempipe.config.settings import Settings
from itempipe.loaders.base import BaseLoader
from itempipe.loaders.bundle_loader import BundleLoader
from itempipe.loaders.exceptions import UnsupportedSchemeError
from itempipe.loaders.file_loader import FileLoader
from itempipe.loaders.http_loader import HttpLoader
from itempipe.processor.models import ProcessingRecord


class LoaderFactory:
    """Creates the loader matching a source identifier's scheme."""

    LOADERS: ClassVar[dict[str, type[BaseLoader]]] = {
        "file://": FileLoader,
        "http://": HttpLoader,
        "https://": HttpLoader,
        "bundle://": BundleLoader,
    }

    @classmethod
    def create(cls, source_id: str, settings: Settings) -> BaseLoader:
        for scheme, loader_cls in cls.LOADERS.items():
            if source_id.startswith(scheme):
                return loader_cls.from_settings(settings)
        raise UnsupportedSchemeError(
            f"No loader for source '{source_id}'. Supported schemes: {list(cls.LOADERS)}"
        )


def acquire(source_id: str, settings: Settings) -> ProcessingRecord:
    """Load the initial record for *source_id* using the matching loader."""
    return LoaderFactory.create(source_id, settings).load(source_id)
