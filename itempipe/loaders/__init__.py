from itempipe.loaders.base import BaseLoader
from itempipe.loaders.factory import LoaderFactory, acquire

__all__ = ["BaseLoader", "LoaderFactory", "acquire"]
