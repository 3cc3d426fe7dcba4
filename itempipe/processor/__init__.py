from itempipe.processor.classifier import classify
from itempipe.processor.engine import DispatchEngine, build_engine
from itempipe.processor.handlers import (
    BaseHandler,
    DecompressHandler,
    ImageDecodeHandler,
    JsonParseHandler,
    UnknownHandler,
)
from itempipe.processor.models import Category, ProcessingRecord

__all__ = [
    "BaseHandler",
    "Category",
    "DecompressHandler",
    "DispatchEngine",
    "ImageDecodeHandler",
    "JsonParseHandler",
    "ProcessingRecord",
    "UnknownHandler",
    "build_engine",
    "classify",
]
