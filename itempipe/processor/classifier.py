from itempipe.processor.models import Category

# Checked in order; the first marker found anywhere in the identifier wins.
_MARKERS: tuple[tuple[str, Category], ...] = (
    (".jpg", Category.IMAGE),
    (".json", Category.JSON),
    (".zip", Category.COMPRESSED),
)


def classify(source_id: str) -> Category:
    """Map a source identifier to its category by substring marker.

    "a.zip.json" is JSON, not COMPRESSED: priority order decides, not position.
    """
    for marker, category in _MARKERS:
        if marker in source_id:
            return category
    return Category.UNKNOWN
