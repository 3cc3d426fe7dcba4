class AcquisitionError(Exception):
    """Base exception for all loader-related errors."""


class UnsupportedSchemeError(AcquisitionError):
    """Raised when no loader is registered for a source's scheme."""


class SourceNotFoundError(AcquisitionError):
    """Raised when a local source file does not exist."""


class SourceReadError(AcquisitionError):
    """Raised when a local source file cannot be read."""


class SourceNetworkError(AcquisitionError):
    """Raised when a remote source cannot be fetched."""


class SourceOutsideRootError(AcquisitionError):
    """Raised when a local source path resolves outside the files root."""
