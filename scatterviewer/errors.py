"""Exceptions raised by the scatter viewer core."""


class ScatterViewerError(Exception):
    """Base class for all scatter viewer errors."""


class InvalidSlotError(ScatterViewerError, ValueError):
    """Raised when an image slot other than left/right is requested."""


class DatasetError(ScatterViewerError, ValueError):
    """Raised when a dataset cannot be loaded or is malformed."""
