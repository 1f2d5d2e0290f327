"""Custom exceptions for the Norton Guide reader library."""


class NGError(Exception):
    """Base class for exceptions in this module."""

    pass


class NotAGuideError(NGError):
    """Raised when the file is not a Norton Guide or Expert Help file."""

    pass


class MalformedStructureError(NGError):
    """Raised when a record in the guide can't be decoded."""

    pass


class GuideReadError(NGError):
    """Raised when the whole of a guide file could not be read."""

    pass
