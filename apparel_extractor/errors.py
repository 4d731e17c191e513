"""
Errors raised while acquiring document text.

Extraction itself never raises: every field degrades to a sentinel value.
"""


class ExtractionError(Exception):
    """Base class for failures surfaced to the caller."""


class AcquisitionFailure(ExtractionError):
    """The input producer could not yield text (e.g. an unreadable PDF)."""


class ReadFailure(ExtractionError):
    """Raw bytes or text could not be read from the source."""
