"""Exceptions raised by the exporters.

Every failure during an export run is reported as an ``ExportError``. The
subclasses only record which stage failed; callers normally catch the base
class, log it and stop.
"""


class ExportError(Exception):
    """An export step failed and the run cannot continue."""


class SessionError(ExportError):
    """The AWS session or client could not be created."""


class RemoteCallError(ExportError):
    """A scan, list, get or parameter fetch failed."""


class ConversionError(ExportError):
    """A stored item could not be converted to a plain record."""


class SerializationError(ExportError):
    """Records could not be encoded as JSON."""


class OutputWriteError(ExportError):
    """A directory or file under the output root could not be written."""
