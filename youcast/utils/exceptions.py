class YoucastError(Exception):
    """Base class for youcast exceptions."""


class ArgumentError(YoucastError):
    """Exception raised when the command line arguments are missing or invalid."""


class FetchError(YoucastError):
    """Exception raised when the channel feed cannot be retrieved."""


class ParseError(YoucastError):
    """Exception raised when the channel feed is malformed or lacks a required field."""


class DateFormatError(YoucastError):
    """Exception raised when a timestamp cannot be normalized."""


class ProbeError(YoucastError):
    """Exception raised when the duration probe fails or its output is unusable."""


class StorageError(YoucastError):
    """Exception raised when the audio folder cannot be read or modified."""


class TemplateRenderError(YoucastError):
    """Exception raised when a feed document cannot be rendered."""
