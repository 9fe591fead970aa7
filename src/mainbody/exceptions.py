"""Mainbody custom exceptions."""

class MainbodyError(Exception):
    """Base exception for all mainbody errors."""


class ExtractionError(MainbodyError):
    """Errors raised by the extraction core."""


class MalformedInputError(ExtractionError):
    """The source cannot be read or parsed into a document tree."""


class DocumentTooDeepError(MalformedInputError):
    """The document nests elements deeper than the configured limit."""


class InvalidBaseURLError(ExtractionError):
    """The base URL given for resolving image sources does not parse."""


class EncodingConversionError(ExtractionError):
    """Transcoding a field from its declared charset failed."""


class FetchError(MainbodyError):
    """Errors while fetching a page over HTTP."""
