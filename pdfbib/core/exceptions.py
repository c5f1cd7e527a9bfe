"""
Error types raised by pdfbib operations
"""


class PdfBibError(Exception):
    """Base class for failures reported to the user as a status message"""


class ExtractionError(PdfBibError):
    """The external tool produced no usable bibliography entry"""


class MissingFieldError(PdfBibError):
    """A field required for key generation could not be extracted"""


class EntryNotFoundError(PdfBibError):
    """No bibliography entry header was found where one was expected"""


class NoInputFileError(PdfBibError):
    """No PDF file could be resolved from the current context"""


class FileAccessError(PdfBibError):
    """A file exists but cannot be read or written as text"""
