"""
pdfbib: BibTeX entries from PDF files via an external extraction tool
"""

__version__ = "0.1.0"

from .core.duplicate_finder import DuplicateMatch, find_duplicate, normalize_identifier
from .core.entry_parser import (
    BibtexParserFieldExtractor,
    FieldExtractor,
    RegexFieldExtractor,
    extract_field,
    extract_surname,
)
from .core.exceptions import (
    EntryNotFoundError,
    ExtractionError,
    FileAccessError,
    MissingFieldError,
    NoInputFileError,
    PdfBibError,
)
from .core.invoker import run_extractor
from .core.key_generator import generate_key, regenerate_key
from .core.operations import (
    OperationResult,
    add_to_bibliography,
    extract_entry,
    insert_entry,
    regenerate_key_at,
)
from .utils.config import Config
from .utils.logging_config import get_logger, setup_logging

__all__ = [
    "BibtexParserFieldExtractor",
    "Config",
    "DuplicateMatch",
    # Errors
    "EntryNotFoundError",
    "ExtractionError",
    "FileAccessError",
    # Parsing
    "FieldExtractor",
    "MissingFieldError",
    "NoInputFileError",
    "OperationResult",
    "PdfBibError",
    "RegexFieldExtractor",
    # Metadata
    "__version__",
    # Operations
    "add_to_bibliography",
    "extract_entry",
    "extract_field",
    "extract_surname",
    "find_duplicate",
    "generate_key",
    "get_logger",
    "insert_entry",
    "normalize_identifier",
    "regenerate_key",
    "regenerate_key_at",
    "run_extractor",
    # Logging
    "setup_logging",
]
