"""
Duplicate detection module
Finds an existing entry sharing a unique identifier (e.g. a DOI)
"""

import re
from dataclasses import dataclass
from pathlib import Path

from ..utils.file_utils import read_text_file
from ..utils.logging_config import get_logger
from .entry_parser import HEADER_PATTERN, RegexFieldExtractor

logger = get_logger("duplicate_finder")

_line_extractor = RegexFieldExtractor()


@dataclass
class DuplicateMatch:
    """Location of an existing entry"""
    offset: int
    line: int
    key: str


def normalize_identifier(value: str) -> str:
    """Strip brace/quote delimiters and spaces, lowercase"""
    return re.sub(r"[{}\"\s]", "", value).lower()


def find_duplicate_in_text(
    identifier: str | None,
    text: str,
    field: str = "doi"
) -> DuplicateMatch | None:
    """
    Scan bibliography text line by line for an entry with a matching identifier

    Returns:
        The first matching entry's location, or None
    """
    if not identifier:
        return None
    candidate = normalize_identifier(identifier)
    if not candidate:
        return None

    entry_offset = None
    entry_line = None
    entry_key = ""
    offset = 0

    for line_no, line in enumerate(text.splitlines(keepends=True), start=1):
        header = HEADER_PATTERN.search(line)
        if header:
            entry_offset = offset + header.start()
            entry_line = line_no
            entry_key = header.group(2)

        value = _line_extractor.extract(line, field)
        if value and entry_offset is not None and normalize_identifier(value) == candidate:
            return DuplicateMatch(offset=entry_offset, line=entry_line, key=entry_key)

        offset += len(line)

    return None


def find_duplicate(
    identifier: str | None,
    bib_path: Path,
    field: str = "doi"
) -> DuplicateMatch | None:
    """
    Look up an identifier in a bibliography file

    An empty identifier is never a duplicate; the file is not read.
    A missing file holds no duplicates; an unreadable one raises FileAccessError.
    """
    if not identifier:
        return None

    text = read_text_file(bib_path)
    if text is None:
        logger.debug(f"{bib_path} does not exist yet")
        return None

    return find_duplicate_in_text(identifier, text, field)
