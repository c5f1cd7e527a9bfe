"""
User-facing operations
Each operation is a one-shot transaction returning a one-line status message
"""

from dataclasses import dataclass
from pathlib import Path

from ..utils.config import Config
from ..utils.file_utils import (
    append_entry,
    insert_at_line,
    line_to_offset,
    read_text_file,
    write_text_file,
)
from ..utils.logging_config import get_logger
from .duplicate_finder import DuplicateMatch, find_duplicate
from .entry_parser import extract_field, locate_entry, parse_entry_header
from .exceptions import EntryNotFoundError, MissingFieldError, PdfBibError
from .invoker import run_extractor
from .key_generator import regenerate_key

logger = get_logger("operations")


@dataclass
class OperationResult:
    """Outcome of an operation"""
    message: str
    entry: str = ""
    key: str = ""
    path: Path | None = None
    offset: int | None = None
    duplicate: DuplicateMatch | None = None


def _apply_auto_key(entry: str, config: Config) -> tuple[str, str]:
    """Regenerate the key if configured; keep the tool's key when that is not possible"""
    header = parse_entry_header(entry)
    key = header.key if header else ""

    if not config.auto_key:
        return entry, key

    try:
        return regenerate_key(entry, config.get_extractor())
    except (MissingFieldError, EntryNotFoundError) as e:
        logger.warning(f"Keeping extracted key '{key}': {e}")
        return entry, key


def extract_entry(pdf_path: Path, config: Config) -> OperationResult:
    """Run the external tool and return the (re-keyed) entry"""
    entry = run_extractor(pdf_path, config)
    entry, key = _apply_auto_key(entry, config)

    logger.info(f"Extracted entry {key} from {pdf_path}")
    return OperationResult(
        message=f"Extracted bib-info from {Path(pdf_path).name}",
        entry=entry,
        key=key,
    )


def insert_entry(pdf_path: Path, document: Path, line: int, config: Config) -> OperationResult:
    """Insert the PDF's entry into a document before the given 1-based line"""
    extracted = extract_entry(pdf_path, config)

    text = read_text_file(document) or ""
    new_text, offset = insert_at_line(text, line, extracted.entry)
    write_text_file(document, new_text)

    logger.info(f"Inserted {extracted.key} into {document} at offset {offset}")
    return OperationResult(
        message=f"Inserted bib-info for {Path(pdf_path).name}",
        entry=extracted.entry,
        key=extracted.key,
        path=Path(document),
        offset=offset,
    )


def regenerate_key_at(bib_path: Path, line: int, config: Config) -> OperationResult:
    """Regenerate the key of the entry at a cursor line and rewrite the file"""
    text = read_text_file(bib_path)
    if text is None:
        msg = f"Cannot read {bib_path}"
        raise EntryNotFoundError(msg)

    start, end = locate_entry(text, line_to_offset(text, line))
    new_entry, key = regenerate_key(text[start:end], config.get_extractor())
    write_text_file(bib_path, text[:start] + new_entry + text[end:])

    logger.info(f"Regenerated key {key} in {bib_path}")
    return OperationResult(
        message=f"New key: {key}",
        entry=new_entry,
        key=key,
        path=Path(bib_path),
        offset=start,
    )


def add_to_bibliography(pdf_path: Path, config: Config, bib_path: Path | None = None) -> OperationResult:
    """
    Append the PDF's entry to a bibliography file unless it is already there

    Duplicates are detected by the configured identifier field. A duplicate
    is reported with its location and nothing is appended.
    """
    bib_path = bib_path or config.bib_file
    if bib_path is None:
        msg = "No bibliography file given"
        raise PdfBibError(msg)
    bib_path = Path(bib_path)

    entry = run_extractor(pdf_path, config)

    identifier = extract_field(entry, config.id_field, config.get_extractor())
    match = find_duplicate(identifier, bib_path, config.id_field)
    if match:
        logger.info(f"{config.id_field} {identifier} already present as {match.key}")
        return OperationResult(
            message=f"Entry already exists in {bib_path.name} at line {match.line} ({match.key})",
            entry=entry,
            key=match.key,
            path=bib_path,
            offset=match.offset,
            duplicate=match,
        )

    entry, key = _apply_auto_key(entry, config)
    offset = append_entry(bib_path, entry)

    logger.info(f"Appended {key} to {bib_path}")
    return OperationResult(
        message=f"Added {key} to {bib_path.name}",
        entry=entry,
        key=key,
        path=bib_path,
        offset=offset,
    )
