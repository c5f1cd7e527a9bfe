"""
Citation parsing module
Extracts field values and entry boundaries from loosely structured BibTeX text
"""

import re
from dataclasses import dataclass

from .exceptions import EntryNotFoundError

HEADER_PATTERN = re.compile(r"@\s*(\w+)\s*\{\s*([^,\s{}]*)\s*,", re.MULTILINE)


@dataclass
class EntryHeader:
    """Entry header: `@type{key,`"""
    entry_type: str
    key: str
    start: int
    end: int
    key_start: int
    key_end: int


class FieldExtractor:
    """Extract a field value by name from entry text"""

    def extract(self, entry_text: str, name: str) -> str | None:
        raise NotImplementedError


class RegexFieldExtractor(FieldExtractor):
    """
    Pattern-based field lookup

    The first `name = value` assignment wins. Values may be brace-delimited
    (nested braces are balanced), quote-delimited, or a bare token.
    """

    def extract(self, entry_text: str, name: str) -> str | None:
        pattern = re.compile(rf"(?<![\w-]){re.escape(name)}\s*=\s*", re.IGNORECASE)

        for match in pattern.finditer(entry_text):
            value = _read_value(entry_text, match.end())
            if value is not None:
                return value.strip()

        return None


class BibtexParserFieldExtractor(FieldExtractor):
    """Field lookup backed by bibtexparser's BibTeX grammar"""

    def extract(self, entry_text: str, name: str) -> str | None:
        import bibtexparser
        from bibtexparser.bparser import BibTexParser

        parser = BibTexParser(common_strings=True)
        db = bibtexparser.loads(entry_text, parser)

        if not db.entries:
            return None

        value = db.entries[0].get(name.lower())
        if value is None:
            return None
        return str(value).strip()


def _read_value(text: str, pos: int) -> str | None:
    """Read a field value starting at `pos`"""
    if pos >= len(text):
        return None

    opener = text[pos]

    if opener == "{":
        depth = 0
        for i in range(pos, len(text)):
            if text[i] == "{":
                depth += 1
            elif text[i] == "}":
                depth -= 1
                if depth == 0:
                    return text[pos + 1:i]
        return None

    if opener == '"':
        i = pos + 1
        while i < len(text):
            if text[i] == '"' and text[i - 1] != "\\":
                return text[pos + 1:i]
            i += 1
        return None

    match = re.match(r"[^,}\n]+", text[pos:])
    if match:
        return match.group(0)
    return None


_default_extractor = RegexFieldExtractor()


def extract_field(entry_text: str, name: str, extractor: FieldExtractor | None = None) -> str | None:
    """Extract a named field value from entry text"""
    return (extractor or _default_extractor).extract(entry_text, name)


def extract_surname(author: str) -> str:
    """
    First author's surname from an "and"-separated author list

    Handles "Last, First" and "First Last"; single tokens are returned as-is.
    """
    first_author = author.split(" and ", 1)[0].strip()

    if "," in first_author:
        return first_author.split(",", 1)[0].strip()

    parts = first_author.split()
    if len(parts) > 1:
        return parts[-1]

    return first_author


def parse_entry_header(entry_text: str) -> EntryHeader | None:
    """Find the first `@type{key,` header in the text"""
    match = HEADER_PATTERN.search(entry_text)
    if not match:
        return None

    return EntryHeader(
        entry_type=match.group(1),
        key=match.group(2),
        start=match.start(),
        end=match.end(),
        key_start=match.start(2),
        key_end=match.end(2),
    )


def find_entry_headers(text: str) -> list[EntryHeader]:
    """All entry headers in a bibliography text, in order"""
    return [
        EntryHeader(
            entry_type=m.group(1),
            key=m.group(2),
            start=m.start(),
            end=m.end(),
            key_start=m.start(2),
            key_end=m.end(2),
        )
        for m in HEADER_PATTERN.finditer(text)
    ]


def locate_entry(text: str, offset: int) -> tuple[int, int]:
    """
    Span of the entry containing `offset`

    The entry starts at the last header on or before the line of `offset`
    and runs to the next header or the end of the text.

    Raises:
        EntryNotFoundError: if no header precedes `offset`
    """
    line_end = text.find("\n", offset)
    if line_end == -1:
        line_end = len(text)

    current = None
    following = None
    for header in find_entry_headers(text):
        if header.start <= line_end:
            current = header
        else:
            following = header
            break

    if current is None:
        msg = "No BibTeX entry found at cursor"
        raise EntryNotFoundError(msg)

    end = following.start if following else len(text)
    return current.start, end
