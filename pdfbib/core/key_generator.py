"""
Citation key generation module
Keys follow `surname + year + "-" + two random lowercase letters`
"""

import random
import re
import string

from .entry_parser import FieldExtractor, extract_field, extract_surname, parse_entry_header
from .exceptions import EntryNotFoundError, MissingFieldError

SUFFIX_LENGTH = 2

KEY_UNSAFE_PATTERN = re.compile(r"[^\w]")


def random_suffix(rng: random.Random | None = None) -> str:
    """Two random lowercase ASCII letters"""
    rng = rng or random
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(SUFFIX_LENGTH))


def clean_key_part(value: str) -> str:
    """Drop BibTeX markup and characters not allowed in a citation key"""
    return KEY_UNSAFE_PATTERN.sub("", value)


def make_key(surname: str, year: str, rng: random.Random | None = None) -> str:
    """Combine surname, year and a random suffix into a citation key"""
    return f"{surname.lower()}{year}-{random_suffix(rng)}"


def generate_key(
    entry_text: str,
    extractor: FieldExtractor | None = None,
    rng: random.Random | None = None
) -> str:
    """
    Generate a fresh citation key from an entry's first author and year

    Not deterministic: every call draws a new suffix.

    Raises:
        MissingFieldError: if author or year cannot be extracted
    """
    author = extract_field(entry_text, "author", extractor) or ""
    year = clean_key_part(extract_field(entry_text, "year", extractor) or "")
    surname = clean_key_part(extract_surname(author)) if author.strip() else ""

    if not surname or not year:
        msg = "Cannot extract author or year from entry"
        raise MissingFieldError(msg)

    return make_key(surname, year, rng)


def regenerate_key(
    entry_text: str,
    extractor: FieldExtractor | None = None,
    rng: random.Random | None = None
) -> tuple[str, str]:
    """
    Replace the key in an entry header with a freshly generated one

    Returns:
        New entry text and the new key

    Raises:
        EntryNotFoundError: if the text has no entry header
        MissingFieldError: if author or year cannot be extracted
    """
    header = parse_entry_header(entry_text)
    if header is None:
        msg = "No BibTeX entry header found"
        raise EntryNotFoundError(msg)

    key = generate_key(entry_text, extractor, rng)
    new_text = entry_text[:header.key_start] + key + entry_text[header.key_end:]
    return new_text, key
