"""
File I/O utility module
"""

from pathlib import Path

from ..core.exceptions import FileAccessError


def ensure_directory(path: Path) -> None:
    """Create directory if it doesn't exist"""
    path.mkdir(parents=True, exist_ok=True)


def read_text_file(file_path: Path, encoding: str = "utf-8") -> str | None:
    """
    Read text file

    Returns:
        File content, or None if the file does not exist

    Raises:
        FileAccessError: if the file exists but cannot be read or decoded
    """
    try:
        with open(file_path, encoding=encoding) as f:
            return f.read()
    except FileNotFoundError:
        return None
    except UnicodeDecodeError as e:
        msg = f"Cannot decode {file_path} as {encoding}"
        raise FileAccessError(msg) from e
    except OSError as e:
        msg = f"Cannot read {file_path}: {e.strerror or e}"
        raise FileAccessError(msg) from e


def write_text_file(file_path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text file, creating parent directories"""
    try:
        ensure_directory(Path(file_path).parent)
        with open(file_path, "w", encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        msg = f"Cannot write {file_path}: {e.strerror or e}"
        raise FileAccessError(msg) from e


def append_entry(file_path: Path, entry: str, encoding: str = "utf-8") -> int:
    """
    Append an entry at end-of-file, separated from existing content by a blank line

    Returns:
        Character offset of the appended entry
    """
    existing = read_text_file(file_path, encoding) or ""

    if not existing.strip():
        separator = ""
    elif existing.endswith("\n\n"):
        separator = ""
    elif existing.endswith("\n"):
        separator = "\n"
    else:
        separator = "\n\n"

    try:
        ensure_directory(Path(file_path).parent)
        with open(file_path, "a", encoding=encoding) as f:
            f.write(separator + entry.strip() + "\n")
    except OSError as e:
        msg = f"Cannot write {file_path}: {e.strerror or e}"
        raise FileAccessError(msg) from e

    return len(existing) + len(separator)


def insert_at_line(text: str, line: int, insertion: str) -> tuple[str, int]:
    """
    Insert text before the given 1-based line

    Lines past the end append to the text.

    Returns:
        New text and the character offset of the insertion
    """
    offset = line_to_offset(text, line)
    if not insertion.endswith("\n"):
        insertion += "\n"
    if offset == len(text) and text and not text.endswith("\n"):
        return f"{text}\n{insertion}", offset + 1
    return text[:offset] + insertion + text[offset:], offset


def line_to_offset(text: str, line: int) -> int:
    """Character offset of the start of a 1-based line, clamped to the text"""
    if line <= 1:
        return 0

    offset = 0
    for _ in range(line - 1):
        newline = text.find("\n", offset)
        if newline == -1:
            return len(text)
        offset = newline + 1
    return offset

