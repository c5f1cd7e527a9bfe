"""
Input file selection module
Resolves which PDF to operate on from the current context
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from ..utils.logging_config import get_logger
from .exceptions import NoInputFileError

logger = get_logger("selector")

PDF_SUFFIX = ".pdf"


def is_pdf(path: Path) -> bool:
    return Path(path).suffix.lower() == PDF_SUFFIX


@dataclass
class ActiveView:
    """What the user currently has open"""
    path: Path | None = None
    kind: str = "text"  # "pdf" | "listing" | "text"


class ContextResolver:
    """A source of the input PDF; returns None when it does not apply"""

    name = "context"

    def resolve(self) -> Path | None:
        raise NotImplementedError


class ActiveDocumentResolver(ContextResolver):
    """Use the file shown by the active view when it is a PDF viewer"""

    name = "active-document"

    def __init__(self, view: ActiveView | None):
        self.view = view

    def resolve(self) -> Path | None:
        if self.view is None or self.view.kind != "pdf" or self.view.path is None:
            return None
        return Path(self.view.path)


class ListingResolver(ContextResolver):
    """Use the directory-listing item under the cursor when it is a PDF"""

    name = "listing"

    def __init__(self, directory: Path | None, item: str | None):
        self.directory = directory
        self.item = item

    def resolve(self) -> Path | None:
        if self.directory is None or not self.item:
            return None
        candidate = Path(self.directory) / self.item
        if not is_pdf(candidate):
            logger.debug(f"Listing item {self.item} is not a PDF")
            return None
        return candidate


class PromptResolver(ContextResolver):
    """Ask for a path interactively, accepting only PDF files"""

    name = "prompt"

    def __init__(self, ask: Callable[[str], str], message: str = "PDF file"):
        self.ask = ask
        self.message = message

    def resolve(self) -> Path | None:
        while True:
            answer = (self.ask(self.message) or "").strip()
            if not answer:
                return None
            path = Path(answer).expanduser()
            if is_pdf(path):
                return path
            logger.warning(f"Not a PDF file: {answer}")


def resolve_pdf(resolvers: Iterable[ContextResolver]) -> Path:
    """
    Try resolvers in order and return the first path found

    Raises:
        NoInputFileError: if no resolver yields a path
    """
    for resolver in resolvers:
        path = resolver.resolve()
        if path is not None:
            logger.debug(f"Input file from {resolver.name}: {path}")
            return path

    msg = "No PDF file selected"
    raise NoInputFileError(msg)
