"""
Configuration management module
"""

from dataclasses import dataclass
from pathlib import Path

from ..core.entry_parser import BibtexParserFieldExtractor, FieldExtractor, RegexFieldExtractor

FIELD_EXTRACTORS = ["regex", "bibtexparser"]


@dataclass
class Config:
    """pdfbib configuration class"""

    # Default target bibliography file (prompted for when unset)
    bib_file: str | Path | None = None

    # External extraction tool, resolved via PATH
    command: str = "pdf2bib"

    # Field used for duplicate detection
    id_field: str = "doi"

    # Field extraction backend
    field_extractor: str = "regex"  # "regex" | "bibtexparser"

    # Regenerate the citation key of freshly extracted entries
    auto_key: bool = True

    # Operation settings
    verbose: bool = False
    log_file: str | Path | None = None

    def __post_init__(self):
        """Validate and initialize settings"""

        if self.bib_file:
            self.bib_file = Path(self.bib_file).expanduser()
        else:
            self.bib_file = None

        if self.log_file:
            self.log_file = Path(self.log_file).expanduser()

        self.command = (self.command or "").strip()
        if not self.command:
            msg = "Invalid command: external tool command must not be empty"
            raise ValueError(msg)

        if self.field_extractor not in FIELD_EXTRACTORS:
            msg = f"Invalid field_extractor: {self.field_extractor}"
            raise ValueError(msg)

        self.id_field = self.id_field.strip().lower()
        if not self.id_field:
            msg = "Invalid id_field: must not be empty"
            raise ValueError(msg)

    def get_extractor(self) -> FieldExtractor:
        """Create the field extractor selected by this configuration"""
        if self.field_extractor == "bibtexparser":
            return BibtexParserFieldExtractor()
        return RegexFieldExtractor()
