"""
Common test fixtures and configurations for all tests
"""

import random
import shutil
import tempfile
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from pdfbib.utils.config import Config


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests"""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def config():
    """Default configuration"""
    return Config()


@pytest.fixture
def rng():
    """Seeded random source"""
    return random.Random(42)


@pytest.fixture
def sample_entry():
    """Single-line entry as printed by the extraction tool"""
    return "@article{tmpkey, author={Lennon, John and McCartney, Paul}, year={1967}}"


@pytest.fixture
def sample_bibtex_with_doi():
    """Multi-line entry with a DOI"""
    return """@article{smith2020,
  title={A Study of Things},
  author={Smith, Jane and Doe, John},
  year={2020},
  doi={10.1/abc}
}"""


@pytest.fixture
def bib_file(temp_dir):
    """Bibliography file with two entries"""
    path = temp_dir / "refs.bib"
    path.write_text(
        "@book{knuth1984,\n"
        "  author = {Knuth, Donald},\n"
        "  title = {The TeXbook},\n"
        "  year = {1984}\n"
        "}\n"
        "\n"
        "@article{existing,\n"
        "  author = {Doe, Jane},\n"
        "  year = 2001,\n"
        "  doi = {10.1/ABC}\n"
        "}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def pdf_file(temp_dir):
    """Placeholder PDF (the external tool is mocked)"""
    path = temp_dir / "paper.pdf"
    path.write_bytes(b"%PDF-1.4\n")
    return path


@pytest.fixture
def tool_output():
    """Patch the external tool run; set `.stdout` on the returned mock"""
    with patch("pdfbib.core.invoker.subprocess.run") as mock_run:
        completed = Mock()
        completed.returncode = 0
        completed.stdout = ""
        mock_run.return_value = completed
        yield mock_run
