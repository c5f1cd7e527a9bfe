"""
Test suite for input file selection
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from pdfbib.core.exceptions import NoInputFileError
from pdfbib.core.selector import (
    ActiveDocumentResolver,
    ActiveView,
    ListingResolver,
    PromptResolver,
    resolve_pdf,
)


class TestResolvers:
    """Test individual context resolvers"""

    def test_active_pdf_view(self):
        view = ActiveView(path=Path("/papers/a.pdf"), kind="pdf")
        assert ActiveDocumentResolver(view).resolve() == Path("/papers/a.pdf")

    def test_active_view_not_pdf(self):
        view = ActiveView(path=Path("/notes/a.tex"), kind="text")
        assert ActiveDocumentResolver(view).resolve() is None

    def test_active_pdf_view_without_path(self):
        assert ActiveDocumentResolver(ActiveView(path=None, kind="pdf")).resolve() is None

    def test_listing_pdf_item(self):
        resolver = ListingResolver(Path("/papers"), "Paper.PDF")
        assert resolver.resolve() == Path("/papers/Paper.PDF")

    def test_listing_non_pdf_item(self):
        assert ListingResolver(Path("/papers"), "notes.txt").resolve() is None

    def test_listing_without_item(self):
        assert ListingResolver(Path("/papers"), None).resolve() is None

    def test_prompt_rejects_non_pdf(self):
        """Non-PDF answers are asked again"""
        ask = Mock(side_effect=["notes.txt", "/papers/b.pdf"])
        assert PromptResolver(ask).resolve() == Path("/papers/b.pdf")
        assert ask.call_count == 2

    def test_prompt_empty_answer(self):
        assert PromptResolver(Mock(return_value="")).resolve() is None


class TestResolutionOrder:
    """Test the fixed priority order"""

    def test_active_view_wins(self):
        ask = Mock(return_value="/c.pdf")
        path = resolve_pdf([
            ActiveDocumentResolver(ActiveView(Path("/a.pdf"), "pdf")),
            ListingResolver(Path("/dir"), "b.pdf"),
            PromptResolver(ask),
        ])
        assert path == Path("/a.pdf")
        ask.assert_not_called()

    def test_listing_before_prompt(self):
        ask = Mock(return_value="/c.pdf")
        path = resolve_pdf([
            ActiveDocumentResolver(ActiveView(Path("/a.tex"), "text")),
            ListingResolver(Path("/dir"), "b.pdf"),
            PromptResolver(ask),
        ])
        assert path == Path("/dir/b.pdf")
        ask.assert_not_called()

    def test_prompt_last(self):
        path = resolve_pdf([
            ActiveDocumentResolver(None),
            ListingResolver(None, None),
            PromptResolver(Mock(return_value="/c.pdf")),
        ])
        assert path == Path("/c.pdf")

    def test_nothing_resolved(self):
        with pytest.raises(NoInputFileError):
            resolve_pdf([ActiveDocumentResolver(None), ListingResolver(None, None)])
