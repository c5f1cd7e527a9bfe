"""
pdfbib CLI interface using Typer
"""

import traceback
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from pdfbib.core.exceptions import PdfBibError
from pdfbib.core.operations import (
    OperationResult,
    add_to_bibliography,
    extract_entry,
    insert_entry,
    regenerate_key_at,
)
from pdfbib.core.selector import (
    ActiveDocumentResolver,
    ActiveView,
    ListingResolver,
    PromptResolver,
    is_pdf,
    resolve_pdf,
)
from pdfbib.utils.config import Config
from pdfbib.utils.logging_config import setup_logging

console = Console()
app = typer.Typer(
    name="pdfbib",
    help="Extract BibTeX entries from PDF files with an external tool",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

@app.callback()
def main(
    ctx: typer.Context,
    bib_file: Path = typer.Option(
        None,
        "--bib-file",
        "-b",
        envvar="PDFBIB_BIB_FILE",
        help="Default target bibliography file",
        dir_okay=False,
    ),
    command: str = typer.Option(
        "pdf2bib",
        "--command",
        "-c",
        envvar="PDFBIB_COMMAND",
        help="External extraction tool",
    ),
    id_field: str = typer.Option(
        "doi",
        "--id-field",
        help="Field used to detect duplicate entries",
    ),
    field_extractor: str = typer.Option(
        "regex",
        "--field-extractor",
        help="Field extraction backend: regex or bibtexparser",
    ),
    auto_key: bool = typer.Option(
        True,
        "--auto-key/--keep-key",
        help="Regenerate citation keys of extracted entries",
    ),
    interactive: bool = typer.Option(
        True,
        "--interactive/--no-interactive",
        help="Prompt for missing input files",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    log_file: Path = typer.Option(
        None,
        "--log-file",
        help="Write a debug log to this file",
        dir_okay=False,
    ),
):
    """
    Extract bibliography entries from PDFs and manage a BibTeX file.
    """
    try:
        config = Config(
            bib_file=str(bib_file) if bib_file else None,
            command=command,
            id_field=id_field,
            field_extractor=field_extractor,
            auto_key=auto_key,
            verbose=verbose,
            log_file=str(log_file) if log_file else None,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    setup_logging(config)
    ctx.obj = {"config": config, "interactive": interactive}


def _ask(message: str) -> str:
    return Prompt.ask(message, default="", show_default=False, console=console)


def select_pdf(ctx: typer.Context, pdf: Path | None, listing: Path | None, item: str | None) -> Path:
    """Resolve the input PDF: explicit file, listing item, then prompt"""
    view = ActiveView(path=pdf, kind="pdf" if pdf and is_pdf(pdf) else "text")
    resolvers = [ActiveDocumentResolver(view), ListingResolver(listing, item)]
    if ctx.obj["interactive"]:
        resolvers.append(PromptResolver(_ask))
    return resolve_pdf(resolvers)


def report_failure(ctx: typer.Context, error: Exception) -> None:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    if ctx.obj["config"].verbose:
        console.print(escape(traceback.format_exc()))


def report_success(result: OperationResult) -> None:
    console.print(f"[green]✓ {escape(result.message)}[/green]")


PDF_ARGUMENT = typer.Argument(None, help="PDF file (the active document)", dir_okay=False)
LISTING_OPTION = typer.Option(None, "--listing", help="Directory listing to pick from", file_okay=False)
ITEM_OPTION = typer.Option(None, "--item", help="Listing item under the cursor")


@app.command()
def extract(
    ctx: typer.Context,
    pdf: Path = PDF_ARGUMENT,
    listing: Path = LISTING_OPTION,
    item: str = ITEM_OPTION,
):
    """Print the BibTeX entry extracted from a PDF."""
    try:
        pdf_path = select_pdf(ctx, pdf, listing, item)
        result = extract_entry(pdf_path, ctx.obj["config"])
    except PdfBibError as e:
        report_failure(ctx, e)
        raise typer.Exit(1) from e

    typer.echo(result.entry)


@app.command()
def insert(
    ctx: typer.Context,
    pdf: Path = PDF_ARGUMENT,
    into: Path = typer.Option(..., "--into", "-i", help="Document to insert the entry into", dir_okay=False),
    line: int = typer.Option(1, "--line", "-l", min=1, help="Cursor line (1-based)"),
    listing: Path = LISTING_OPTION,
    item: str = ITEM_OPTION,
):
    """Insert the entry extracted from a PDF at a line of a document."""
    try:
        pdf_path = select_pdf(ctx, pdf, listing, item)
        result = insert_entry(pdf_path, into, line, ctx.obj["config"])
    except PdfBibError as e:
        report_failure(ctx, e)
        raise typer.Exit(1) from e

    report_success(result)


@app.command("regen-key")
def regen_key(
    ctx: typer.Context,
    bib: Path = typer.Argument(..., help="BibTeX file", exists=True, dir_okay=False),
    line: int = typer.Option(1, "--line", "-l", min=1, help="Cursor line (1-based)"),
):
    """Regenerate the citation key of the entry at a line."""
    try:
        result = regenerate_key_at(bib, line, ctx.obj["config"])
    except PdfBibError as e:
        report_failure(ctx, e)
        raise typer.Exit(1) from e

    report_success(result)


@app.command()
def add(
    ctx: typer.Context,
    pdf: Path = PDF_ARGUMENT,
    bib: Path = typer.Option(None, "--bib", help="Target bibliography file", dir_okay=False),
    listing: Path = LISTING_OPTION,
    item: str = ITEM_OPTION,
):
    """Append the entry extracted from a PDF to a bibliography file, skipping duplicates."""
    config = ctx.obj["config"]

    try:
        pdf_path = select_pdf(ctx, pdf, listing, item)

        bib_path = bib or config.bib_file
        if bib_path is None and ctx.obj["interactive"]:
            answer = _ask("Bibliography file").strip()
            bib_path = Path(answer).expanduser() if answer else None
        if bib_path is None:
            msg = "No bibliography file given"
            raise PdfBibError(msg)

        result = add_to_bibliography(pdf_path, config, bib_path)
    except PdfBibError as e:
        report_failure(ctx, e)
        raise typer.Exit(1) from e

    if result.duplicate:
        console.print(f"[yellow]⚠ {escape(result.message)}[/yellow]")
    else:
        report_success(result)


if __name__ == "__main__":
    app()
