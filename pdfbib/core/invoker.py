"""
External tool invocation module
Runs the PDF-to-BibTeX extraction tool and cleans its output
"""

import shlex
import subprocess
from pathlib import Path

from ..utils.config import Config
from ..utils.logging_config import OperationTimer, get_logger
from .exceptions import ExtractionError

logger = get_logger("invoker")

FAILURE_KEYWORDS = ("error", "warning", "failed")


def build_command(pdf_path: Path, command: str) -> str:
    """Build `<command> <quoted-path>`"""
    return f"{command} {shlex.quote(str(pdf_path))}"


def clean_output(raw: str) -> str:
    """Drop the first output line (status/header) and trim whitespace"""
    _, _, rest = raw.partition("\n")
    return rest.strip()


def check_output(text: str) -> None:
    """
    Reject empty output or output carrying failure keywords

    Raises:
        ExtractionError: if the text is not a usable entry
    """
    if not text:
        msg = "No bib-info found"
        raise ExtractionError(msg)

    lowered = text.lower()
    for keyword in FAILURE_KEYWORDS:
        if keyword in lowered:
            first_line = text.splitlines()[0].strip()
            msg = f"Failed to extract bib-info: {first_line}"
            raise ExtractionError(msg)


def run_extractor(pdf_path: Path, config: Config) -> str:
    """
    Run the external tool on a PDF and return the candidate entry text

    Blocks until the tool exits; no timeout is applied.

    Args:
        pdf_path: PDF file to extract metadata from
        config: Configuration object (provides the tool command)

    Returns:
        Bibliography entry text
    """
    command_line = build_command(pdf_path, config.command)
    logger.debug(f"Running: {command_line}")

    try:
        with OperationTimer(f"extract {Path(pdf_path).name}", logger):
            proc = subprocess.run(
                shlex.split(command_line),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
    except OSError as e:
        msg = f"Could not run '{config.command}': {e}"
        raise ExtractionError(msg) from e

    if proc.returncode != 0:
        logger.warning(f"{config.command} exited with status {proc.returncode}")

    text = clean_output(proc.stdout or "")
    check_output(text)
    return text
