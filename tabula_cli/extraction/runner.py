"""Orchestrator: one extraction per input file, failures isolated per file."""
import logging
import re
import sys
from collections import Counter
from pathlib import Path
from typing import Optional, Sequence, TextIO

from tabula_cli.backends.base import Collaborators, default_collaborators
from tabula_cli.errors import InputError, OutputError
from tabula_cli.extraction.outcome import BatchItem, BatchOutcome
from tabula_cli.extraction.processor import DocumentProcessor
from tabula_cli.models.plan import ExtractionPlan, OutputFormat
from tabula_cli.models.table import Table
from tabula_cli.writers import write_tables

logger = logging.getLogger(__name__)

INPUT_SUFFIX = ".pdf"
_INPUT_SUFFIX_RE = re.compile(r"(\.pdf|)$")


def output_filename(input_path: Path, fmt: OutputFormat) -> Path:
    """``report.pdf`` -> ``report.csv``; a name without ``.pdf`` gets the extension appended."""
    return Path(_INPUT_SUFFIX_RE.sub(fmt.extension, str(input_path), count=1))


def batch_items(plan: ExtractionPlan) -> list[BatchItem]:
    """List the (input, output) pairs for this run.

    Batch mode takes the immediate ``*.pdf`` files of the directory; the
    match is case-sensitive and does not recurse.

    Raises:
        InputError: If the batch directory does not exist.
    """
    if not plan.is_batch:
        return [BatchItem(input_path=plan.input_path, output_path=plan.output_path)]

    batch_dir = plan.batch_dir
    if not batch_dir.is_dir():
        raise InputError(f"Directory does not exist or is not a directory: {batch_dir}")

    pdfs = sorted(p for p in batch_dir.iterdir() if p.name.endswith(INPUT_SUFFIX) and p.is_file())
    return [
        BatchItem(input_path=pdf, output_path=output_filename(pdf, plan.output_format))
        for pdf in pdfs
    ]


def write_output(
    tables: Sequence[Table],
    fmt: OutputFormat,
    output_path: Optional[Path],
    stdout: TextIO,
) -> None:
    """Write to *output_path* (created or truncated), or to *stdout* when None."""
    if output_path is None:
        write_tables(tables, fmt, stdout)
        stdout.flush()
        return

    try:
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            write_tables(tables, fmt, f)
    except OSError as e:
        raise OutputError(f"Cannot create or write to file: {output_path}: {e}") from e


def process_item(
    item: BatchItem,
    plan: ExtractionPlan,
    processor: DocumentProcessor,
    stdout: TextIO,
) -> BatchOutcome:
    """Extract and write one item. Never raises; errors become a FAILED outcome.

    Tables are extracted before the output is opened, so a document that
    fails to extract leaves no output file behind.
    """
    try:
        tables = processor.extract_file(item.input_path)
        write_output(tables, plan.output_format, item.output_path, stdout)
    except Exception as e:
        logger.error(f"Error processing file: {item.input_path}: {type(e).__name__}: {e}")
        logger.debug("Traceback:", exc_info=True)
        return BatchOutcome(item=item, status="FAILED", error=f"{type(e).__name__}: {e}")

    target = item.output_path or "stdout"
    logger.info(f"{item.input_path.name}: OK ({len(tables)} tables -> {target})")
    return BatchOutcome(item=item, status="OK", table_count=len(tables))


def run_batch(
    plan: ExtractionPlan,
    collaborators: Optional[Collaborators] = None,
    stdout: Optional[TextIO] = None,
) -> list[BatchOutcome]:
    """Process every item of the plan in order and return one outcome per item.

    A failing item is logged and recorded; the next item is still processed.

    Args:
        plan: The resolved extraction plan; shared read-only by all items.
        collaborators: PDF backend; defaults to the PyMuPDF one.
        stdout: Sink for single-file runs without an output path.

    Returns:
        Outcomes in processing order.
    """
    collaborators = collaborators or default_collaborators()
    stdout = stdout or sys.stdout
    processor = DocumentProcessor(plan, collaborators)

    items = batch_items(plan)
    if plan.is_batch and not items:
        logger.warning(f"No PDFs found in {plan.batch_dir}")
        return []

    outcomes = [process_item(item, plan, processor, stdout) for item in items]

    if plan.is_batch:
        _log_summary(outcomes)
    return outcomes


def _log_summary(outcomes: list[BatchOutcome]) -> None:
    failed = [o for o in outcomes if not o.ok]

    logger.info("===== Extraction Summary =====")
    logger.info(f"  Total PDFs found : {len(outcomes)}")
    logger.info(f"  OK               : {len(outcomes) - len(failed)}")
    logger.info(f"  FAILED           : {len(failed)}")

    if failed:
        reasons = Counter(o.error.split(":", 1)[0] for o in failed)
        for reason, count in reasons.most_common():
            logger.info(f"    {reason}: {count}")
        for o in failed:
            logger.warning(f"  failed: {o.item.input_path} ({o.error})")
