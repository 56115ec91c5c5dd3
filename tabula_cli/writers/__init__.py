"""Serializers for extracted tables, one per output format."""
from typing import Sequence, TextIO

from tabula_cli.models.plan import OutputFormat
from tabula_cli.models.table import Table

from .base import TableWriter
from .delimited import CSVWriter, TSVWriter
from .json_writer import JSONWriter

_WRITERS: dict[OutputFormat, type[TableWriter]] = {
    OutputFormat.CSV: CSVWriter,
    OutputFormat.TSV: TSVWriter,
    OutputFormat.JSON: JSONWriter,
}


def get_writer(fmt: OutputFormat) -> TableWriter:
    """Return the writer for *fmt*.

    Raises:
        ValueError: If no writer is registered for *fmt*.
    """
    try:
        return _WRITERS[fmt]()
    except KeyError:
        raise ValueError(f"No writer for output format: {fmt!r}") from None


def write_tables(tables: Sequence[Table], fmt: OutputFormat, sink: TextIO) -> None:
    get_writer(fmt).write(sink, tables)


__all__ = ["CSVWriter", "JSONWriter", "TSVWriter", "TableWriter", "get_writer", "write_tables"]
