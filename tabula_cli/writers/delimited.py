"""CSV and TSV writers: all rows of all tables, back to back."""
import csv
from typing import Sequence, TextIO

from tabula_cli.models.table import Table
from tabula_cli.writers.base import TableWriter


class DelimitedWriter(TableWriter):
    delimiter = ","

    def write(self, sink: TextIO, tables: Sequence[Table]) -> None:
        writer = csv.writer(sink, delimiter=self.delimiter)
        for table in tables:
            writer.writerows(table.text_rows())


class CSVWriter(DelimitedWriter):
    delimiter = ","


class TSVWriter(DelimitedWriter):
    delimiter = "\t"
