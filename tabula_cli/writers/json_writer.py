"""JSON writer: one object per table with cell geometry and text."""
import json
from typing import Sequence, TextIO

from tabula_cli.models.table import Table
from tabula_cli.writers.base import TableWriter


def table_to_dict(table: Table) -> dict:
    return {
        "extraction_method": table.extraction_method,
        "page_number": table.page_number,
        "top": table.top,
        "left": table.left,
        "width": table.width,
        "height": table.height,
        "right": table.left + table.width,
        "bottom": table.top + table.height,
        "data": [[cell.model_dump() for cell in row] for row in table.rows],
    }


class JSONWriter(TableWriter):
    def write(self, sink: TextIO, tables: Sequence[Table]) -> None:
        json.dump([table_to_dict(t) for t in tables], sink, ensure_ascii=False)
