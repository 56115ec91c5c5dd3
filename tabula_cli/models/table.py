"""Extracted tables. Created by an extractor and never mutated afterwards."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Cell(BaseModel):
    model_config = ConfigDict(frozen=True)

    top: float = 0.0
    left: float = 0.0
    width: float = 0.0
    height: float = 0.0
    text: str = ""


class Table(BaseModel):
    """One extracted table: a grid of cells plus where it came from."""

    model_config = ConfigDict(frozen=True)

    extraction_method: Literal["lattice", "stream"]
    page_number: int = Field(..., ge=1)
    top: float = 0.0
    left: float = 0.0
    width: float = 0.0
    height: float = 0.0
    rows: tuple[tuple[Cell, ...], ...] = ()

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def text_rows(self) -> list[list[str]]:
        return [[cell.text for cell in row] for row in self.rows]
