"""Data models for tabula-cli."""

from .geometry import AreaSpec, ColumnSpec, CoordinateMode, Rectangle, Ruling
from .plan import ExtractionPlan, Method, OutputFormat
from .table import Cell, Table

__all__ = [
    "AreaSpec",
    "ColumnSpec",
    "CoordinateMode",
    "Rectangle",
    "Ruling",
    "ExtractionPlan",
    "Method",
    "OutputFormat",
    "Cell",
    "Table",
]
