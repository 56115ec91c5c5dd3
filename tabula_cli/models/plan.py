"""The resolved, immutable extraction plan."""
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tabula_cli.models.geometry import AreaSpec, ColumnSpec


class Method(str, Enum):
    """Extraction strategy fixed at plan time."""

    AUTO = "auto"  # decided per page by the tabularity classifier
    RULING = "lattice"
    FLOW = "stream"


class OutputFormat(str, Enum):
    CSV = "CSV"
    TSV = "TSV"
    JSON = "JSON"

    @property
    def extension(self) -> str:
        return "." + self.value.lower()

    @classmethod
    def names(cls) -> list[str]:
        return [f.value for f in cls]


class ExtractionPlan(BaseModel):
    """Everything needed to process one run, built once from validated input.

    ``pages`` is ``None`` for every page of the document. An empty ``areas``
    tuple means the whole page. Exactly one of ``input_path`` and
    ``batch_dir`` is set; ``output_path`` only applies to single-file mode,
    where ``None`` means standard output.
    """

    model_config = ConfigDict(frozen=True)

    pages: Optional[tuple[int, ...]] = (1,)
    areas: tuple[AreaSpec, ...] = ()
    method: Method = Method.AUTO
    guess: bool = False
    use_line_returns: bool = False
    columns: Optional[ColumnSpec] = None
    output_format: OutputFormat = OutputFormat.CSV
    password: Optional[str] = Field(None, repr=False)
    input_path: Optional[Path] = None
    batch_dir: Optional[Path] = None
    output_path: Optional[Path] = None

    @model_validator(mode="after")
    def _one_source(self) -> "ExtractionPlan":
        if (self.input_path is None) == (self.batch_dir is None):
            raise ValueError("exactly one of input_path and batch_dir must be set")
        return self

    @property
    def is_batch(self) -> bool:
        return self.batch_dir is not None
