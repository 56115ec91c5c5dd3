"""Pydantic models for batch items and their per-item outcomes."""
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class BatchItem(BaseModel):
    """One input document and where its tables go; ``output_path=None`` is stdout."""

    model_config = ConfigDict(frozen=True)

    input_path: Path
    output_path: Optional[Path] = None


class BatchOutcome(BaseModel):
    """Result of processing one BatchItem. Failures are values, not exceptions."""

    item: BatchItem
    status: Literal["OK", "FAILED"]
    table_count: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "OK"
