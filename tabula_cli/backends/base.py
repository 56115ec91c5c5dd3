"""Abstract contracts for the collaborators the extraction pipeline consumes."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence

from tabula_cli.models.geometry import Rectangle, Ruling
from tabula_cli.models.table import Table


class Page(ABC):
    """A page, or a rectangular view restricted from one.

    ``top``/``left`` locate the view in page space; ``width``/``height`` are
    the view's own extent. Rulings are mutable and inherited by views.
    """

    page_number: int
    top: float
    left: float
    width: float
    height: float

    @property
    @abstractmethod
    def rulings(self) -> list[Ruling]:
        ...

    @abstractmethod
    def add_ruling(self, ruling: Ruling) -> None:
        ...

    @abstractmethod
    def get_area(self, rect: Rectangle) -> "Page":
        """Return a view restricted to *rect* (page-space coordinates)."""
        ...


class Document(ABC):
    """An opened document. Use as a context manager so it is always closed."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        ...

    @abstractmethod
    def pages(self, indices: Optional[Sequence[int]] = None) -> Iterator[Page]:
        """Yield pages for 1-based *indices* in the given order, or every page."""
        ...

    @abstractmethod
    def close(self) -> None:
        ...

    def __enter__(self) -> "Document":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class DocumentLoader(ABC):
    @abstractmethod
    def load(self, path: Path, password: Optional[str] = None) -> Document:
        """Open *path*.

        Raises:
            InputError: If the file is missing, corrupt, or the password does
                not unlock it.
        """
        ...


class TabularityClassifier(ABC):
    @abstractmethod
    def is_tabular(self, page: Page) -> bool:
        """Return True if *page* looks like a ruled grid."""
        ...


class RegionDetector(ABC):
    @abstractmethod
    def detect(self, page: Page) -> list[Rectangle]:
        """Return candidate table rectangles on *page*, in reading order."""
        ...


class RulingExtractor(ABC):
    @abstractmethod
    def extract(self, page: Page, rulings: Optional[Sequence[Ruling]] = None) -> list[Table]:
        """Extract tables driven by ruling lines, plus any synthetic *rulings*."""
        ...


class FlowExtractor(ABC):
    @abstractmethod
    def extract(self, page: Page, use_line_returns: bool = False) -> list[Table]:
        """Extract tables from text alignment alone."""
        ...


@dataclass(frozen=True)
class Collaborators:
    loader: DocumentLoader
    classifier: TabularityClassifier
    detector: RegionDetector
    ruling_extractor: RulingExtractor
    flow_extractor: FlowExtractor


def default_collaborators() -> Collaborators:
    """Return the PyMuPDF-backed collaborators."""
    from tabula_cli.backends.pymupdf_backend import (
        PyMuPDFClassifier,
        PyMuPDFDetector,
        PyMuPDFFlowExtractor,
        PyMuPDFLoader,
        PyMuPDFRulingExtractor,
    )

    return Collaborators(
        loader=PyMuPDFLoader(),
        classifier=PyMuPDFClassifier(),
        detector=PyMuPDFDetector(),
        ruling_extractor=PyMuPDFRulingExtractor(),
        flow_extractor=PyMuPDFFlowExtractor(),
    )
