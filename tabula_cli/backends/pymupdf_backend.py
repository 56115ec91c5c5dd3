"""PyMuPDF (fitz) implementation of the document model, detectors and extractors."""
import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence

import pymupdf as fitz

from tabula_cli.backends.base import (
    Document,
    DocumentLoader,
    FlowExtractor,
    Page,
    RegionDetector,
    RulingExtractor,
    TabularityClassifier,
)
from tabula_cli.errors import InputError
from tabula_cli.models.geometry import Rectangle, Ruling
from tabula_cli.models.table import Cell, Table

logger = logging.getLogger(__name__)

# library notices go to the "pymupdf" logger (stderr), never to stdout where tables are written
fitz.set_messages(pylogging=True)


class PyMuPDFPage(Page):
    """A fitz page, optionally restricted to a clip rectangle."""

    def __init__(
        self,
        page: "fitz.Page",
        clip: Optional["fitz.Rect"] = None,
        rulings: Optional[list[Ruling]] = None,
    ) -> None:
        self._page = page
        self.clip = fitz.Rect(clip) if clip is not None else fitz.Rect(page.rect)
        self._rulings = list(rulings) if rulings else []
        self.page_number = page.number + 1
        self.top = self.clip.y0
        self.left = self.clip.x0
        self.width = self.clip.width
        self.height = self.clip.height

    @property
    def rulings(self) -> list[Ruling]:
        return self._rulings

    def add_ruling(self, ruling: Ruling) -> None:
        self._rulings.append(ruling)

    def get_area(self, rect: Rectangle) -> "PyMuPDFPage":
        # fitz treats an inverted rect as empty; flip it into the same region
        clip = fitz.Rect(rect.left, rect.top, rect.right, rect.bottom).normalize()
        return PyMuPDFPage(self._page, clip=clip, rulings=self._rulings)

    def find_tables(self, **kwargs) -> list:
        return list(self._page.find_tables(clip=self.clip, **kwargs).tables)


class PyMuPDFDocument(Document):
    def __init__(self, doc: "fitz.Document", path: Path) -> None:
        self._doc = doc
        self.path = path

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def pages(self, indices: Optional[Sequence[int]] = None) -> Iterator[PyMuPDFPage]:
        if indices is None:
            indices = range(1, self.page_count + 1)
        for index in indices:
            if not 1 <= index <= self.page_count:
                raise InputError(
                    f"{self.path.name}: page {index} out of range "
                    f"(document has {self.page_count} pages)"
                )
            yield PyMuPDFPage(self._doc.load_page(index - 1))

    def close(self) -> None:
        self._doc.close()


class PyMuPDFLoader(DocumentLoader):
    def load(self, path: Path, password: Optional[str] = None) -> PyMuPDFDocument:
        if not path.is_file():
            raise InputError(f"File does not exist: {path}")
        try:
            doc = fitz.open(str(path))
        except Exception as e:
            raise InputError(f"Cannot open {path}: {e}") from e

        if doc.needs_pass and not doc.authenticate(password or ""):
            doc.close()
            raise InputError(f"Cannot decrypt {path}: wrong or missing password")

        logger.debug(f"Opened {path.name} ({doc.page_count} pages)")
        return PyMuPDFDocument(doc, path)


def _as_page(page: Page) -> PyMuPDFPage:
    if not isinstance(page, PyMuPDFPage):
        raise TypeError(f"PyMuPDF collaborators need a PyMuPDFPage, got {type(page).__name__}")
    return page


def _to_table(found, page: PyMuPDFPage, method: str, use_line_returns: bool) -> Table:
    x0, y0, x1, y1 = found.bbox
    texts = found.extract()
    rows = []
    for row, row_texts in zip(found.rows, texts):
        cells = []
        for bbox, text in zip(row.cells, row_texts):
            text = text or ""
            if not use_line_returns:
                text = " ".join(text.splitlines())
            if bbox is None:
                cells.append(Cell(text=text))
                continue
            cx0, cy0, cx1, cy1 = bbox
            cells.append(Cell(top=cy0, left=cx0, width=cx1 - cx0, height=cy1 - cy0, text=text))
        rows.append(tuple(cells))
    return Table(
        extraction_method=method,
        page_number=page.page_number,
        top=y0,
        left=x0,
        width=x1 - x0,
        height=y1 - y0,
        rows=tuple(rows),
    )


class PyMuPDFRulingExtractor(RulingExtractor):
    """Lattice extraction: cells are bounded by drawn lines."""

    def extract(self, page: Page, rulings: Optional[Sequence[Ruling]] = None) -> list[Table]:
        pdf_page = _as_page(page)
        lines = [r.endpoints for r in [*pdf_page.rulings, *(rulings or [])]]
        found = pdf_page.find_tables(strategy="lines", add_lines=lines or None)
        return [_to_table(t, pdf_page, "lattice", use_line_returns=False) for t in found]


class PyMuPDFFlowExtractor(FlowExtractor):
    """Stream extraction: columns come from text alignment, or from injected rulings."""

    def extract(self, page: Page, use_line_returns: bool = False) -> list[Table]:
        pdf_page = _as_page(page)
        right = pdf_page.left + pdf_page.width
        columns = sorted({r.left for r in pdf_page.rulings if r.width == 0 and pdf_page.left <= r.left <= right})
        # column boundaries span the current view, not the full page they were resolved on
        lines = [Ruling.vertical(x, top=pdf_page.top, height=pdf_page.height).endpoints for x in columns]
        found = pdf_page.find_tables(strategy="text", add_lines=lines or None)
        return [_to_table(t, pdf_page, "stream", use_line_returns) for t in found]


class PyMuPDFClassifier(TabularityClassifier):
    """A page is tabular when ruling lines alone form at least a 2x2 grid."""

    def is_tabular(self, page: Page) -> bool:
        found = _as_page(page).find_tables(strategy="lines")
        return any(t.row_count >= 2 and t.col_count >= 2 for t in found)


class PyMuPDFDetector(RegionDetector):
    """Propose table regions from ruled tables, top-to-bottom then left-to-right."""

    def detect(self, page: Page) -> list[Rectangle]:
        found = _as_page(page).find_tables(strategy="lines")
        boxes = sorted((t.bbox for t in found), key=lambda b: (b[1], b[0]))
        return [Rectangle.from_bounds(top=y0, left=x0, bottom=y1, right=x1) for x0, y0, x1, y1 in boxes]
