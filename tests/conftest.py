"""In-memory collaborators for exercising the pipeline without real PDFs."""
from pathlib import Path
from typing import Optional, Sequence

from tabula_cli.backends.base import (
    Collaborators,
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


class FakePage(Page):
    def __init__(self, page_number=1, width=612.0, height=792.0, top=0.0, left=0.0,
                 rulings=None, area=None):
        self.page_number = page_number
        self.width = width
        self.height = height
        self.top = top
        self.left = left
        self.area = area
        self._rulings = list(rulings or [])
        self.requested_areas: list[Rectangle] = []

    @property
    def rulings(self) -> list[Ruling]:
        return self._rulings

    def add_ruling(self, ruling: Ruling) -> None:
        self._rulings.append(ruling)

    def get_area(self, rect: Rectangle) -> "FakePage":
        self.requested_areas.append(rect)
        return FakePage(
            page_number=self.page_number,
            width=rect.width,
            height=rect.height,
            top=rect.top,
            left=rect.left,
            rulings=self._rulings,
            area=rect,
        )


class FakeDocument(Document):
    def __init__(self, pages: list[FakePage]):
        self._pages = pages
        self.closed = False
        self.requested: Optional[Sequence[int]] = None

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def pages(self, indices=None):
        self.requested = indices
        if indices is None:
            indices = range(1, len(self._pages) + 1)
        for i in indices:
            if not 1 <= i <= len(self._pages):
                raise InputError(f"page {i} out of range")
            yield self._pages[i - 1]

    def close(self) -> None:
        self.closed = True


class FakeLoader(DocumentLoader):
    """Serves documents by file name; names containing 'corrupt' fail to load."""

    def __init__(self, page_sizes: Optional[list[tuple[float, float]]] = None):
        self.page_sizes = page_sizes or [(612.0, 792.0)]
        self.loaded: list[tuple[Path, Optional[str]]] = []
        self.documents: list[FakeDocument] = []

    def load(self, path: Path, password: Optional[str] = None) -> FakeDocument:
        self.loaded.append((path, password))
        if "corrupt" in path.name:
            raise InputError(f"Cannot open {path}: broken document")
        pages = [FakePage(page_number=i, width=w, height=h)
                 for i, (w, h) in enumerate(self.page_sizes, 1)]
        doc = FakeDocument(pages)
        self.documents.append(doc)
        return doc


class FakeClassifier(TabularityClassifier):
    def __init__(self, tabular_pages=()):
        self.tabular_pages = set(tabular_pages)
        self.calls: list[int] = []

    def is_tabular(self, page: Page) -> bool:
        self.calls.append(page.page_number)
        return page.page_number in self.tabular_pages


class FakeDetector(RegionDetector):
    def __init__(self, regions=()):
        self.regions = list(regions)
        self.calls = 0

    def detect(self, page: Page) -> list[Rectangle]:
        self.calls += 1
        return list(self.regions)


def _table(method: str, page: Page, label: str) -> Table:
    return Table(
        extraction_method=method,
        page_number=page.page_number,
        top=page.top,
        left=page.left,
        width=page.width,
        height=page.height,
        rows=((Cell(text=label), Cell(text=f"{page.left:g}")),),
    )


class FakeRulingExtractor(RulingExtractor):
    def __init__(self):
        self.calls: list[tuple[Page, Optional[list[Ruling]]]] = []

    def extract(self, page: Page, rulings=None) -> list[Table]:
        self.calls.append((page, list(rulings) if rulings is not None else None))
        return [_table("lattice", page, f"lattice-p{page.page_number}")]


class FakeFlowExtractor(FlowExtractor):
    def __init__(self):
        self.calls: list[tuple[Page, bool]] = []

    def extract(self, page: Page, use_line_returns: bool = False) -> list[Table]:
        self.calls.append((page, use_line_returns))
        return [_table("stream", page, f"stream-p{page.page_number}")]


def make_collaborators(page_sizes=None, tabular_pages=(), regions=()) -> Collaborators:
    return Collaborators(
        loader=FakeLoader(page_sizes),
        classifier=FakeClassifier(tabular_pages),
        detector=FakeDetector(regions),
        ruling_extractor=FakeRulingExtractor(),
        flow_extractor=FakeFlowExtractor(),
    )
