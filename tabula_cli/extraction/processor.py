"""Extract every table from one document according to a plan."""
import logging
from pathlib import Path

from tabula_cli.backends.base import Collaborators, Document, Page
from tabula_cli.extraction.dispatcher import MethodDispatcher
from tabula_cli.models.geometry import Ruling, resolve_area, resolve_columns
from tabula_cli.models.plan import ExtractionPlan
from tabula_cli.models.table import Table

logger = logging.getLogger(__name__)


class DocumentProcessor:
    def __init__(self, plan: ExtractionPlan, collaborators: Collaborators) -> None:
        self.plan = plan
        self.collaborators = collaborators
        self.dispatcher = MethodDispatcher(plan, collaborators)

    def extract_file(self, path: Path) -> list[Table]:
        """Open *path*, extract its tables and close it again, even on failure."""
        with self.collaborators.loader.load(path, self.plan.password) as document:
            return self.process(document)

    def process(self, document: Document) -> list[Table]:
        """Return tables in page order; within a page, in area order."""
        tables: list[Table] = []
        for page in document.pages(self.plan.pages):
            self.apply_column_rulings(page)
            page_tables = self.extract_page(page)
            logger.debug(f"Page {page.page_number}: {len(page_tables)} table(s)")
            tables.extend(page_tables)
        return tables

    def apply_column_rulings(self, page: Page) -> None:
        """Add each configured column boundary as a full-height vertical ruling."""
        if self.plan.columns is None:
            return
        for x in resolve_columns(self.plan.columns, page):
            page.add_ruling(Ruling.vertical(x, top=page.top, height=page.height))

    def extract_page(self, page: Page) -> list[Table]:
        if not self.plan.areas:
            return self.dispatcher.extract(page)

        tables: list[Table] = []
        for spec in self.plan.areas:
            # resolved per page: page sizes may differ within one document
            area = resolve_area(spec, page)
            tables.extend(self.dispatcher.extract(page.get_area(area)))
        return tables
