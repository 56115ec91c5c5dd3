"""PDF-facing collaborators: document model, detectors and extractors."""

from .base import (
    Collaborators,
    Document,
    DocumentLoader,
    FlowExtractor,
    Page,
    RegionDetector,
    RulingExtractor,
    TabularityClassifier,
    default_collaborators,
)

__all__ = [
    "Collaborators",
    "Document",
    "DocumentLoader",
    "FlowExtractor",
    "Page",
    "RegionDetector",
    "RulingExtractor",
    "TabularityClassifier",
    "default_collaborators",
]
