"""Command-line table extraction for PDF documents."""

__version__ = "1.0.6"
