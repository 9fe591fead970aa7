"""Mainbody - heuristic title and article body extraction for HTML pages.

Turns a raw page into its title and main content without per-site rules.
"""

from mainbody.config import Settings, settings
from mainbody.fetcher import PageFetcher
from mainbody.parser import Extraction, Extractor, extract, extract_with_base

__version__ = "0.1.0"

__all__ = [
    "Extraction",
    "Extractor",
    "PageFetcher",
    "Settings",
    "__version__",
    "extract",
    "extract_with_base",
    "settings",
]
