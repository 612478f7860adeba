"""Article Body Sanitizer - strips boilerplate and spam from scraped news bodies."""

__version__ = "0.1.0"

from .config import PatternConfigError
from .processing import ArticleSanitizer, sanitize

__all__ = ["__version__", "ArticleSanitizer", "PatternConfigError", "sanitize"]
