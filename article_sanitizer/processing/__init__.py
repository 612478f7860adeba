"""Article body processing module."""

from .assembler import assemble
from .classifier import Classification, Line, LineClassifier, LineDecision, classify, looks_like_headline
from .patterns import (
    CUTOFF_SECTION_PATTERNS,
    DROP_LINE_PATTERNS,
    Pattern,
    PatternCategory,
    PatternTables,
    get_pattern_tables,
)
from .sanitizer import ArticleSanitizer, SanitizeResult, prepare_article_for_summary, sanitize

__all__ = [
    'sanitize',
    'ArticleSanitizer',
    'SanitizeResult',
    'prepare_article_for_summary',
    'classify',
    'Classification',
    'Line',
    'LineClassifier',
    'LineDecision',
    'looks_like_headline',
    'assemble',
    'Pattern',
    'PatternCategory',
    'PatternTables',
    'get_pattern_tables',
    'DROP_LINE_PATTERNS',
    'CUTOFF_SECTION_PATTERNS',
]
