"""Domain services."""

from .base import Service
from .content_analyzer import (
    CATEGORY_KEYWORDS,
    DEFAULT_CATEGORY,
    ContentAnalyzer,
    ReconciliationResult,
    extract_keywords,
    infer_category,
)

__all__ = [
    "CATEGORY_KEYWORDS",
    "DEFAULT_CATEGORY",
    "ContentAnalyzer",
    "ReconciliationResult",
    "Service",
    "extract_keywords",
    "infer_category",
]
