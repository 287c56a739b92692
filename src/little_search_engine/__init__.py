"""In-memory keyword index with two-keyword top-5 search."""

from little_search_engine.search.engine import IndexBuildResult, LittleSearchEngine
from little_search_engine.search.models import KeywordIndex, Occurrence
from little_search_engine.search.scanner import DocumentDecodeError, DocumentNotFoundError


__all__ = [
    "DocumentDecodeError",
    "DocumentNotFoundError",
    "IndexBuildResult",
    "KeywordIndex",
    "LittleSearchEngine",
    "Occurrence",
]
