"""Facade tying keyword extraction, indexing and two-keyword search together.

Typical use::

    engine = LittleSearchEngine()
    engine.make_index("docs.txt", "noisewords.txt")
    engine.top5_search("deep", "world")
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from pathlib import Path

from little_search_engine.config import Settings
from little_search_engine.observability.metrics import (
    DOCUMENTS_INDEXED,
    INDEX_BUILD_LATENCY,
    INDEX_KEYWORDS,
    QUERY_COUNT,
    QUERY_LATENCY,
    track_latency,
)
from little_search_engine.observability.tracing import create_span
from little_search_engine.search.analyzers import KeywordExtractor
from little_search_engine.search.index_builder import IndexBuilder
from little_search_engine.search.models import KeywordIndex, Occurrence
from little_search_engine.search.postings import insert_last_occurrence
from little_search_engine.search.scanner import (
    DocumentScanner,
    load_stopwords,
    read_document_list,
    resolve_document_path,
)
from little_search_engine.search.top_k import DEFAULT_RESULT_LIMIT, TopKMerger


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexBuildResult:
    """Outcome of a :meth:`LittleSearchEngine.make_index` run."""

    documents_indexed: int
    keywords_indexed: int
    noise_words: int


class LittleSearchEngine:
    """Keyword index over a set of documents with two-keyword OR search."""

    def __init__(
        self,
        *,
        index: KeywordIndex | None = None,
        stopwords: frozenset[str] | None = None,
        result_limit: int = DEFAULT_RESULT_LIMIT,
        encoding: str = "utf-8",
    ) -> None:
        self.index = index if index is not None else KeywordIndex()
        self.encoding = encoding
        self.result_limit = result_limit
        self._builder = IndexBuilder(self.index)
        self._merger = TopKMerger(self.index, limit=result_limit)
        self._set_stopwords(stopwords)

    @classmethod
    def from_settings(cls, settings: Settings) -> LittleSearchEngine:
        return cls(result_limit=settings.result_limit, encoding=settings.file_encoding)

    @property
    def noise_words(self) -> frozenset[str]:
        return self.extractor.stopwords

    def _set_stopwords(self, stopwords: frozenset[str] | None) -> None:
        self.extractor = KeywordExtractor(stopwords=stopwords)
        self._scanner = DocumentScanner(self.extractor, encoding=self.encoding)

    def get_keyword(self, word: str) -> str | None:
        return self.extractor.extract_keyword(word)

    def load_keywords_from_document(
        self, document: str | Path | None, *, name: str | None = None
    ) -> dict[str, Occurrence]:
        return self._scanner.extract_keyword_map(document, name=name)

    def merge_keywords(self, keyword_map: Mapping[str, Occurrence]) -> None:
        self._builder.merge(keyword_map)

    @staticmethod
    def insert_last_occurrence(postings: list[Occurrence]) -> list[int] | None:
        return insert_last_occurrence(postings)

    def make_index(self, docs_file: str | Path, noise_words_file: str | Path | None = None) -> IndexBuildResult:
        """Index every document listed in ``docs_file``.

        Args:
            docs_file: File holding whitespace-separated document names. Relative
                names resolve against this file's directory before the working
                directory.
            noise_words_file: Optional file of noise words replacing the
                built-in stop list.

        Raises:
            DocumentNotFoundError: If the list, noise-word file or any listed
                document is missing. Indexing stops at the first missing file.
            DocumentDecodeError: If any of those files is not valid text in the
                configured encoding.
        """

        docs_path = Path(docs_file)
        with (
            create_span("index.build", attributes={"index.docs_file": str(docs_path)}) as span,
            track_latency(INDEX_BUILD_LATENCY),
        ):
            if noise_words_file is not None:
                self._set_stopwords(load_stopwords(noise_words_file, encoding=self.encoding))

            names = read_document_list(docs_path, encoding=self.encoding)
            for name in names:
                path = resolve_document_path(name, docs_path.parent)
                self.merge_keywords(self.load_keywords_from_document(path, name=name))
                DOCUMENTS_INDEXED.inc()

            INDEX_KEYWORDS.set(self.index.keyword_count)
            span.set_attribute("index.documents", len(names))
            span.set_attribute("index.keywords", self.index.keyword_count)

        logger.info(
            "Indexed %d documents into %d keywords",
            len(names),
            self.index.keyword_count,
            extra={"docs_file": docs_path},
        )
        return IndexBuildResult(
            documents_indexed=len(names),
            keywords_indexed=self.index.keyword_count,
            noise_words=len(self.noise_words),
        )

    def top5_search(self, kw1: str, kw2: str) -> list[str] | None:
        """Documents containing ``kw1`` or ``kw2``, best first.

        Ties in frequency favor ``kw1``; each document appears once and at most
        ``result_limit`` (five by default) are returned. Returns None when
        neither keyword is indexed.
        """

        with create_span("index.query", attributes={"query.kw1": kw1, "query.kw2": kw2}), track_latency(QUERY_LATENCY):
            results = self._merger.query(kw1, kw2)

        QUERY_COUNT.labels(outcome="miss" if results is None else "hit").inc()
        logger.debug("Query %r OR %r -> %s", kw1, kw2, results)
        return results
