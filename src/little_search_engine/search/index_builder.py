"""Merge per-document keyword maps into a shared keyword index."""

from __future__ import annotations

from collections.abc import Mapping
import logging

from little_search_engine.search.models import KeywordIndex, Occurrence
from little_search_engine.search.postings import insert_last_occurrence


logger = logging.getLogger(__name__)


class IndexBuilder:
    """Owns writes to a :class:`KeywordIndex`."""

    def __init__(self, index: KeywordIndex | None = None) -> None:
        self.index = index if index is not None else KeywordIndex()

    def merge(self, keyword_map: Mapping[str, Occurrence]) -> None:
        """Merge one document's keyword occurrences into the index.

        Each document must contribute at most one occurrence per keyword.
        """

        new_keywords = 0
        for keyword, occurrence in keyword_map.items():
            postings = self.index.get(keyword)
            if postings is None:
                self.index.add(keyword, [occurrence])
                new_keywords += 1
                continue
            postings.append(occurrence)
            insert_last_occurrence(postings)

        logger.debug(
            "Merged %d keywords (%d new) into index of %d keywords",
            len(keyword_map),
            new_keywords,
            self.index.keyword_count,
        )
