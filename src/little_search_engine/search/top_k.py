"""Bounded two-keyword OR query over descending-frequency posting lists."""

from __future__ import annotations

from collections.abc import Sequence

from little_search_engine.search.models import KeywordIndex, Occurrence


DEFAULT_RESULT_LIMIT = 5


class TopKMerger:
    """Merge the posting lists of two keywords into a ranked document list.

    Documents are ranked by the frequency of whichever keyword reached them
    first during the merge. Equal frequencies favor the first keyword, and a
    document found under both keywords is reported once.
    """

    def __init__(self, index: KeywordIndex, limit: int = DEFAULT_RESULT_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        self.index = index
        self.limit = limit

    def query(self, first: str, second: str) -> list[str] | None:
        """Return up to ``limit`` documents containing ``first`` or ``second``.

        Returns None when neither keyword is indexed.
        """

        first_postings = self.index.get(first)
        second_postings = self.index.get(second)

        if first_postings is None and second_postings is None:
            return None
        if second_postings is None:
            return [occ.document for occ in first_postings[: self.limit]]
        if first_postings is None:
            return [occ.document for occ in second_postings[: self.limit]]
        return self._merge(first_postings, second_postings)

    def _merge(self, first: Sequence[Occurrence], second: Sequence[Occurrence]) -> list[str]:
        results: list[str] = []
        j = 0
        k = 0
        while j < len(first) and k < len(second) and len(results) < self.limit:
            if first[j].frequency >= second[k].frequency:
                self._collect(results, first[j].document)
                j += 1
            else:
                self._collect(results, second[k].document)
                k += 1

        remaining, cursor = (first, j) if j < len(first) else (second, k)
        while cursor < len(remaining) and len(results) < self.limit:
            self._collect(results, remaining[cursor].document)
            cursor += 1
        return results

    @staticmethod
    def _collect(results: list[str], document: str) -> None:
        if document not in results:
            results.append(document)
