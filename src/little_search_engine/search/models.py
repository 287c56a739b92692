"""Search data models."""

from __future__ import annotations

from collections.abc import ItemsView, Iterator
from dataclasses import dataclass


@dataclass
class Occurrence:
    """A document's frequency count for one keyword.

    ``frequency`` is bumped while a single document is scanned and must not
    change once the occurrence has been merged into a posting list.
    """

    document: str
    frequency: int = 1


PostingList = list[Occurrence]


class KeywordIndex:
    """Keyword -> posting list mapping, each list kept in descending frequency.

    Entries are only ever added; nothing is removed or decremented.
    """

    def __init__(self) -> None:
        self._postings: dict[str, PostingList] = {}

    def get(self, keyword: str) -> PostingList | None:
        """Return the posting list for ``keyword``, or None if it is not indexed."""
        return self._postings.get(keyword)

    def add(self, keyword: str, postings: PostingList) -> None:
        """Register the posting list of a keyword seen for the first time."""
        if keyword in self._postings:
            raise KeyError(f"keyword already indexed: {keyword!r}")
        self._postings[keyword] = postings

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._postings

    def __getitem__(self, keyword: str) -> PostingList:
        return self._postings[keyword]

    def __iter__(self) -> Iterator[str]:
        return iter(self._postings)

    def __len__(self) -> int:
        return len(self._postings)

    def items(self) -> ItemsView[str, PostingList]:
        """Return a live view of ``(keyword, posting list)`` pairs."""
        return self._postings.items()

    @property
    def keyword_count(self) -> int:
        return len(self._postings)

    @property
    def document_count(self) -> int:
        """Number of distinct documents referenced by any posting list."""
        return len({occ.document for postings in self._postings.values() for occ in postings})
