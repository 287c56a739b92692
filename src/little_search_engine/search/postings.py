"""Ordered insertion into descending-frequency posting lists.

Posting lists are kept sorted by descending frequency as documents are merged
in. A new occurrence is appended to the tail and then moved into place using a
binary search over the already sorted prefix. The midpoints inspected by that
search are returned so callers can verify the search itself, independent of
the resulting order.
"""

from __future__ import annotations

from collections.abc import Sequence

from little_search_engine.search.models import Occurrence


def locate_insertion_point(prefix: Sequence[Occurrence], frequency: int) -> tuple[int, list[int]]:
    """Return ``(index, probes)`` for inserting ``frequency`` into ``prefix``.

    The search stops at the first midpoint with an equal frequency and places
    the new entry right after it. Without an exact match the entry lands at
    ``lo`` once the bounds cross.
    """

    probes: list[int] = []
    lo = 0
    hi = len(prefix) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        probes.append(mid)
        current = prefix[mid].frequency
        if frequency == current:
            return mid + 1, probes
        if frequency < current:
            lo = mid + 1
        else:
            hi = mid - 1
    return lo, probes


def insert_last_occurrence(postings: list[Occurrence]) -> list[int] | None:
    """Move the last occurrence of ``postings`` into sorted position in place.

    Args:
        postings: Posting list whose entries except the last are sorted by
            descending frequency.

    Returns:
        Midpoint indexes probed by the binary search, in order, or None when
        the list holds a single entry.
    """

    if len(postings) == 1:
        return None

    target = postings[-1]
    index, probes = locate_insertion_point(postings[:-1], target.frequency)
    if index != len(postings) - 1:
        postings.insert(index, postings.pop())
    return probes
