"""Unit tests for merging document keyword maps into the index."""

import random

from little_search_engine.search.index_builder import IndexBuilder
from little_search_engine.search.models import KeywordIndex, Occurrence


def _doc_map(document, **frequencies):
    return {keyword: Occurrence(document=document, frequency=freq) for keyword, freq in frequencies.items()}


def test_new_keyword_creates_singleton_posting_list():
    builder = IndexBuilder()

    builder.merge(_doc_map("d1", tree=3, leaf=1))

    assert [occ.document for occ in builder.index["tree"]] == ["d1"]
    assert builder.index["leaf"][0].frequency == 1
    assert builder.index.keyword_count == 2


def test_existing_keyword_is_inserted_in_frequency_order():
    builder = IndexBuilder()

    builder.merge(_doc_map("d1", tree=3))
    builder.merge(_doc_map("d2", tree=7))
    builder.merge(_doc_map("d3", tree=5))
    builder.merge(_doc_map("d4", tree=1))

    assert [(occ.document, occ.frequency) for occ in builder.index["tree"]] == [
        ("d2", 7),
        ("d3", 5),
        ("d1", 3),
        ("d4", 1),
    ]


def test_equal_frequency_places_later_document_after_earlier():
    builder = IndexBuilder()

    builder.merge(_doc_map("d1", tree=2))
    builder.merge(_doc_map("d2", tree=2))

    assert [occ.document for occ in builder.index["tree"]] == ["d1", "d2"]


def test_merges_into_caller_owned_index():
    index = KeywordIndex()

    IndexBuilder(index).merge(_doc_map("d1", tree=1))

    assert "tree" in index
    assert index.document_count == 1


def test_merged_occurrences_are_the_same_objects():
    builder = IndexBuilder()
    doc_map = _doc_map("d1", tree=4)

    builder.merge(doc_map)

    assert builder.index["tree"][0] is doc_map["tree"]


def test_every_posting_list_stays_sorted_after_many_merges():
    rng = random.Random(42)
    vocabulary = ["alpha", "beta", "gamma", "delta", "epsilon"]
    builder = IndexBuilder()

    for number in range(60):
        keywords = rng.sample(vocabulary, k=rng.randint(1, len(vocabulary)))
        builder.merge({kw: Occurrence(document=f"doc{number}", frequency=rng.randint(1, 9)) for kw in keywords})

    for keyword, postings in builder.index.items():
        frequencies = [occ.frequency for occ in postings]
        assert frequencies == sorted(frequencies, reverse=True), keyword
        assert len({occ.document for occ in postings}) == len(postings)
