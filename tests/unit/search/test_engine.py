"""Unit tests for the LittleSearchEngine facade."""

from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode
from prometheus_client import REGISTRY
import pytest

from little_search_engine.config import Settings
from little_search_engine.observability import tracing as tracing_module
from little_search_engine.search.engine import IndexBuildResult, LittleSearchEngine
from little_search_engine.search.models import KeywordIndex, Occurrence
from little_search_engine.search.scanner import DocumentNotFoundError


def _sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


@pytest.fixture
def span_exporter(monkeypatch):
    monkeypatch.setitem(tracing_module._tracer_holder, "tracer", None)
    monkeypatch.setitem(tracing_module._tracer_holder, "provider", None)
    exporter = InMemorySpanExporter()
    tracing_module.init_tracing(span_processors=[SimpleSpanProcessor(exporter)])
    return exporter


@pytest.fixture
def engine(corpus):
    engine = LittleSearchEngine()
    engine.make_index(corpus / "docs.txt", corpus / "noisewords.txt")
    return engine


class TestMakeIndex:
    def test_build_result(self, corpus):
        result = LittleSearchEngine().make_index(corpus / "docs.txt", corpus / "noisewords.txt")

        assert result == IndexBuildResult(documents_indexed=3, keywords_indexed=24, noise_words=8)

    def test_posting_lists_are_sorted_by_frequency(self, engine):
        def entries(keyword):
            return [(occ.document, occ.frequency) for occ in engine.index[keyword]]

        assert entries("rabbit") == [("rabbit.txt", 5), ("alice.txt", 3)]
        assert entries("tea") == [("tea.txt", 4), ("rabbit.txt", 1)]
        assert entries("alice") == [("alice.txt", 2), ("tea.txt", 1)]

    def test_noise_words_are_not_indexed(self, engine):
        assert "the" not in engine.index
        assert "was" not in engine.index
        assert engine.noise_words == frozenset({"a", "the", "and", "of", "is", "was", "to", "in"})

    def test_without_noise_file_uses_default_stop_list(self, corpus):
        engine = LittleSearchEngine()

        engine.make_index(corpus / "docs.txt")

        assert "the" not in engine.index
        assert "very" in engine.index

    def test_missing_document_aborts(self, corpus):
        (corpus / "docs.txt").write_text("alice.txt\nghost.txt\ntea.txt\n")
        engine = LittleSearchEngine()

        with pytest.raises(DocumentNotFoundError, match="ghost.txt"):
            engine.make_index(corpus / "docs.txt", corpus / "noisewords.txt")

        assert "hatter" not in engine.index

    def test_missing_noise_words_file(self, corpus):
        with pytest.raises(DocumentNotFoundError):
            LittleSearchEngine().make_index(corpus / "docs.txt", corpus / "nope.txt")

    def test_missing_docs_file(self, tmp_path):
        with pytest.raises(DocumentNotFoundError):
            LittleSearchEngine().make_index(tmp_path / "docs.txt")

    def test_counts_indexed_documents(self, corpus):
        before = _sample("lse_documents_indexed_total")

        LittleSearchEngine().make_index(corpus / "docs.txt", corpus / "noisewords.txt")

        assert _sample("lse_documents_indexed_total") - before == 3
        assert _sample("lse_index_keywords") == 24

    def test_emits_build_span(self, corpus, span_exporter):
        LittleSearchEngine().make_index(corpus / "docs.txt", corpus / "noisewords.txt")

        (span,) = [s for s in span_exporter.get_finished_spans() if s.name == "index.build"]
        assert span.attributes["index.documents"] == 3
        assert span.attributes["index.keywords"] == 24

    def test_failed_build_marks_span_as_error(self, tmp_path, span_exporter):
        with pytest.raises(DocumentNotFoundError):
            LittleSearchEngine().make_index(tmp_path / "docs.txt")

        (span,) = span_exporter.get_finished_spans()
        assert span.status.status_code is StatusCode.ERROR


class TestTop5Search:
    def test_merges_two_keywords(self, engine):
        assert engine.top5_search("rabbit", "tea") == ["rabbit.txt", "tea.txt", "alice.txt"]

    def test_drains_second_keyword(self, engine):
        assert engine.top5_search("alice", "tea") == ["tea.txt", "alice.txt", "rabbit.txt"]

    def test_single_keyword_indexed(self, engine):
        assert engine.top5_search("hatter", "missing") == ["tea.txt"]

    def test_no_match_returns_none(self, engine):
        assert engine.top5_search("the", "and") is None

    def test_counts_hits_and_misses(self, engine):
        hits = _sample("lse_queries_total", {"outcome": "hit"})
        misses = _sample("lse_queries_total", {"outcome": "miss"})

        engine.top5_search("rabbit", "tea")
        engine.top5_search("nothing", "here")

        assert _sample("lse_queries_total", {"outcome": "hit"}) - hits == 1
        assert _sample("lse_queries_total", {"outcome": "miss"}) - misses == 1

    def test_result_limit_from_settings(self, corpus):
        engine = LittleSearchEngine.from_settings(Settings(result_limit=1))
        engine.make_index(corpus / "docs.txt", corpus / "noisewords.txt")

        assert engine.top5_search("rabbit", "tea") == ["rabbit.txt"]


class TestLowLevelOperations:
    def test_get_keyword(self):
        engine = LittleSearchEngine(stopwords=frozenset({"and"}))

        assert engine.get_keyword("Tree!!") == "tree"
        assert engine.get_keyword("AND") is None
        assert engine.get_keyword("can't") is None

    def test_manual_merge_into_shared_index(self):
        index = KeywordIndex()
        engine = LittleSearchEngine(index=index)

        engine.merge_keywords({"tree": Occurrence("d1", 2)})
        engine.merge_keywords({"tree": Occurrence("d2", 6), "leaf": Occurrence("d2", 1)})

        assert [occ.document for occ in index["tree"]] == ["d2", "d1"]
        assert engine.top5_search("leaf", "tree") == ["d2", "d1"]

    def test_load_keywords_from_document(self, corpus):
        engine = LittleSearchEngine(stopwords=frozenset({"the"}))

        keywords = engine.load_keywords_from_document(corpus / "tea.txt", name="tea.txt")

        assert keywords["tea"] == Occurrence("tea.txt", 4)

    def test_insert_last_occurrence(self):
        postings = [Occurrence("a", 10), Occurrence("b", 10), Occurrence("c", 10), Occurrence("x", 10)]

        assert LittleSearchEngine.insert_last_occurrence(postings) == [1]
        assert [occ.document for occ in postings] == ["a", "b", "x", "c"]
