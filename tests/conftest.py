"""Shared test fixtures and configuration."""

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from little_search_engine.search.models import KeywordIndex, Occurrence


# Test environment overriding every LSE_* setting
TEST_ENV = {
    "LSE_RESULT_LIMIT": "5",
    "LSE_LOG_LEVEL": "info",
    "LSE_LOG_JSON": "true",
    "LSE_FILE_ENCODING": "utf-8",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset LSE_* variables so a developer's shell cannot leak into tests."""
    monkeypatch.delenv("LSE_DOCS_FILE", raising=False)
    monkeypatch.delenv("LSE_NOISE_WORDS_FILE", raising=False)
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


def make_postings(*pairs: tuple[str, int]) -> list[Occurrence]:
    return [Occurrence(document=doc, frequency=freq) for doc, freq in pairs]


@pytest.fixture
def build_index():
    """Factory building a KeywordIndex from ``{keyword: [(doc, freq), ...]}``."""

    def _build(entries: dict[str, list[tuple[str, int]]]) -> KeywordIndex:
        index = KeywordIndex()
        for keyword, pairs in entries.items():
            index.add(keyword, make_postings(*pairs))
        return index

    return _build


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """Small on-disk corpus: docs.txt, noisewords.txt and three documents."""
    (tmp_path / "noisewords.txt").write_text("a\nthe\nand\nof\nis\nwas\nto\nin\n")
    (tmp_path / "alice.txt").write_text(
        "Alice was beginning to get very tired of sitting by her sister.\n"
        "The rabbit, the RABBIT! Alice saw the rabbit run down a hole.\n"
    )
    (tmp_path / "rabbit.txt").write_text(
        "Rabbit rabbit rabbit; the white rabbit is late.\nThe tea party can't wait for the rabbit.\n"
    )
    (tmp_path / "tea.txt").write_text("Tea? Tea! More tea, said the Hatter. Alice declined the tea.\n")
    (tmp_path / "docs.txt").write_text("alice.txt\nrabbit.txt\ntea.txt\n")
    return tmp_path
