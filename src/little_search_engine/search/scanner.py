"""Filesystem readers for documents, document lists and noise words."""

from __future__ import annotations

import logging
from pathlib import Path

from little_search_engine.search.analyzers import KeywordExtractor
from little_search_engine.search.models import Occurrence


logger = logging.getLogger(__name__)


class DocumentScanner:
    """Load the keywords of a single document into per-keyword occurrences."""

    def __init__(self, extractor: KeywordExtractor, *, encoding: str = "utf-8") -> None:
        self.extractor = extractor
        self.encoding = encoding

    def extract_keyword_map(self, document: str | Path | None, *, name: str | None = None) -> dict[str, Occurrence]:
        """Scan ``document`` and count each keyword it contains.

        Args:
            document: Path of the document file.
            name: Identifier recorded on the occurrences. Defaults to
                ``str(document)``.

        Raises:
            DocumentNotFoundError: If the document is None or missing on disk.
        """

        text = read_text(document, encoding=self.encoding)
        doc_id = name if name is not None else str(document)

        keywords: dict[str, Occurrence] = {}
        for token in self.extractor(text):
            occurrence = keywords.get(token.text)
            if occurrence is None:
                keywords[token.text] = Occurrence(document=doc_id, frequency=1)
            else:
                occurrence.frequency += 1

        logger.debug("Scanned %s: %d distinct keywords", doc_id, len(keywords))
        return keywords


def read_text(path: str | Path | None, *, encoding: str = "utf-8") -> str:
    if path is None:
        raise DocumentNotFoundError("File Not Found")
    try:
        with open(path, encoding=encoding) as handle:
            return handle.read()
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise DocumentNotFoundError(f"File Not Found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise DocumentDecodeError(f"Cannot decode {path} as {encoding}: {exc.reason} at byte {exc.start}") from exc


def load_stopwords(path: str | Path, *, encoding: str = "utf-8") -> frozenset[str]:
    """Read whitespace-separated noise words, lowercased."""
    words = frozenset(word.lower() for word in read_text(path, encoding=encoding).split())
    logger.info("Loaded %d noise words from %s", len(words), path)
    return words


def read_document_list(path: str | Path, *, encoding: str = "utf-8") -> list[str]:
    """Return the whitespace-separated document names listed in ``path``."""
    return read_text(path, encoding=encoding).split()


def resolve_document_path(name: str, base_dir: Path) -> Path:
    """Resolve a listed document name against the list file's directory first."""
    candidate = Path(name).expanduser()
    if candidate.is_absolute():
        return candidate
    relative_to_list = base_dir / candidate
    if relative_to_list.exists():
        return relative_to_list
    return candidate


class DocumentNotFoundError(FileNotFoundError):
    """Raised when a document, document list or noise-word file cannot be located."""


class DocumentDecodeError(ValueError):
    """Raised when an input file is not valid text in the configured encoding."""
