"""Keyword extraction built from composable tokenizers and filters.

A keyword is a whitespace-delimited word that, once any trailing punctuation
is stripped and it is lowercased, consists only of letters and is not a stop
word. Only the characters in :data:`PUNCTUATION` count as punctuation; an
apostrophe left inside a word disqualifies it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
import re
from typing import Protocol


PUNCTUATION = ".,?:;!"


@dataclass
class Token:
    """Represents a token emitted by analyzers."""

    text: str


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class WhitespaceTokenizer:
    """Splits text on runs of whitespace."""

    _PATTERN = re.compile(r"\S+")

    def __call__(self, text: str) -> Iterator[Token]:
        for match in self._PATTERN.finditer(text):
            yield Token(text=match.group(0))


class SingleTokenTokenizer:
    """Treats the entire input as one token."""

    def __call__(self, text: str) -> Iterator[Token]:
        yield Token(text=text)


class TrailingPunctuationFilter:
    """Strips any run of trailing punctuation characters."""

    def __init__(self, punctuation: str = PUNCTUATION) -> None:
        self.punctuation = punctuation

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            stripped = token.text.rstrip(self.punctuation)
            if stripped == token.text:
                yield token
            else:
                yield Token(text=stripped)


class LowercaseFilter:
    """Filter that lowercases token text."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.islower():
                yield token
            else:
                yield Token(text=token.text.lower())


DEFAULT_STOPWORDS = [
    "a",
    "an",
    "and",
    "are",
    "as",
    "at",
    "be",
    "but",
    "by",
    "for",
    "if",
    "in",
    "into",
    "is",
    "it",
    "no",
    "not",
    "of",
    "on",
    "or",
    "such",
    "that",
    "the",
    "their",
    "then",
    "there",
    "these",
    "they",
    "this",
    "to",
    "was",
    "will",
    "with",
]


class StopFilter:
    """Removes stopwords from the stream."""

    def __init__(self, stopwords: Iterable[str] | None = None) -> None:
        vocab = stopwords if stopwords is not None else DEFAULT_STOPWORDS
        self.stopwords = frozenset(word.lower() for word in vocab)

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.lower() not in self.stopwords:
                yield token


class AlphabeticFilter:
    """Drops empty tokens and tokens containing anything but letters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.isalpha():
                yield token


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[Token]:
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        return list(stream)


class KeywordExtractor:
    """Turns raw words or whole texts into index keywords."""

    def __init__(self, *, stopwords: Iterable[str] | None = None) -> None:
        self.stop_filter = StopFilter(stopwords)
        filters: list[TokenFilter] = [
            TrailingPunctuationFilter(),
            LowercaseFilter(),
            self.stop_filter,
            AlphabeticFilter(),
        ]
        self.pipeline = AnalyzerPipeline(WhitespaceTokenizer(), filters)
        self._word_pipeline = AnalyzerPipeline(SingleTokenTokenizer(), filters)

    @property
    def stopwords(self) -> frozenset[str]:
        return self.stop_filter.stopwords

    def extract_keyword(self, word: str) -> str | None:
        """Return ``word`` as a keyword, or None if it does not qualify."""
        tokens = self._word_pipeline(word)
        return tokens[0].text if tokens else None

    def __call__(self, text: str) -> list[Token]:
        return self.pipeline(text)
