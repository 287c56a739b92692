"""
Keyword indexing and query package.

This package provides the in-memory search stack:
- models: Occurrence, posting lists and the keyword index
- postings: Binary-search insertion into descending-frequency posting lists
- index_builder: Merges per-document keyword maps into the index
- top_k: Two-keyword OR query with tie-breaking and deduplication
- analyzers: Keyword extraction (punctuation, case, stop words)
- scanner: Document, document-list and noise-word file readers
- engine: LittleSearchEngine facade
"""
