"""Search indexing and query engine package.

This package provides a pure-Python TF-IDF stack:
- analyzers: Whitespace tokenizer and stop-word filter
- inverted_index: Term -> document frequency postings
- document_store: Per-document rating and status
- query: Plus/minus query parsing
- filters: Document predicates
- stats: TF, IDF and rating helpers
- ranker: TF-IDF scoring, sorting and truncation
"""
