"""
Indexing — per-document orchestration from source text to chunk records.

Public API
----------
- :class:`DocBuilder` — ids, document attributes and the chunk stream.
- :class:`Indexer` — pushes a document's records into a :class:`RecordSink`.
- :func:`create_web_index` — wire a ``DocBuilder`` for web documents.
"""

from doc_indexer.indexing.builder import DocBuilder
from doc_indexer.indexing.indexer import Indexer, RecordSink, create_web_index

__all__ = [
    "DocBuilder",
    "Indexer",
    "RecordSink",
    "create_web_index",
]
