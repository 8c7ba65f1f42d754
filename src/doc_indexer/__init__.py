"""
doc_indexer — turn raw documents into binarized, embedding-backed chunk
records for a full-text / nearest-neighbour index.

Public surface
--------------
- :class:`SourceDocument` — the document handed to the indexer.
- :class:`ChunkRecord`, :class:`IndexDocument` — what the indexer emits.
- :class:`DocBuilder` — ids, attributes and the per-chunk record stream.
- :class:`Indexer` / :func:`create_web_index` — push records into a sink.
"""

from doc_indexer.indexing.builder import DocBuilder
from doc_indexer.indexing.indexer import Indexer, RecordSink, create_web_index
from doc_indexer.models import ChunkRecord, IndexDocument, SourceDocument

__all__ = [
    "ChunkRecord",
    "DocBuilder",
    "IndexDocument",
    "Indexer",
    "RecordSink",
    "SourceDocument",
    "create_web_index",
]
