"""Streaming of a document's records into an index sink.

The indexer owns no storage.  It turns one
:class:`~doc_indexer.models.SourceDocument` into an
:class:`~doc_indexer.models.IndexDocument` followed by its
:class:`~doc_indexer.models.ChunkRecord` entries, and hands them one at a
time to whatever :class:`RecordSink` the caller supplies.

Usage::

    indexer = create_web_index(get_embedding())
    async for record in indexer.iter_chunks(document):
        writer.write(record)
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Protocol

from doc_indexer.indexing.builder import DocBuilder
from doc_indexer.ingestion.embedder import Embedding
from doc_indexer.models import ChunkRecord, IndexDocument, SourceDocument

logger = logging.getLogger(__name__)


class RecordSink(Protocol):
    """Destination for built records, e.g. a full-text index writer."""

    def add_document(self, document: IndexDocument) -> None: ...

    def add_chunk(self, record: ChunkRecord) -> None: ...


class Indexer:
    """Builds and emits index records for source documents.

    Parameters
    ----------
    builder:
        Supplies ids, attributes and the per-chunk token stream.
    """

    def __init__(self, builder: DocBuilder) -> None:
        self.builder = builder

    async def iter_chunks(self, document: SourceDocument) -> AsyncIterator[ChunkRecord]:
        """Yield one :class:`ChunkRecord` per successfully embedded chunk.

        Records are produced lazily in body order.  Closing the iterator
        early stops all further embedding work for the document.
        """
        document_id = self.builder.build_id(document)
        n = 0
        async for tokens, attributes in self.builder.build_chunk_attributes(document):
            yield ChunkRecord(
                id=f"{document_id}-{n}",
                document_id=document_id,
                tokens=tokens,
                attributes=attributes,
            )
            n += 1

    async def iter_docs(
        self, document: SourceDocument
    ) -> AsyncIterator[IndexDocument | ChunkRecord]:
        """Yield the document-level entry, then each of its chunk records."""
        yield IndexDocument(
            id=self.builder.build_id(document),
            attributes=self.builder.build_attributes(document),
        )
        async for record in self.iter_chunks(document):
            yield record

    async def add(self, document: SourceDocument, sink: RecordSink) -> int:
        """Write *document* and its chunks into *sink*.

        Returns
        -------
        int
            Number of chunk records written.
        """
        document_id = self.builder.build_id(document)
        written = 0
        async for entry in self.iter_docs(document):
            if isinstance(entry, ChunkRecord):
                sink.add_chunk(entry)
                written += 1
            else:
                sink.add_document(entry)

        logger.info("Indexed %s with %d chunks", document_id, written)
        return written


def create_web_index(
    embedding: Embedding,
    *,
    chunk_size: int | None = None,
    namespace: str | None = None,
    group_size: int | None = None,
) -> Indexer:
    """Return an :class:`Indexer` for web documents.

    Ids are prefixed with *namespace*, or ``settings.id_namespace``
    (``web`` by default) when it is not given.
    """
    builder = DocBuilder(
        embedding,
        chunk_size=chunk_size,
        namespace=namespace,
        group_size=group_size,
    )
    return Indexer(builder)
