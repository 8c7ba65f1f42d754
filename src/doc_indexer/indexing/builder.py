"""Document attribute builder: ids, attributes and the chunk stream.

:class:`DocBuilder` answers three questions about a
:class:`~doc_indexer.models.SourceDocument`:

* what id it is stored under (:meth:`DocBuilder.build_id`),
* which document-level fields it carries (:meth:`DocBuilder.build_attributes`),
* which ``(tokens, attributes)`` pairs its chunks produce
  (:meth:`DocBuilder.build_chunk_attributes`).

Only the last one calls the embedding model.

Usage::

    builder = DocBuilder(get_embedding())
    async for tokens, attributes in builder.build_chunk_attributes(doc):
        ...
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from doc_indexer import fields
from doc_indexer.config import settings
from doc_indexer.ingestion.binarizer import binarize_embedding
from doc_indexer.ingestion.chunker import split_text
from doc_indexer.ingestion.embedder import Embedding
from doc_indexer.models import SourceDocument

logger = logging.getLogger(__name__)


class DocBuilder:
    """Builds index ids and attributes for web documents.

    Parameters
    ----------
    embedding:
        Embedding capability shared across documents.
    chunk_size:
        Maximum characters per chunk (defaults to ``settings.chunk_size``).
    namespace:
        Source-type tag prefixed to ids (defaults to ``settings.id_namespace``).
    group_size:
        Components per binarized token (defaults to
        ``settings.binarize_group_size``).
    """

    def __init__(
        self,
        embedding: Embedding,
        *,
        chunk_size: int | None = None,
        namespace: str | None = None,
        group_size: int | None = None,
    ) -> None:
        self.embedding = embedding
        self.chunk_size = settings.chunk_size if chunk_size is None else chunk_size
        self.namespace = namespace or settings.id_namespace
        self.group_size = settings.binarize_group_size if group_size is None else group_size
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.group_size < 1:
            raise ValueError(f"group_size must be positive, got {self.group_size}")

    # -- ids & attributes -----------------------------------------------------

    def format_id(self, document_id: str) -> str:
        return f"{self.namespace}:{document_id}"

    def build_id(self, document: SourceDocument) -> str:
        return self.format_id(document.id)

    def build_attributes(self, document: SourceDocument) -> dict[str, Any]:
        return {
            fields.TITLE: document.title,
            fields.LINK: document.link,
        }

    def build_chunk_attribute(self, chunk_text: str) -> dict[str, Any]:
        return {fields.CHUNK_TEXT: chunk_text}

    # -- chunk stream ---------------------------------------------------------

    async def build_chunk_attributes(
        self, document: SourceDocument
    ) -> AsyncIterator[tuple[list[str], dict[str, Any]]]:
        """Split *document* into chunks, embed each one and binarize it.

        Chunks are handled one after another: the embedding for chunk N+1
        is requested only once chunk N has been yielded or dropped.  A chunk
        whose embedding fails is logged and skipped; the document itself
        never fails.

        Yields
        ------
        tuple[list[str], dict]
            ``(tokens, chunk_attributes)`` in body order.
        """
        attempted = 0
        for chunk_text in split_text(document.body, self.chunk_size):
            attempted += 1
            try:
                vector = await self.embedding.embed(chunk_text)
            except Exception as exc:
                logger.warning("Failed to embed chunk text: %s", exc)
                continue

            tokens = binarize_embedding(vector, self.group_size)
            yield tokens, self.build_chunk_attribute(chunk_text)

        logger.debug("Attempted %d chunks for document %s", attempted, document.id)
