"""Embedding capability consumed by the indexing pipeline."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from doc_indexer.config import settings
from doc_indexer.errors import EmbeddingError

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


@runtime_checkable
class Embedding(Protocol):
    """Anything that can turn a piece of text into a dense vector.

    Implementations must be safe to call concurrently from several
    document pipelines; a failure is signalled by raising.
    """

    async def embed(self, text: str) -> list[float]: ...


class LangChainEmbedding:
    """Adapter exposing a LangChain ``Embeddings`` model as :class:`Embedding`.

    Parameters
    ----------
    embeddings:
        Any LangChain embeddings implementation.  Its async
        ``aembed_query`` is used so the event loop is not blocked.
    """

    def __init__(self, embeddings: Embeddings) -> None:
        self._embeddings = embeddings

    async def embed(self, text: str) -> list[float]:
        try:
            vector = await self._embeddings.aembed_query(text)
        except Exception as exc:
            raise EmbeddingError(f"{type(self._embeddings).__name__} failed: {exc}") from exc
        if not vector:
            raise EmbeddingError("Embedding model returned an empty vector")
        return list(vector)


def get_embedding(model_name: str | None = None) -> LangChainEmbedding:
    """Return the configured sentence-transformer embedding capability."""
    from langchain_huggingface import HuggingFaceEmbeddings

    model_name = model_name or settings.embedding_model
    logger.info("Loading embedding model %s", model_name)
    return LangChainEmbedding(HuggingFaceEmbeddings(model_name=model_name))
