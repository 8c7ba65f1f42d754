"""Unit tests for the embedding capability and its LangChain adapter."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding

from doc_indexer.errors import EmbeddingError
from doc_indexer.ingestion.embedder import Embedding, LangChainEmbedding, get_embedding


class TestLangChainEmbedding:
    @pytest.mark.asyncio
    async def test_returns_model_vector(self) -> None:
        embedding = LangChainEmbedding(DeterministicFakeEmbedding(size=8))
        vector = await embedding.embed("hello")
        assert len(vector) == 8
        assert vector == await embedding.embed("hello")

    def test_satisfies_protocol(self) -> None:
        assert isinstance(LangChainEmbedding(DeterministicFakeEmbedding(size=4)), Embedding)

    @pytest.mark.asyncio
    async def test_wraps_provider_errors(self) -> None:
        model = MagicMock()
        model.aembed_query = AsyncMock(side_effect=ConnectionError("refused"))

        with pytest.raises(EmbeddingError, match="refused") as excinfo:
            await LangChainEmbedding(model).embed("hello")
        assert isinstance(excinfo.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_empty_vector_is_an_error(self) -> None:
        model = MagicMock()
        model.aembed_query = AsyncMock(return_value=[])

        with pytest.raises(EmbeddingError, match="empty vector"):
            await LangChainEmbedding(model).embed("hello")


def test_get_embedding_uses_configured_model() -> None:
    with patch("langchain_huggingface.HuggingFaceEmbeddings") as hf:
        embedding = get_embedding("my-org/my-model")

    hf.assert_called_once_with(model_name="my-org/my-model")
    assert isinstance(embedding, LangChainEmbedding)
