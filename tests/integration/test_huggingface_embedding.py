"""End-to-end indexing against the configured sentence-transformer model."""

from __future__ import annotations

import pytest

from doc_indexer.indexing.indexer import create_web_index
from doc_indexer.ingestion.binarizer import hamming_distance
from doc_indexer.ingestion.embedder import get_embedding
from doc_indexer.models import SourceDocument

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_similar_chunks_share_more_tokens() -> None:
    indexer = create_web_index(get_embedding(), chunk_size=48)
    document = SourceDocument(
        id="kb-1",
        title="Pets",
        link="https://example.com/pets",
        body=(
            "Cats are small furry pets.\n\n"
            "Kittens are young furry cats.\n\n"
            "Quarterly tax filings are due in April."
        ),
    )

    records = [r async for r in indexer.iter_chunks(document)]

    assert len(records) == 3
    cats, kittens, taxes = (r.tokens for r in records)
    assert hamming_distance(cats, kittens) < hamming_distance(cats, taxes)
