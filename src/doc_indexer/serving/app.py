"""FastAPI application streaming chunk records for a posted document."""

from __future__ import annotations

from collections.abc import AsyncIterator
from functools import lru_cache

from fastapi import Depends, FastAPI
from fastapi.responses import StreamingResponse

from doc_indexer.indexing.indexer import create_web_index
from doc_indexer.ingestion import embedder
from doc_indexer.ingestion.embedder import Embedding
from doc_indexer.models import SourceDocument

app = FastAPI(
    title="Doc Indexer API",
    version="0.1.0",
    description="Chunk, embed and binarize documents for a search index.",
)


@lru_cache(maxsize=1)
def get_embedding() -> Embedding:
    """Load the configured embedding model once per process."""
    return embedder.get_embedding()


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.post("/documents/chunks")
async def document_chunks(
    document: SourceDocument,
    embedding: Embedding = Depends(get_embedding),
) -> StreamingResponse:
    """Stream one JSON line per chunk record of *document*.

    Records are produced as the client reads them; a client that
    disconnects early stops the remaining embedding calls.
    """
    indexer = create_web_index(embedding)

    async def ndjson() -> AsyncIterator[str]:
        async for record in indexer.iter_chunks(document):
            yield record.model_dump_json() + "\n"

    return StreamingResponse(ndjson(), media_type="application/x-ndjson")
