"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Indexing settings, populated from env vars or .env file."""

    # Chunking
    chunk_size: int = Field(default=2048, description="Maximum number of characters per chunk")

    # Identifiers
    id_namespace: str = Field(
        default="web",
        description=(
            "Source-type tag prepended to document ids (``web:<id>``) so that "
            "documents from different sources can share one index."
        ),
    )

    # Embedding
    embedding_model: str = "sentence-transformers/all-MiniLM-L6-v2"
    binarize_group_size: int = Field(
        default=1,
        description="Number of embedding components packed into one token",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Import `settings` wherever needed.
settings = Settings()
