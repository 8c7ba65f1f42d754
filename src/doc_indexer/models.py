"""Domain models for source documents and the records built from them."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SourceDocument(BaseModel):
    """A raw document as handed over by a fetcher.

    Fields are passed through as-is; an empty ``title`` or ``link`` is not
    an error at this layer.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    link: str = ""
    body: str = ""


class IndexDocument(BaseModel):
    """Document-level entry written once per source document.

    Attributes
    ----------
    id:
        Namespaced document identifier, e.g. ``"web:abc"``.
    attributes:
        Document-level fields (``title``, ``link``).
    """

    id: str
    attributes: dict[str, Any] = Field(default_factory=dict)


class ChunkRecord(BaseModel):
    """One indexable chunk of a document.

    Attributes
    ----------
    id:
        ``"<document_id>-<n>"`` where *n* counts the records emitted for
        the document, starting at 0.
    document_id:
        Namespaced id of the parent document.
    tokens:
        Binarized embedding tokens, in component order.
    attributes:
        Chunk-level fields (``chunk_text``).
    """

    id: str
    document_id: str
    tokens: list[str]
    attributes: dict[str, Any] = Field(default_factory=dict)
