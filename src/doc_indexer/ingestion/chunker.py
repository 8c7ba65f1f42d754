"""Text chunking strategies."""

from __future__ import annotations

from collections.abc import Iterator

from langchain_text_splitters import RecursiveCharacterTextSplitter

from doc_indexer.config import settings

# Paragraph → line → sentence → word → character. Separators stay with the
# preceding text.
SEPARATORS = ["\n\n", "\n", ". ", " ", ""]


def build_splitter(chunk_size: int | None = None) -> RecursiveCharacterTextSplitter:
    """Return a non-overlapping splitter bounded to *chunk_size* characters."""
    chunk_size = settings.chunk_size if chunk_size is None else chunk_size
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return RecursiveCharacterTextSplitter(
        chunk_size=chunk_size,
        chunk_overlap=0,
        length_function=len,
        separators=SEPARATORS,
        keep_separator="end",
        strip_whitespace=True,
    )


def split_text(text: str, chunk_size: int | None = None) -> Iterator[str]:
    """Split *text* into ordered chunks of at most *chunk_size* characters.

    Boundaries prefer paragraphs, then lines, sentences and words; a
    single unbroken run longer than *chunk_size* is cut by character.

    Parameters
    ----------
    text:
        Document body.  Empty or whitespace-only text yields nothing.
    chunk_size:
        Maximum characters per chunk (defaults to ``settings.chunk_size``).

    Yields
    ------
    str
        Non-empty, whitespace-stripped chunks in body order.  The whole
        body is split up front; chunks are then handed out one at a time.
    """
    splitter = build_splitter(chunk_size)
    if not text or text.isspace():
        return

    for chunk in splitter.split_text(text):
        if chunk:
            yield chunk
