"""Exceptions raised by the indexing core."""


class EmbeddingError(RuntimeError):
    """The embedding backend could not produce a vector for a piece of text."""
