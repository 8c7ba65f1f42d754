"""Sign-based binarization of embedding vectors.

Each component is thresholded on zero: ``>= 0`` is a one bit, ``< 0`` a
zero bit.  Magnitudes are dropped, so the index can match chunks by token
overlap (a Hamming-style comparison) instead of float arithmetic.

With ``group_size == 1`` every component becomes its own token::

    [0.3, -1.2, 0.0]  ->  ["embedding_one_0", "embedding_zero_1", "embedding_one_2"]

With a larger ``group_size`` consecutive components are packed into one
token carrying the group index and its bit string::

    [0.3, -1.2, 0.0], group_size=2  ->  ["embedding_0_10", "embedding_1_1"]

The zero vector therefore maps to all-one tokens, and the empty vector to
no tokens.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _bit(value: float) -> str:
    # NaN compares false, so it lands on the zero side.
    return "1" if value >= 0 else "0"


def binarize_embedding(embedding: Iterable[float], group_size: int = 1) -> list[str]:
    """Convert *embedding* into an ordered list of sign tokens.

    Parameters
    ----------
    embedding:
        Dense embedding vector.
    group_size:
        Number of components packed into each token.

    Returns
    -------
    list[str]
        Tokens in component order.  Same vector in, same tokens out.
    """
    if group_size < 1:
        raise ValueError(f"group_size must be positive, got {group_size}")

    bits = [_bit(value) for value in embedding]
    if group_size == 1:
        return [
            f"embedding_one_{i}" if bit == "1" else f"embedding_zero_{i}"
            for i, bit in enumerate(bits)
        ]

    return [
        f"embedding_{g}_{''.join(bits[start:start + group_size])}"
        for g, start in enumerate(range(0, len(bits), group_size))
    ]


def hamming_distance(a: Sequence[str], b: Sequence[str]) -> int:
    """Count positions where two token sequences of equal length differ."""
    if len(a) != len(b):
        raise ValueError(f"Token sequences differ in length: {len(a)} != {len(b)}")
    return sum(x != y for x, y in zip(a, b))
