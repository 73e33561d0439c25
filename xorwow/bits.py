"""Fixed-width word helpers.

Python integers are unbounded, so every shift-left and every addition that
models a machine word has to be clipped back to its width explicitly.
"""

import operator
from typing import Callable, Dict, List

from .constants import MASK32, MASK64


def to_u32(x: int) -> int:
    """Clip an integer so that it occupies 32 bits."""
    return x & MASK32


def to_u64(x: int) -> int:
    """Clip an integer so that it occupies 64 bits."""
    return x & MASK64


COMBINERS: Dict[str, Callable[[int, int], int]] = {
    "add": operator.add,
    "xor": operator.xor,
}


def read_words_le(raw: bytes, width: int) -> List[int]:
    """Decode ``raw`` into consecutive little-endian words of ``width`` bits."""
    size = width // 8
    if len(raw) % size:
        raise ValueError(f"{len(raw)} bytes do not split into {width}-bit words")
    return [
        int.from_bytes(raw[offset : offset + size], "little")
        for offset in range(0, len(raw), size)
    ]


def write_words_le(words: List[int], width: int) -> bytes:
    """Inverse of :func:`read_words_le`."""
    size = width // 8
    return b"".join(word.to_bytes(size, "little") for word in words)
