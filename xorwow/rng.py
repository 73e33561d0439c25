"""Generator interface shared by every Xorwow variant.

Concrete engines only supply the state transition and the output words; the
seeding constructors and the byte-buffer adapters live here so that every
variant consumes its stream in exactly the same way.
"""

import logging
import os
from typing import Callable, Optional, Tuple, Union

import numpy as np

from .bits import COMBINERS, read_words_le
from .constants import MASK64, VariantParams
from .errors import EntropyError
from .state import XorwowState

logger = logging.getLogger(__name__)

EntropyProvider = Callable[[int], bytes]


def os_entropy(n: int) -> bytes:
    """Default entropy collaborator: ``n`` bytes from the operating system."""
    return os.urandom(n)


class XorwowRng:
    """Base class for the Xorwow engines.

    Subclasses set ``PARAMS`` and implement ``_clock``, ``_state_from_u64``,
    ``_output_u32`` and ``_output_u64``. Not thread-safe: guard a shared
    instance with a lock.
    """

    PARAMS: VariantParams

    def __init__(self, state: XorwowState) -> None:
        params = self.PARAMS
        if state.width != params.width or len(state.lanes) != params.lanes:
            raise ValueError(
                f"{type(self).__name__} needs {params.lanes} lanes of "
                f"{params.width} bits, got {len(state.lanes)} of {state.width}"
            )
        if any(not 0 <= word <= params.mask for word in state.as_tuple()):
            raise ValueError(f"state words must fit in {params.width} bits")
        if state.lanes_zero():
            raise ValueError("xorshift lanes must not all be zero")
        self._state = state.copy()
        self._combine = COMBINERS[params.combine]

    # -- seeding -----------------------------------------------------------

    @classmethod
    def seed_size(cls) -> int:
        return cls.PARAMS.seed_size

    @classmethod
    def seed_from_u64(cls, value: int) -> "XorwowRng":
        """Expand one 64-bit seed into a full, never all-zero state."""
        if not 0 <= value <= MASK64:
            raise ValueError(f"seed must fit in 64 unsigned bits, got {value}")
        return cls(cls._state_from_u64(value))

    @classmethod
    def seed_from_raw_state(cls, raw: bytes) -> "XorwowRng":
        """Build an engine from little-endian lane words followed by the counter.

        All-zero lanes are replaced with all-ones lanes; the counter is kept.
        """
        params = cls.PARAMS
        raw = bytes(raw)
        if len(raw) != params.seed_size:
            raise ValueError(
                f"{cls.__name__} raw state is {params.seed_size} bytes, got {len(raw)}"
            )
        *lanes, counter = read_words_le(raw, params.width)
        if not any(lanes):
            logger.debug("%s: all-zero raw lanes remapped to all-ones", cls.__name__)
            lanes = [params.mask] * params.lanes
        return cls(XorwowState(lanes, counter, params.width))

    from_seed = seed_from_raw_state

    @classmethod
    def from_entropy(cls, entropy: Optional[EntropyProvider] = None) -> "XorwowRng":
        """Seed from an entropy collaborator (``os.urandom`` when omitted).

        Exceptions raised by the collaborator propagate unchanged.
        """
        provider = entropy or os_entropy
        size = cls.PARAMS.seed_size
        logger.debug("%s: requesting %d entropy bytes", cls.__name__, size)
        raw = bytes(provider(size))
        if len(raw) != size:
            raise EntropyError(f"entropy source returned {len(raw)} of {size} bytes")
        return cls.seed_from_raw_state(raw)

    @classmethod
    def _state_from_u64(cls, value: int) -> XorwowState:
        raise NotImplementedError

    # -- transition --------------------------------------------------------

    def _clock(self) -> None:
        raise NotImplementedError

    def _output_u32(self) -> int:
        raise NotImplementedError

    def _output_u64(self) -> int:
        raise NotImplementedError

    # -- generator interface -----------------------------------------------

    def next_u32(self) -> int:
        self._clock()
        return self._output_u32()

    def next_u64(self) -> int:
        self._clock()
        return self._output_u64()

    def fill_bytes(self, dest) -> None:
        """Fill a writable buffer with little-endian output words.

        Whole 8-byte chunks take one ``next_u64`` each; a 5-7 byte tail takes
        one more ``next_u64`` and a 1-4 byte tail one ``next_u32``.
        """
        view = memoryview(dest).cast("B")
        length = len(view)
        offset = 0
        while length - offset >= 8:
            view[offset : offset + 8] = self.next_u64().to_bytes(8, "little")
            offset += 8
        left = length - offset
        if left > 4:
            view[offset:] = self.next_u64().to_bytes(8, "little")[:left]
        elif left > 0:
            view[offset:] = self.next_u32().to_bytes(4, "little")[:left]

    def try_fill_bytes(self, dest) -> None:
        """Fallible form of :meth:`fill_bytes`; would raise ``RngError``."""
        self.fill_bytes(dest)

    def random_bytes(self, n: int) -> bytes:
        buf = bytearray(n)
        self.fill_bytes(buf)
        return bytes(buf)

    def random_raw(
        self, size: Union[None, int, Tuple[int, ...]] = None
    ) -> Union[int, np.ndarray]:
        """Raw 64-bit words, shaped like numpy's ``BitGenerator.random_raw``."""
        if size is None:
            return self.next_u64()
        shape = (size,) if isinstance(size, int) else tuple(size)
        count = int(np.prod(shape, dtype=np.int64))
        words = np.array([self.next_u64() for _ in range(count)], dtype=np.uint64)
        return words.reshape(shape)

    # -- inspection --------------------------------------------------------

    def dump_state(self) -> Tuple[int, ...]:
        return self._state.as_tuple()

    def copy(self) -> "XorwowRng":
        return type(self)(self._state)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state == other._state
