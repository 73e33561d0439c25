"""Marsaglia's xorwow with 32-bit lanes and a modulo 2^32 Weyl counter.

The variants differ in lane count (128, 160 or 192 bits of xorshift state)
and in how the Weyl counter is folded into the output word.
"""

from .bits import to_u32
from .constants import VARIANT_PARAMS
from .rng import XorwowRng
from .state import XorwowState


class _Xorwow32(XorwowRng):
    @classmethod
    def _state_from_u64(cls, value: int) -> XorwowState:
        lo = to_u32(value)
        hi = value >> 32
        # lanes 0 and 1 are complements, so the lanes can never all be zero
        pattern = (lo, to_u32(~lo), hi, to_u32(~hi))
        lanes = [pattern[i % 4] for i in range(cls.PARAMS.lanes)]
        return XorwowState(lanes, 0, 32)

    def _clock(self) -> None:
        a, b, c = self.PARAMS.shifts
        s = self._state
        x = s.lanes[-1]
        y = s.lanes[0]
        x ^= x >> a
        x ^= to_u32(x << b)
        x ^= y ^ to_u32(y << c)
        s.lanes.pop()
        s.lanes.insert(0, x)
        s.counter = to_u32(s.counter + self.PARAMS.weyl)

    def _output_u32(self) -> int:
        s = self._state
        return to_u32(self._combine(s.lanes[0], s.counter))

    def _output_u64(self) -> int:
        # one transition: previous newest lane is the high half
        s = self._state
        high = to_u32(self._combine(s.lanes[1], s.counter))
        return (high << 32) | to_u32(self._combine(s.lanes[0], s.counter))


class Xorwow128(_Xorwow32):
    """128 bits of xorshift state plus the 32-bit counter."""

    PARAMS = VARIANT_PARAMS["xorwow128"]


class Xorwow160(_Xorwow32):
    """160 bits of xorshift state plus the 32-bit counter (the classic xorwow)."""

    PARAMS = VARIANT_PARAMS["xorwow160"]


class Xorwow192(_Xorwow32):
    """192 bits of xorshift state plus the 32-bit counter."""

    PARAMS = VARIANT_PARAMS["xorwow192"]


class XorwowXor160(_Xorwow32):
    """Like :class:`Xorwow160`, but XORs the counter into the output."""

    PARAMS = VARIANT_PARAMS["xorwow_xor160"]
