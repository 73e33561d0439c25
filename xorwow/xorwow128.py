"""Two 64-bit xorshift lanes (xorshift128) plus a modulo 2^64 Weyl counter."""

from .bits import to_u32, to_u64
from .constants import MASK64, VARIANT_PARAMS
from .rng import XorwowRng
from .state import XorwowState


class _Xorwow128(XorwowRng):
    @classmethod
    def _state_from_u64(cls, value: int) -> XorwowState:
        return XorwowState([value or MASK64, value], to_u64(~value), 64)

    def _clock(self) -> None:
        a, b, c = self.PARAMS.shifts
        lanes = self._state.lanes
        x = lanes[0]
        y = lanes[1]
        lanes[0] = y
        x ^= to_u64(x << a)
        x ^= x >> b
        x ^= y ^ (y >> c)
        lanes[1] = x
        self._state.counter = to_u64(self._state.counter + self.PARAMS.weyl)

    def _output_u64(self) -> int:
        s = self._state
        return to_u64(self._combine(s.lanes[0], s.counter))

    def _output_u32(self) -> int:
        return to_u32(self._output_u64())


class LargeWrap(_Xorwow128):
    PARAMS = VARIANT_PARAMS["large_wrap"]


class LargeXor(_Xorwow128):
    PARAMS = VARIANT_PARAMS["large_xor"]
