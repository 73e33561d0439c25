"""Single 64-bit xorshift lane plus a modulo 2^64 Weyl counter.

Fastest members of the family; ``next_u32`` is the low half of the 64-bit
output word.
"""

from .bits import to_u32, to_u64
from .constants import MASK64, VARIANT_PARAMS
from .rng import XorwowRng
from .state import XorwowState


class _Xorwow64(XorwowRng):
    @classmethod
    def _state_from_u64(cls, value: int) -> XorwowState:
        return XorwowState([value or MASK64], value, 64)

    def _clock(self) -> None:
        a, b, c = self.PARAMS.shifts
        s = self._state
        x = s.lanes[0]
        x ^= to_u64(x << a)
        x ^= x >> b
        x ^= to_u64(x << c)
        s.lanes[0] = x
        s.counter = to_u64(s.counter + self.PARAMS.weyl)

    def _output_u64(self) -> int:
        s = self._state
        return to_u64(self._combine(s.lanes[0], s.counter))

    def _output_u32(self) -> int:
        return to_u32(self._output_u64())


class WrapA(_Xorwow64):
    """Shift triple (13, 7, 17); counter added to the output."""

    PARAMS = VARIANT_PARAMS["wrap_a"]


class WrapB(_Xorwow64):
    """Shift triple (13, 19, 28); counter added to the output."""

    PARAMS = VARIANT_PARAMS["wrap_b"]


class XorA(_Xorwow64):
    """Shift triple (13, 7, 17); counter XORed into the output."""

    PARAMS = VARIANT_PARAMS["xor_a"]


class XorB(_Xorwow64):
    """Shift triple (13, 19, 28); counter XORed into the output."""

    PARAMS = VARIANT_PARAMS["xor_b"]
