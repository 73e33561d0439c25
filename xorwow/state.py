from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class XorwowState:
    """Xorshift lanes plus the Weyl counter, all words of ``width`` bits.

    Lane order follows the raw seed layout of the owning engine; the
    32-bit engines keep their most recent xorshift word in ``lanes[0]``.
    """

    lanes: List[int] = field(default_factory=list)
    counter: int = 0
    width: int = 32

    def copy(self) -> "XorwowState":
        return XorwowState(list(self.lanes), self.counter, self.width)

    def lanes_zero(self) -> bool:
        return not any(self.lanes)

    def as_tuple(self) -> Tuple[int, ...]:
        # raw seed layout: lanes in order, counter last
        return (*self.lanes, self.counter)
