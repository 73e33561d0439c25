"""Fixed constant tables for every Xorwow variant.

Shift triples and Weyl increments are format constants: changing any of them
breaks reproduction of the reference output streams.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1

# Marsaglia (2003), "Xorshift RNGs", J. Stat. Soft. 8(14); any odd number works
WEYL_INCREMENT_32 = 362437
WEYL_INCREMENT_64 = 0x587CC7F5F9DD5

XORWOW32_SHIFTS = (2, 1, 4)
# Vigna, "Further scramblings of Marsaglia's xorshift generators"
XORSHIFT64_SHIFTS_A = (13, 7, 17)
XORSHIFT64_SHIFTS_B = (13, 19, 28)
XORSHIFT128_SHIFTS = (23, 17, 26)


@dataclass(frozen=True)
class VariantParams:
    """One row of the variant table."""

    name: str
    width: int
    lanes: int
    shifts: Tuple[int, int, int]
    weyl: int
    combine: str  # "add" or "xor"

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def seed_size(self) -> int:
        # lane bytes followed by counter bytes
        return (self.lanes + 1) * self.width // 8


VARIANT_PARAMS: Dict[str, VariantParams] = {
    params.name: params
    for params in (
        VariantParams("xorwow128", 32, 4, XORWOW32_SHIFTS, WEYL_INCREMENT_32, "add"),
        VariantParams("xorwow160", 32, 5, XORWOW32_SHIFTS, WEYL_INCREMENT_32, "add"),
        VariantParams("xorwow192", 32, 6, XORWOW32_SHIFTS, WEYL_INCREMENT_32, "add"),
        VariantParams("xorwow_xor160", 32, 5, XORWOW32_SHIFTS, WEYL_INCREMENT_32, "xor"),
        VariantParams("wrap_a", 64, 1, XORSHIFT64_SHIFTS_A, WEYL_INCREMENT_64, "add"),
        VariantParams("wrap_b", 64, 1, XORSHIFT64_SHIFTS_B, WEYL_INCREMENT_64, "add"),
        VariantParams("xor_a", 64, 1, XORSHIFT64_SHIFTS_A, WEYL_INCREMENT_64, "xor"),
        VariantParams("xor_b", 64, 1, XORSHIFT64_SHIFTS_B, WEYL_INCREMENT_64, "xor"),
        VariantParams("large_wrap", 64, 2, XORSHIFT128_SHIFTS, WEYL_INCREMENT_64, "add"),
        VariantParams("large_xor", 64, 2, XORSHIFT128_SHIFTS, WEYL_INCREMENT_64, "xor"),
    )
}
