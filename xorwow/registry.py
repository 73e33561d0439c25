"""Name lookup for the generator variants."""

from typing import Dict, Type

from .rng import XorwowRng
from .xorwow32 import Xorwow128, Xorwow160, Xorwow192, XorwowXor160
from .xorwow64 import WrapA, WrapB, XorA, XorB
from .xorwow128 import LargeWrap, LargeXor

VARIANTS: Dict[str, Type[XorwowRng]] = {
    cls.PARAMS.name: cls
    for cls in (
        Xorwow128,
        Xorwow160,
        Xorwow192,
        XorwowXor160,
        WrapA,
        WrapB,
        XorA,
        XorB,
        LargeWrap,
        LargeXor,
    )
}


def get_generator(name: str) -> Type[XorwowRng]:
    try:
        return VARIANTS[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(VARIANTS))
        raise ValueError(f"Unknown xorwow variant '{name}'. Known: {known}") from None
