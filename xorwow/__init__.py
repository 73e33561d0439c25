"""Xorwow pseudorandom generators: xorshift lanes plus a Weyl counter.

Not suitable for cryptography: the state is recoverable from the output.
"""

from .errors import EntropyError, RngError
from .registry import VARIANTS, get_generator
from .rng import XorwowRng, os_entropy
from .state import XorwowState
from .stream import StreamConfig, run_stream
from .xorwow32 import Xorwow128, Xorwow160, Xorwow192, XorwowXor160
from .xorwow64 import WrapA, WrapB, XorA, XorB
from .xorwow128 import LargeWrap, LargeXor

__all__ = [
    "EntropyError",
    "LargeWrap",
    "LargeXor",
    "RngError",
    "StreamConfig",
    "VARIANTS",
    "WrapA",
    "WrapB",
    "XorA",
    "XorB",
    "Xorwow128",
    "Xorwow160",
    "Xorwow192",
    "XorwowRng",
    "XorwowState",
    "XorwowXor160",
    "get_generator",
    "os_entropy",
    "run_stream",
]
