"""Deterministic stream runner: seed one engine, skip ahead, read words."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional

from .bits import write_words_le
from .registry import get_generator
from .rng import EntropyProvider, XorwowRng

logger = logging.getLogger(__name__)


@dataclass
class StreamConfig:
    """Configuration for a single generator run.

    Exactly one seeding path is used: ``raw_state`` (hex) wins over
    ``use_entropy``, which wins over ``seed``.
    """

    variant: str = "xorwow160"
    seed: int = 123456789
    raw_state: Optional[str] = None
    use_entropy: bool = False
    skip: int = 0
    count: int = 10
    width: int = 32
    fill_bytes: int = 0


def _seed_engine(cfg: StreamConfig, entropy: Optional[EntropyProvider]) -> XorwowRng:
    cls = get_generator(cfg.variant)
    if cfg.raw_state is not None:
        try:
            raw = bytes.fromhex(cfg.raw_state)
        except ValueError as exc:
            raise ValueError(f"raw_state is not valid hex: {cfg.raw_state!r}") from exc
        return cls.seed_from_raw_state(raw)
    if cfg.use_entropy:
        return cls.from_entropy(entropy)
    return cls.seed_from_u64(cfg.seed)


def run_stream(
    cfg: StreamConfig, entropy: Optional[EntropyProvider] = None
) -> Dict[str, Any]:
    """Drive one engine as described by ``cfg`` and report a JSON-ready dict."""

    if cfg.width not in (32, 64):
        raise ValueError(f"width must be 32 or 64, got {cfg.width}")
    if cfg.skip < 0 or cfg.count < 0 or cfg.fill_bytes < 0:
        raise ValueError("skip, count and fill_bytes must be non-negative")

    rng = _seed_engine(cfg, entropy)
    initial = rng.dump_state()
    draw: Callable[[], int] = rng.next_u64 if cfg.width == 64 else rng.next_u32

    for _ in range(cfg.skip):
        rng.next_u32()

    outputs: List[int] = [draw() for _ in range(cfg.count)]
    payload = rng.random_bytes(cfg.fill_bytes)

    width = rng.PARAMS.width
    logger.debug(
        "%s: skipped %d, read %d x u%d, filled %d bytes",
        cfg.variant,
        cfg.skip,
        cfg.count,
        cfg.width,
        cfg.fill_bytes,
    )
    return {
        "config": asdict(cfg),
        "initial_state": write_words_le(list(initial), width).hex(),
        "outputs": outputs,
        "bytes": payload.hex(),
        "final_state": write_words_le(list(rng.dump_state()), width).hex(),
    }
