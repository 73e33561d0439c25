"""Command line harness for the xorwow generators."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "xorwow_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from xorwow import VARIANTS, StreamConfig, run_stream


def _parse_seed(value: str) -> int:
    """Accept decimal or 0x-prefixed hex seeds that fit in 64 unsigned bits."""

    try:
        seed = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Seed must be an integer, received '{value}'.") from exc
    if not 0 <= seed < 1 << 64:
        raise argparse.ArgumentTypeError("Seed must fit in 64 unsigned bits.")
    return seed


def _parse_hex(value: str) -> str:
    normalized = value.strip().lower()
    if normalized.startswith("0x"):
        normalized = normalized[2:]
    try:
        bytes.fromhex(normalized)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Raw state must be hex, received '{value}'.") from exc
    return normalized


def _parse_bool(value: str) -> bool:
    """Accept a variety of truthy / falsy CLI inputs."""

    if isinstance(value, bool):  # argparse may pass in already parsed bools
        return value

    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise argparse.ArgumentTypeError(
        "Expected a boolean value (true/false). Received: %s" % value
    )


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("Expected a non-negative integer.")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw a deterministic xorwow output stream")
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default="xorwow160",
        help="Generator variant to run",
    )
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=123456789,
        help="64-bit seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--raw_state",
        type=_parse_hex,
        default=None,
        help="Exact raw state as little-endian hex (lanes then counter); overrides --seed",
    )
    parser.add_argument(
        "--entropy",
        type=_parse_bool,
        default=False,
        help="Seed from the operating system entropy source instead of --seed",
    )
    parser.add_argument("--skip", type=_non_negative, default=0, help="Transitions to discard first")
    parser.add_argument("--count", type=_non_negative, default=10, help="Number of output words")
    parser.add_argument(
        "--width",
        type=int,
        choices=(32, 64),
        default=32,
        help="Output word width (next_u32 or next_u64)",
    )
    parser.add_argument(
        "--bytes",
        dest="fill_bytes",
        type=_non_negative,
        default=0,
        help="Additionally fill a byte buffer of this length after the words",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity on stderr",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "xorwow_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level))

    cfg = StreamConfig(
        variant=args.variant,
        seed=args.seed,
        raw_state=args.raw_state,
        use_entropy=args.entropy,
        skip=args.skip,
        count=args.count,
        width=args.width,
        fill_bytes=args.fill_bytes,
    )
    try:
        result = run_stream(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
