"""Time every xorwow variant and emit CSV / Markdown throughput sheets."""

from __future__ import annotations

import argparse
import csv
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_OUT_DIR = PROJECT_ROOT / "xorwow_logs" / "bench"
BENCH_SEED = 987654321

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from xorwow import VARIANTS

logger = logging.getLogger("xorwow.bench")


@dataclass
class BenchSummary:
    name: str
    width: int
    lanes: int
    iterations: int
    seconds: float
    last_word: int

    @property
    def words_per_second(self) -> float:
        if self.seconds <= 0.0:
            return 0.0
        return self.iterations / self.seconds

    @classmethod
    def run(cls, name: str, iterations: int) -> "BenchSummary":
        engine_cls = VARIANTS[name]
        rng = engine_cls.seed_from_u64(BENCH_SEED)
        word = 0
        start = time.perf_counter()
        for _ in range(iterations):
            word = rng.next_u64()
        elapsed = time.perf_counter() - start
        logger.info("%s: %d words in %.3fs", name, iterations, elapsed)
        return cls(
            name=name,
            width=engine_cls.PARAMS.width,
            lanes=engine_cls.PARAMS.lanes,
            iterations=iterations,
            seconds=elapsed,
            last_word=word,
        )

    def as_csv_row(self) -> List[str]:
        return [
            self.name,
            str(self.width),
            str(self.lanes),
            str(self.iterations),
            f"{self.seconds:.6f}",
            f"{self.words_per_second:.0f}",
            str(self.last_word),
        ]


def _write_csv(runs: Iterable[BenchSummary], out_dir: Path) -> Path:
    csv_path = out_dir / "xorwow_bench.csv"
    header = [
        "variant",
        "width",
        "lanes",
        "iterations",
        "seconds",
        "words_per_second",
        "last_word",
    ]
    with csv_path.open("w", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(header)
        for run in runs:
            writer.writerow(run.as_csv_row())
    return csv_path


def _write_md(runs: Iterable[BenchSummary], out_dir: Path) -> Path:
    md_path = out_dir / "xorwow_bench.md"
    runs_list = list(runs)
    table_header = (
        "| Variant | Word | Lanes | Iterations | Seconds | Words/s |\n"
        "| --- | --- | --- | --- | --- | --- |"
    )
    table_rows = [
        "| {name} | u{width} | {lanes} | {iterations} | {seconds:.3f} | {rate:,.0f} |".format(
            name=run.name,
            width=run.width,
            lanes=run.lanes,
            iterations=run.iterations,
            seconds=run.seconds,
            rate=run.words_per_second,
        )
        for run in runs_list
    ]
    content = [
        f"# xorwow next_u64 throughput (seed {BENCH_SEED})",
        "",
        table_header,
        *table_rows,
    ]
    md_path.write_text("\n".join(content) + "\n")
    return md_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark the xorwow variants")
    parser.add_argument(
        "--iterations",
        type=int,
        default=200_000,
        help="next_u64 calls per variant",
    )
    parser.add_argument(
        "--variant",
        action="append",
        choices=sorted(VARIANTS),
        help="Restrict to one variant (repeatable); defaults to all",
    )
    parser.add_argument("--out", type=Path, default=DEFAULT_OUT_DIR, help="Report directory")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    out_dir: Path = args.out
    if not out_dir.is_absolute():
        out_dir = (PROJECT_ROOT / out_dir).resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    names = args.variant or list(VARIANTS)
    runs = [BenchSummary.run(name, args.iterations) for name in names]
    _write_csv(runs, out_dir)
    _write_md(runs, out_dir)


if __name__ == "__main__":
    main()
