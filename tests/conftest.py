"""Ensure the xorwow package is importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class CountingEntropy:
    """Deterministic stand-in for the OS entropy source."""

    def __init__(self, start: int = 1):
        self.start = start
        self.requests = []

    def __call__(self, n: int) -> bytes:
        self.requests.append(n)
        return bytes((self.start + i) & 0xFF for i in range(n))


@pytest.fixture
def counting_entropy():
    return CountingEntropy()
