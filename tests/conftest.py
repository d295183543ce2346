import sys
from pathlib import Path

import pytest

# Make app.py and the wordler package importable without installing
ROOT = Path(__file__).resolve().parent.parent
if ROOT.as_posix() not in sys.path:
    sys.path.insert(0, ROOT.as_posix())

from wordler import Corpus  # noqa: E402

WORDS = [
    "crane", "crate", "speed", "erase", "abbey", "babes", "eerie",
    "hello", "llama", "world", "apple", "steel", "trace", "slate",
]


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def corpus():
    return Corpus.load(WORDS)


@pytest.fixture
def clock():
    return FakeClock()
