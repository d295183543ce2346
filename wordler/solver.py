"""
Hints for players: narrow the word list down from the feedback received so far.

Feedback is written as a token of letter/digit pairs, one pair per position:
``0`` absent, ``1`` present elsewhere, ``2`` correct. ``CRANE`` answered with
only the ``A`` in place is ``C0R0A2N0E0``. Several tokens joined with ``/``
describe several guesses against the same secret.
"""
import re
from collections import Counter
from dataclasses import dataclass
from functools import lru_cache

from .errors import ClueError
from .feedback import Mark

_PAIR = re.compile(r"([A-Z])([0-2])")
_TOKEN = re.compile(r"^(?:[A-Z][0-2])+$")
_MARKS = {"0": Mark.ABSENT, "1": Mark.PRESENT, "2": Mark.CORRECT}


@dataclass(frozen=True)
class LetterCount:
    count: int
    exact: bool = False

    def admits(self, n: int) -> bool:
        return n == self.count if self.exact else n >= self.count


@dataclass(frozen=True)
class Clue:
    # each position is either the known letter or a frozenset of excluded letters
    pattern: tuple
    letters: dict

    def __len__(self):
        return len(self.pattern)


def parse_answer(token: str):
    token = token.upper()
    if not _TOKEN.match(token):
        raise ClueError(f"Invalid token: {token}")
    return [(letter, _MARKS[digit]) for letter, digit in _PAIR.findall(token)]


def extract_clue(answer) -> Clue:
    pattern = []
    counts = Counter()
    absent = []

    for letter, mark in answer:
        if mark is Mark.CORRECT:
            pattern.append(letter)
            counts[letter] += 1
        elif mark is Mark.PRESENT:
            pattern.append(frozenset(letter))
            counts[letter] += 1
        else:
            pattern.append(frozenset(letter))
            absent.append(letter)

    # an absent letter that was also seen elsewhere pins its count exactly
    everywhere = frozenset(letter for letter in absent if letter not in counts)
    letters = {
        letter: LetterCount(count, exact=letter in absent)
        for letter, count in counts.items()
    }
    pattern = tuple(p if isinstance(p, str) else p | everywhere for p in pattern)
    return Clue(pattern, letters)


def merge(a: Clue, b: Clue) -> Clue:
    if len(a) != len(b):
        raise ClueError(f"Pattern length mismatch: {len(a)} != {len(b)}")

    pattern = []
    for p, q in zip(a.pattern, b.pattern):
        if isinstance(p, str) and isinstance(q, str):
            if p != q:
                raise ClueError(f"Conflict: {p} != {q}")
            pattern.append(p)
        elif isinstance(p, str):
            pattern.append(p)
        elif isinstance(q, str):
            pattern.append(q)
        else:
            pattern.append(p | q)

    letters = dict(a.letters)
    for letter, clue in b.letters.items():
        seen = letters.get(letter)
        if seen is None:
            letters[letter] = clue
        else:
            letters[letter] = LetterCount(max(seen.count, clue.count), seen.exact or clue.exact)
    return Clue(tuple(pattern), letters)


def parse_clues(path: str) -> Clue:
    tokens = path.split("/")
    clues = [extract_clue(parse_answer(token)) for token in tokens]
    if not clues:
        raise ClueError("Empty pattern")
    result = clues.pop()
    for clue in clues:
        result = merge(result, clue)
    return result


def matches(clue: Clue, word: str) -> bool:
    if len(word) != len(clue):
        return False
    for ch, p in zip(word, clue.pattern):
        if isinstance(p, str):
            if ch != p:
                return False
        elif ch in p:
            return False
    counts = Counter(word)
    return all(rule.admits(counts[letter]) for letter, rule in clue.letters.items())


def filter_words(clue: Clue, words):
    return [word for word in words if matches(clue, word)]


def _best(scored):
    best = max((score for _, score in scored), default=None)
    return [word for word, score in scored if score == best]


def most_letters(corpus, letters: str, length=None):
    """Words covering as many of ``letters`` as possible, repeats counted."""
    if length is not None and length != corpus.length:
        return []
    wanted = Counter(letters.upper())
    scored = [
        (word, sum(min(n, Counter(word)[ch]) for ch, n in wanted.items()))
        for word in corpus
    ]
    return _best(scored)


@lru_cache(maxsize=8)
def letter_frequencies(corpus):
    """How many words of the corpus contain each letter."""
    freq = Counter()
    for word in corpus:
        freq.update(set(word))
    return freq


def most_common(corpus, length=None):
    """Words whose distinct letters are the most common across the corpus."""
    if length is not None and length != corpus.length:
        return []
    freq = letter_frequencies(corpus)
    scored = [(word, sum(freq[ch] for ch in set(word))) for word in corpus]
    return _best(scored)
