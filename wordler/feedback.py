from collections import Counter
from enum import Enum

from .errors import EvaluationError


class Mark(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def digit(self) -> str:
        return _DIGITS[self]


_DIGITS = {Mark.ABSENT: "0", Mark.PRESENT: "1", Mark.CORRECT: "2"}


def evaluate(secret: str, guess: str):
    """
    Compare a guess against the secret, one mark per guess position.

    Exact matches are taken first so that a repeated letter is never reported
    more times than it occurs in the secret.
    """
    if len(secret) != len(guess):
        raise EvaluationError(
            f"Cannot compare a {len(guess)}-letter guess to a {len(secret)}-letter secret")

    res = [Mark.ABSENT] * len(guess)
    counts = Counter(secret)

    for i, ch in enumerate(guess):
        if ch == secret[i]:
            res[i] = Mark.CORRECT
            counts[ch] -= 1

    for i, ch in enumerate(guess):
        if res[i] is Mark.CORRECT:
            continue
        if counts[ch] > 0:
            res[i] = Mark.PRESENT
            counts[ch] -= 1

    return tuple(res)


def is_solved(feedback) -> bool:
    return all(mark is Mark.CORRECT for mark in feedback)


def encode(guess: str, feedback) -> str:
    """Render a guess and its feedback as a hint token, e.g. ``S0P1E2E0D0``."""
    return "".join(ch + mark.digit for ch, mark in zip(guess, feedback))
