import logging
import threading
from dataclasses import dataclass
from enum import Enum

from .errors import AlreadyTerminalError, LengthMismatchError, NotInCorpusError
from .feedback import evaluate, is_solved

logger = logging.getLogger(__name__)


class Status(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Attempt:
    guess: str
    feedback: tuple

    def to_dict(self):
        return {"word": self.guess, "feedback": [mark.value for mark in self.feedback]}


class GameSession:
    """
    One player's game against one secret.

    ``submit_guess`` is the only way to change the history or status. It does
    not lock by itself; callers go through ``SessionStore.with_session``, which
    holds ``lock`` for the duration of the call.
    """

    def __init__(self, session_id: str, secret: str, max_attempts: int, now: float = 0.0):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.session_id = session_id
        self.max_attempts = max_attempts
        self.lock = threading.Lock()
        self.created_at = now
        self.last_active = now
        self._secret = secret
        self._history = []
        self._status = Status.IN_PROGRESS
        logger.debug("Session %s secret is %s", session_id, secret)

    @property
    def status(self) -> Status:
        return self._status

    @property
    def history(self):
        return tuple(self._history)

    @property
    def attempts_used(self) -> int:
        return len(self._history)

    @property
    def is_over(self) -> bool:
        return self._status is not Status.IN_PROGRESS

    def submit_guess(self, guess: str, corpus):
        if self.is_over:
            raise AlreadyTerminalError(self._status)
        if len(guess) != corpus.length:
            raise LengthMismatchError(corpus.length, len(guess))
        if guess not in corpus:
            raise NotInCorpusError(guess)

        feedback = evaluate(self._secret, guess)
        self._history.append(Attempt(guess, feedback))

        if is_solved(feedback):
            self._status = Status.WON
        elif len(self._history) >= self.max_attempts:
            self._status = Status.LOST

        if self.is_over:
            logger.info("Session %s %s after %d attempts",
                        self.session_id, self._status.value, len(self._history))
        return feedback, self._status

    def reveal(self):
        """The secret, once the game has been lost. Never exposed earlier."""
        return self._secret if self._status is Status.LOST else None

    def snapshot(self):
        return {
            "attempts_used": self.attempts_used,
            "attempts_max": self.max_attempts,
            "status": self._status.value,
            "guesses": [attempt.to_dict() for attempt in self._history],
            "target": self.reveal(),
        }
