import logging

from .corpus import normalize
from .selector import daily_key

logger = logging.getLogger(__name__)


class GameService:
    """
    The operations offered to the transport layer.

    Sessions never leave the store: every read or write happens inside
    ``SessionStore.with_session`` and only plain dictionaries come back out.
    """

    def __init__(self, corpus, store):
        self.corpus = corpus
        self.store = store

    def start_or_resume(self, session_id: str, selection_key=None):
        if selection_key is None:
            selection_key = daily_key()
        return self.store.with_session(
            session_id, lambda session: session.snapshot(),
            key=selection_key, corpus=self.corpus)

    def state(self, session_id: str):
        return self.store.with_session(session_id, lambda session: session.snapshot())

    def submit_guess(self, session_id: str, guess: str):
        guess = normalize(guess)

        def apply(session):
            feedback, status = session.submit_guess(guess, self.corpus)
            return {
                "feedback": [mark.value for mark in feedback],
                "status": status.value,
                "attempts_used": session.attempts_used,
                "attempts_max": session.max_attempts,
                "guesses": [attempt.to_dict() for attempt in session.history],
                "target": session.reveal(),
            }

        result = self.store.with_session(session_id, apply)
        logger.debug("Session %s guessed %s: %s", session_id, guess, result["feedback"])
        return result

    def corpus_info(self):
        return {"word_length": self.corpus.length, "corpus_size": len(self.corpus)}
