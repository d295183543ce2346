"""Exceptions raised by the wordler core."""


class WordlerError(Exception):
    code = "error"


class CorpusError(WordlerError):
    code = "corpus_error"


class EmptyCorpusError(CorpusError):
    code = "corpus_empty"


class InconsistentLengthError(CorpusError):
    code = "corpus_inconsistent_length"


class EvaluationError(WordlerError):
    """Secret and guess lengths differ. Indicates a caller bug."""
    code = "evaluation_length_mismatch"


class SessionError(WordlerError):
    code = "session_error"
    status_code = 400


class AlreadyTerminalError(SessionError):
    code = "already_terminal"

    def __init__(self, status):
        super().__init__(f"Game is over ({status.value}). Press Reset to play again.")
        self.status = status


class NotInCorpusError(SessionError):
    code = "not_in_corpus"

    def __init__(self, word):
        super().__init__("Not in word list.")
        self.word = word


class LengthMismatchError(SessionError):
    code = "length_mismatch"

    def __init__(self, expected, actual):
        super().__init__(f"Guess must be exactly {expected} letters.")
        self.expected = expected
        self.actual = actual


class SessionNotFoundError(SessionError):
    code = "not_found"
    status_code = 404

    def __init__(self, session_id):
        super().__init__("No game in progress. Start a game first.")
        self.session_id = session_id


class ClueError(WordlerError):
    code = "invalid_clue"
