from .corpus import Corpus, normalize
from .errors import (
    AlreadyTerminalError,
    ClueError,
    CorpusError,
    EmptyCorpusError,
    EvaluationError,
    InconsistentLengthError,
    LengthMismatchError,
    NotInCorpusError,
    SessionError,
    SessionNotFoundError,
    WordlerError,
)
from .feedback import Mark, evaluate, is_solved
from .selector import daily_key, select
from .service import GameService
from .session import GameSession, Status
from .store import LRUPolicy, NoEviction, SessionStore, TTLPolicy
