"""
Registry of live game sessions.

Two levels of locking are used. The store lock guards the id -> session
mapping and is only ever held for dictionary work. Each session carries its
own lock, held while a caller's function runs against it, so games with
different ids never wait on each other.

A session checked out through ``with_session`` is pinned and cannot be evicted
until the caller is done with it.
"""
import logging
import threading
import time
from collections import OrderedDict

from .errors import SessionNotFoundError
from .selector import select
from .session import GameSession

logger = logging.getLogger(__name__)


class NoEviction:
    def victims(self, candidates, total, now):
        return []


class TTLPolicy:
    """Evict sessions idle for longer than ``ttl`` seconds."""

    def __init__(self, ttl: float):
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.ttl = ttl

    def victims(self, candidates, total, now):
        expired = []
        for session_id, session in candidates:
            if now - session.last_active <= self.ttl:
                # candidates are ordered least recently used first
                break
            expired.append(session_id)
        return expired

    def __repr__(self):
        return f"TTLPolicy(ttl={self.ttl})"


class LRUPolicy:
    """Keep at most ``capacity`` sessions, dropping the least recently used."""

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity

    def victims(self, candidates, total, now):
        excess = total - self.capacity
        if excess <= 0:
            return []
        return [session_id for session_id, _ in candidates[:excess]]

    def __repr__(self):
        return f"LRUPolicy(capacity={self.capacity})"


class SessionStore:
    def __init__(self, max_attempts: int = 6, policy=None, salt: str = "", clock=time.monotonic):
        self.max_attempts = max_attempts
        self.policy = policy or NoEviction()
        self.salt = salt
        self._clock = clock
        self._lock = threading.Lock()
        # ordered least recently used first
        self._sessions = OrderedDict()
        self._pins = {}

    def __len__(self):
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id):
        with self._lock:
            return session_id in self._sessions

    def get_or_create(self, session_id: str, key, corpus) -> GameSession:
        """
        Return the session for ``session_id``, creating it if needed.

        The secret is drawn only on creation; later calls with a different key
        get the existing session back unchanged.
        """
        with self._lock:
            return self._get_or_create_locked(session_id, key, corpus)

    def with_session(self, session_id: str, fn, key=None, corpus=None):
        """
        Run ``fn(session)`` while holding the session's lock and return its result.

        If ``key`` and ``corpus`` are given a missing session is created first,
        otherwise a missing session raises SessionNotFoundError.
        """
        with self._lock:
            if key is not None and corpus is not None:
                session = self._get_or_create_locked(session_id, key, corpus)
            else:
                session = self._sessions.get(session_id)
                if session is None:
                    raise SessionNotFoundError(session_id)
                self._touch_locked(session_id, session)
            self._pins[session_id] = self._pins.get(session_id, 0) + 1

        try:
            with session.lock:
                return fn(session)
        finally:
            with self._lock:
                remaining = self._pins[session_id] - 1
                if remaining:
                    self._pins[session_id] = remaining
                else:
                    del self._pins[session_id]

    def discard(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def sweep(self) -> int:
        """Apply the eviction policy now. Returns the number of sessions evicted."""
        with self._lock:
            return self._evict_locked(self._clock())

    def _get_or_create_locked(self, session_id, key, corpus):
        session = self._sessions.get(session_id)
        if session is not None:
            self._touch_locked(session_id, session)
            return session

        now = self._clock()
        session = GameSession(session_id, select(corpus, key, self.salt), self.max_attempts, now)
        self._sessions[session_id] = session
        logger.info("Created session %s", session_id)
        self._evict_locked(now, protect=session_id)
        return session

    def _touch_locked(self, session_id, session):
        session.last_active = self._clock()
        self._sessions.move_to_end(session_id)

    def _evict_locked(self, now, protect=None):
        candidates = [
            (session_id, session)
            for session_id, session in self._sessions.items()
            if session_id != protect and session_id not in self._pins
        ]
        victims = self.policy.victims(candidates, len(self._sessions), now)
        for session_id in victims:
            del self._sessions[session_id]
        if victims:
            logger.info("Evicted %d sessions (%r)", len(victims), self.policy)
        return len(victims)
