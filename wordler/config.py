import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .store import LRUPolicy, NoEviction, TTLPolicy

SELECTION_MODES = ("daily", "session")
EVICTION_POLICIES = ("ttl", "lru", "none")


def _int(env, name, default):
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _choice(env, name, default, choices):
    value = env.get(name, default).strip().lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got {value!r}")
    return value


@dataclass
class Config:
    corpus_file: str = "data/corpus.txt"
    word_length: Optional[int] = None
    max_attempts: int = 6
    selection: str = "daily"
    selection_salt: str = ""
    eviction: str = "ttl"
    session_ttl: int = 3600
    session_capacity: int = 10000
    secret_key: str = "dev-key"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env=None):
        if env is None:
            load_dotenv()
            env = os.environ

        config = cls(
            corpus_file=env.get("WORDLER_CORPUS_FILE") or env.get("CORPUS_FILE", cls.corpus_file),
            word_length=_int(env, "WORDLER_WORD_LENGTH", None),
            max_attempts=_int(env, "WORDLER_MAX_ATTEMPTS", cls.max_attempts),
            selection=_choice(env, "WORDLER_SELECTION", cls.selection, SELECTION_MODES),
            selection_salt=env.get("WORDLER_SELECTION_SALT", cls.selection_salt),
            eviction=_choice(env, "WORDLER_EVICTION", cls.eviction, EVICTION_POLICIES),
            session_ttl=_int(env, "WORDLER_SESSION_TTL", cls.session_ttl),
            session_capacity=_int(env, "WORDLER_SESSION_CAPACITY", cls.session_capacity),
            secret_key=env.get("SECRET_KEY", cls.secret_key),
            host=env.get("HOST", cls.host),
            port=_int(env, "PORT", cls.port),
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
        )
        if config.max_attempts < 1:
            raise ValueError("WORDLER_MAX_ATTEMPTS must be at least 1")
        return config

    def eviction_policy(self):
        if self.eviction == "ttl":
            return TTLPolicy(self.session_ttl)
        if self.eviction == "lru":
            return LRUPolicy(self.session_capacity)
        return NoEviction()
