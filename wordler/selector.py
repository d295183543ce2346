"""
Deterministic secret selection.

The same key and salt always pick the same word from the same corpus, across
processes and restarts. Keep the salt private, otherwise anyone with the word
list can work out the secret from the key.
"""
import datetime
import hashlib


def canonical_key(key) -> str:
    if isinstance(key, datetime.datetime):
        key = key.date()
    if isinstance(key, datetime.date):
        return key.isoformat()
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise TypeError(f"Unsupported selection key type: {type(key).__name__}")
    return str(key)


def daily_key(day=None) -> str:
    if day is None:
        day = datetime.date.today()
    return "daily:" + canonical_key(day)


def select_index(size: int, key, salt: str = "") -> int:
    digest = hashlib.sha256(f"{salt}\x00{canonical_key(key)}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") % size


def select(corpus, key, salt: str = "") -> str:
    return corpus.word_at(select_index(len(corpus), key, salt))
