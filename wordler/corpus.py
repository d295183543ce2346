"""
The word list every game is played against.

A Corpus is built once at startup and only read afterwards, so it can be
shared between request threads without locking.
"""
import logging
import pathlib
import string

from .errors import EmptyCorpusError, InconsistentLengthError

logger = logging.getLogger(__name__)

ALPHABET = frozenset(string.ascii_uppercase)


def normalize(word: str) -> str:
    return word.strip().upper()


class Corpus:
    def __init__(self, words, length: int):
        # words must already be normalized, unique and of the given length
        self._words = tuple(sorted(words))
        self._members = frozenset(self._words)
        self._length = length

    @classmethod
    def load(cls, raw_entries, length=None, alphabet=ALPHABET):
        """
        Build a corpus from raw entries.

        Entries are upper-cased and stripped. Entries using characters outside
        ``alphabet`` are dropped. When ``length`` is given, entries of any other
        length are dropped; otherwise the first valid entry fixes the length and
        a disagreeing entry raises InconsistentLengthError.
        """
        authoritative = length is not None
        words = set()
        bad_chars = 0
        wrong_length = 0

        for raw in raw_entries:
            word = normalize(raw)
            if not word:
                continue
            if not set(word) <= alphabet:
                bad_chars += 1
                continue
            if length is None:
                length = len(word)
            if len(word) != length:
                if not authoritative:
                    raise InconsistentLengthError(
                        f"Entry {word!r} has length {len(word)}, expected {length}")
                wrong_length += 1
                continue
            words.add(word)

        if bad_chars:
            logger.warning("Dropped %d corpus entries with invalid characters", bad_chars)
        if wrong_length:
            logger.warning("Dropped %d corpus entries not of length %d", wrong_length, length)
        if not words:
            raise EmptyCorpusError("Corpus has no valid entries")

        logger.info("Loaded corpus of %d words of length %d", len(words), length)
        return cls(words, length)

    @classmethod
    def load_file(cls, path, length=None, alphabet=ALPHABET):
        path = pathlib.Path(path)
        logger.info("Reading corpus from %s", path)
        return cls.load(path.read_text(encoding="utf-8").splitlines(), length, alphabet)

    @property
    def length(self) -> int:
        return self._length

    @property
    def words(self):
        """All words in lexicographic order. The order is stable for a given word set."""
        return self._words

    def word_at(self, index: int) -> str:
        return self._words[index]

    def contains(self, word: str) -> bool:
        return word in self._members

    def __contains__(self, word):
        return self.contains(word)

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __repr__(self):
        return f"Corpus(size={len(self)}, length={self._length})"
