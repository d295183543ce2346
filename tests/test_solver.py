"""
Tests for the word-list hints.
"""
from itertools import product

import pytest

from wordler import ClueError, Corpus, Mark, evaluate
from wordler.feedback import encode
from wordler.solver import (
    LetterCount,
    extract_clue,
    filter_words,
    merge,
    most_common,
    most_letters,
    parse_answer,
    parse_clues,
)


def test_parse_answer():
    assert parse_answer("c0r1a2") == [
        ("C", Mark.ABSENT), ("R", Mark.PRESENT), ("A", Mark.CORRECT),
    ]


@pytest.mark.parametrize("token", ["", "C3", "CR", "C0R", "1C", "É0"])
def test_parse_answer_rejects_malformed(token):
    with pytest.raises(ClueError):
        parse_answer(token)


def test_absent_letters_excluded_everywhere():
    clue = extract_clue(parse_answer("E1R0A0S1E1"))

    assert clue.letters == {"E": LetterCount(2), "S": LetterCount(1)}
    assert clue.pattern[0] == frozenset("ERA")
    assert clue.pattern[3] == frozenset("SRA")


def test_absent_repeat_pins_count():
    # CRANE answered for guess EERIE: one E, in last place
    clue = extract_clue(parse_answer(encode("EERIE", evaluate("CRANE", "EERIE"))))

    assert clue.letters["E"] == LetterCount(1, exact=True)
    assert clue.pattern[4] == "E"
    assert "I" in clue.pattern[0]


def test_merge_combines_constraints():
    clue = parse_clues("C2R0A0N0E0/C2L0O0U0D0")

    assert clue.pattern[0] == "C"
    assert clue.pattern[1] == frozenset("RANELOUD")


def test_merge_conflict():
    with pytest.raises(ClueError):
        parse_clues("C2R0/A2R0")


def test_merge_length_mismatch():
    with pytest.raises(ClueError):
        merge(extract_clue(parse_answer("C2R0")), extract_clue(parse_answer("C2R0A0")))


def test_merge_keeps_highest_count():
    a = extract_clue(parse_answer("E1E1"))
    b = extract_clue(parse_answer("E1X0"))
    assert merge(a, b).letters["E"] == LetterCount(2)


def test_secret_always_survives_its_clues(corpus):
    guesses = ["SLATE", "CRANE", "EERIE"]
    for secret in corpus:
        tokens = [encode(guess, evaluate(secret, guess)) for guess in guesses]
        candidates = filter_words(parse_clues("/".join(tokens)), corpus)
        assert secret in candidates


def test_filter_narrows(corpus):
    tokens = [encode(g, evaluate("CRATE", g)) for g in ("CRANE", "TRACE")]
    candidates = filter_words(parse_clues("/".join(tokens)), corpus)
    assert candidates == ["CRATE"]


def test_filter_skips_other_lengths():
    clue = parse_clues("C2R2")
    assert filter_words(clue, ["CR", "CRA"]) == ["CR"]


def test_most_letters():
    corpus = Corpus.load(["abbey", "babes", "crane"])
    assert most_letters(corpus, "bbe") == ["ABBEY", "BABES"]
    assert most_letters(corpus, "bbe", 5) == ["ABBEY", "BABES"]
    assert most_letters(corpus, "bbe", 6) == []


def test_most_common():
    corpus = Corpus.load(["aaaab", "aaaac", "defgh"])
    assert most_common(corpus) == ["DEFGH"]
    assert most_common(corpus, 4) == []


def test_every_pair_admits_secret(corpus):
    for secret, guess in product(corpus, repeat=2):
        clue = extract_clue(parse_answer(encode(guess, evaluate(secret, guess))))
        assert secret in filter_words(clue, corpus)
