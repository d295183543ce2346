"""
Tests for the game session state machine.
"""
import pytest

from wordler import (
    AlreadyTerminalError,
    GameSession,
    LengthMismatchError,
    Mark,
    NotInCorpusError,
    SessionError,
    Status,
)


def test_correct_guess_wins_immediately(corpus):
    game = GameSession("s1", "CRANE", max_attempts=6)

    feedback, status = game.submit_guess("CRANE", corpus)

    assert status is Status.WON
    assert all(mark is Mark.CORRECT for mark in feedback)
    assert game.attempts_used == 1
    assert game.is_over


def test_lost_after_max_attempts(corpus):
    game = GameSession("s1", "CRANE", max_attempts=3)

    statuses = [game.submit_guess(word, corpus)[1] for word in ("SLATE", "TRACE", "APPLE")]

    assert statuses == [Status.IN_PROGRESS, Status.IN_PROGRESS, Status.LOST]
    assert game.attempts_used == 3
    assert game.reveal() == "CRANE"


def test_win_on_last_attempt_is_not_a_loss(corpus):
    game = GameSession("s1", "CRANE", max_attempts=2)
    game.submit_guess("CRATE", corpus)
    _, status = game.submit_guess("CRANE", corpus)
    assert status is Status.WON
    assert game.reveal() is None


@pytest.mark.parametrize("finish", [["CRANE"], ["SLATE", "TRACE"]])
def test_terminal_session_rejects_guesses(corpus, finish):
    game = GameSession("s1", "CRANE", max_attempts=2)
    for word in finish:
        game.submit_guess(word, corpus)
    history = game.history

    with pytest.raises(AlreadyTerminalError) as excinfo:
        game.submit_guess("APPLE", corpus)

    assert excinfo.value.status is game.status
    assert game.history == history


def test_unknown_word_never_reaches_evaluator(corpus, monkeypatch):
    def fail(secret, guess):
        raise AssertionError("evaluate should not be called")

    monkeypatch.setattr("wordler.session.evaluate", fail)
    game = GameSession("s1", "CRANE", max_attempts=6)

    with pytest.raises(NotInCorpusError):
        game.submit_guess("ZZZZZ", corpus)

    assert game.history == ()
    assert game.status is Status.IN_PROGRESS


def test_wrong_length_guess(corpus):
    game = GameSession("s1", "CRANE", max_attempts=6)

    with pytest.raises(LengthMismatchError) as excinfo:
        game.submit_guess("CRANES", corpus)

    assert (excinfo.value.expected, excinfo.value.actual) == (5, 6)
    assert game.attempts_used == 0


def test_session_errors_have_distinct_codes():
    codes = {
        AlreadyTerminalError(Status.WON).code,
        NotInCorpusError("ZZZZZ").code,
        LengthMismatchError(5, 6).code,
    }
    assert len(codes) == 3
    assert issubclass(NotInCorpusError, SessionError)


def test_snapshot_hides_secret_while_in_progress(corpus):
    game = GameSession("s1", "CRANE", max_attempts=6)
    game.submit_guess("SLATE", corpus)

    snapshot = game.snapshot()

    assert snapshot["attempts_used"] == 1
    assert snapshot["attempts_max"] == 6
    assert snapshot["status"] == "in_progress"
    assert snapshot["target"] is None
    assert "CRANE" not in repr(snapshot)
    assert snapshot["guesses"] == [
        {"word": "SLATE", "feedback": ["absent", "absent", "correct", "absent", "correct"]},
    ]


def test_max_attempts_must_be_positive():
    with pytest.raises(ValueError):
        GameSession("s1", "CRANE", max_attempts=0)
