import pytest

from quiz import QuizSession
from schemas import QuizQuestion


def _questions():
    return [
        QuizQuestion(question="Which law protects EU personal data?", options=["GDPR", "CFAA", "DMCA", "CCPA"],
                     correctAnswer=0, explanation="The GDPR applies across the EU."),
        QuizQuestion(question="Which law covers unauthorised computer access in the US?",
                     options=["GDPR", "CFAA", "LGPD", "APPI"], correctAnswer=1,
                     explanation="The Computer Fraud and Abuse Act."),
    ]


def test_correct_answer_scores():
    session = QuizSession(_questions())
    assert session.select(0) is True
    assert session.score == 1
    assert session.answered


def test_second_selection_is_ignored():
    session = QuizSession(_questions())
    session.select(2)
    assert session.select(0) is False
    assert session.selected == 2
    assert session.score == 0


def test_out_of_range_option_raises():
    session = QuizSession(_questions())
    with pytest.raises(ValueError):
        session.select(4)


def test_next_requires_an_answer():
    session = QuizSession(_questions())
    session.next()
    assert session.current == 0


def test_full_run_finishes_with_score():
    session = QuizSession(_questions())
    session.select(0)
    session.next()
    assert session.current == 1
    assert session.selected is None
    assert session.is_last
    session.select(3)
    session.next()
    assert session.finished
    assert session.question is None
    assert session.score == 1
    assert session.answers == [0, 3]


def test_restart_resets_progress():
    session = QuizSession(_questions())
    session.select(0)
    session.next()
    session.restart(_questions()[:1])
    assert (session.current, session.score, session.finished, session.answers) == (0, 0, False, [])
    assert session.is_last
