import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from jupeb_quiz.models.question_model import Question
from jupeb_quiz.services.quiz_session import QuizSession


@pytest.fixture
def three_questions():
    """정답 인덱스가 [0, 1, 2] 인 문제 3개."""
    return [
        Question(id=1, question_text="Q1", options=["a", "b", "c"], correct_answer_index=0),
        Question(id=2, question_text="Q2", options=["a", "b", "c"], correct_answer_index=1),
        Question(id=3, question_text="Q3", options=["a", "b", "c"], correct_answer_index=2),
    ]


@pytest.fixture
def quiz(three_questions):
    """타이머 스레드 없이 tick()을 직접 호출하는 세션."""
    session = QuizSession(three_questions, duration=1800, start_timer=False)
    yield session
    session.close()
