"""
services/quiz_service.py

퀴즈 채점 및 결과 분석 비즈니스 로직.
순수 Python 함수로 구성 — UI 코드, 전역 상태 변경 없음.
점수는 저장하지 않고 답안지에서 매번 다시 계산한다.
"""

from enum import Enum
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel

from jupeb_quiz.models.question_model import Question

NOT_ANSWERED_TEXT = "Not Answered"

_HIGH_BAND_PERCENT = 80
_MEDIUM_BAND_PERCENT = 50


class AnswerStatus(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"      # 응답했지만 오답
    UNANSWERED = "unanswered"


class AnswerReview(BaseModel):
    """결과 화면의 문제별 채점 내역."""

    question_id: int
    question_text: str
    status: AnswerStatus
    user_answer_index: Optional[int] = None
    user_answer_text: str
    correct_answer_index: int
    correct_answer_text: str


class QuizResult(BaseModel):
    score: int
    total: int
    percentage: int
    band: str
    correct_count: int
    incorrect_count: int
    unanswered_count: int
    reviews: List[AnswerReview]


def calculate_score(
    questions: Sequence[Question],
    user_answers: Dict[int, int],
) -> int:
    """
    정답 수를 반환한다.

    정답 판정 기준: user_answers.get(question.id) == question.correct_answer_index
    응답하지 않은 문제(키 없음)는 점수에 포함되지 않는다.
    """
    return sum(
        1
        for q in questions
        if user_answers.get(q.id) == q.correct_answer_index
    )


def calculate_percentage(score: int, total: int) -> int:
    """
    정답률(%)을 정수로 반환한다. 0.5 는 올림 (예: 49.5% → 50%).

    Args:
        score: calculate_score()가 반환한 정답 수.
        total: 전체 문제 수. 0이면 0 반환.
    """
    if total <= 0:
        return 0
    # score / total * 100 의 반올림을 정수 연산으로 계산 (부동소수점 오차 없음)
    return (score * 200 + total) // (2 * total)


def performance_band(percentage: int) -> str:
    """결과 색상 구분용 등급: high / medium / low."""
    if percentage >= _HIGH_BAND_PERCENT:
        return "high"
    if percentage >= _MEDIUM_BAND_PERCENT:
        return "medium"
    return "low"


def classify_answer(question: Question, user_answers: Dict[int, int]) -> AnswerStatus:
    user_ans = user_answers.get(question.id)
    if user_ans is None:
        return AnswerStatus.UNANSWERED
    if user_ans == question.correct_answer_index:
        return AnswerStatus.CORRECT
    return AnswerStatus.INCORRECT


def classify_answers(
    questions: Sequence[Question],
    user_answers: Dict[int, int],
) -> List[AnswerReview]:
    """
    문제별 채점 내역을 원본 순서대로 반환한다.

    Returns:
        AnswerReview 리스트. 미응답 문제의 user_answer_text 는 "Not Answered".
    """
    reviews: List[AnswerReview] = []

    for q in questions:
        user_ans = user_answers.get(q.id)
        reviews.append(
            AnswerReview(
                question_id=q.id,
                question_text=q.question_text,
                status=classify_answer(q, user_answers),
                user_answer_index=user_ans,
                user_answer_text=(
                    q.option_text(user_ans) if user_ans is not None else NOT_ANSWERED_TEXT
                ),
                correct_answer_index=q.correct_answer_index,
                correct_answer_text=q.option_text(q.correct_answer_index),
            )
        )

    return reviews


def get_incorrect_questions(
    questions: Sequence[Question],
    user_answers: Dict[int, int],
) -> List[Question]:
    """
    맞히지 못한 문제 리스트를 반환한다 (오답 + 미응답). 원본 순서 유지.
    """
    return [
        q for q in questions
        if classify_answer(q, user_answers) is not AnswerStatus.CORRECT
    ]


def build_result(
    questions: Sequence[Question],
    user_answers: Dict[int, int],
) -> QuizResult:
    """채점 결과 전체를 계산한다."""
    reviews = classify_answers(questions, user_answers)
    score = calculate_score(questions, user_answers)
    total = len(questions)
    percentage = calculate_percentage(score, total)

    counts = {status: 0 for status in AnswerStatus}
    for r in reviews:
        counts[r.status] += 1

    return QuizResult(
        score=score,
        total=total,
        percentage=percentage,
        band=performance_band(percentage),
        correct_count=counts[AnswerStatus.CORRECT],
        incorrect_count=counts[AnswerStatus.INCORRECT],
        unanswered_count=counts[AnswerStatus.UNANSWERED],
        reviews=reviews,
    )


def format_remaining_time(remaining_seconds: int) -> str:
    """남은 시간을 MM:SS 형식으로 변환한다."""
    remaining = max(0, int(remaining_seconds))
    minutes, seconds = divmod(remaining, 60)
    return f"{minutes:02d}:{seconds:02d}"
