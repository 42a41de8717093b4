"""
data/question_bank.py

JUPEB 미니 퀴즈 문제은행.
QUIZ_QUESTIONS_FILE 이 지정되어 있으면 해당 JSON 파일을 대신 사용한다.
"""

import json
import logging
from typing import List

from pydantic import TypeAdapter, ValidationError

from config import QUIZ_QUESTIONS_FILE
from jupeb_quiz.models.question_model import Question

logger = logging.getLogger(__name__)

_QUESTION_LIST = TypeAdapter(List[Question])


class QuestionBankError(RuntimeError):
    """문제은행 파일을 읽거나 검증하지 못함."""


QUIZ_QUESTIONS: List[Question] = [
    Question(
        id=1,
        question_text="Which of the following is a vector quantity?",
        options=["Speed", "Distance", "Displacement", "Temperature"],
        correct_answer_index=2,
    ),
    Question(
        id=2,
        question_text="What is the SI unit of electric charge?",
        options=["Ampere", "Coulomb", "Volt", "Ohm"],
        correct_answer_index=1,
    ),
    Question(
        id=3,
        question_text="Which gas is evolved when zinc reacts with dilute hydrochloric acid?",
        options=["Oxygen", "Chlorine", "Carbon dioxide", "Hydrogen"],
        correct_answer_index=3,
    ),
    Question(
        id=4,
        question_text="The number of moles in 22 g of carbon dioxide (C = 12, O = 16) is",
        options=["0.5", "1.0", "2.0", "0.25"],
        correct_answer_index=0,
    ),
    Question(
        id=5,
        question_text="Which organelle is the site of aerobic respiration in a cell?",
        options=["Ribosome", "Mitochondrion", "Golgi apparatus", "Nucleus"],
        correct_answer_index=1,
    ),
    Question(
        id=6,
        question_text="If f(x) = 2x^2 - 3x + 1, find f(2).",
        options=["3", "1", "5", "7"],
        correct_answer_index=0,
    ),
    Question(
        id=7,
        question_text="The derivative of sin x with respect to x is",
        options=["-cos x", "cos x", "-sin x", "tan x"],
        correct_answer_index=1,
    ),
    Question(
        id=8,
        question_text="In economics, opportunity cost is best described as",
        options=[
            "The money cost of a good",
            "The next best alternative forgone",
            "The cost of production",
            "The price of a substitute",
        ],
        correct_answer_index=1,
    ),
    Question(
        id=9,
        question_text="The principle of separation of powers is associated with",
        options=["Karl Marx", "John Locke", "Baron de Montesquieu", "A. V. Dicey"],
        correct_answer_index=2,
    ),
    Question(
        id=10,
        question_text="A figure of speech that gives human qualities to non-human things is",
        options=["Simile", "Metaphor", "Hyperbole", "Personification"],
        correct_answer_index=3,
    ),
]


def load_questions(path: str) -> List[Question]:
    """
    JSON 배열 파일에서 문제 목록을 읽는다.

    각 항목은 id, question_text(questionText), options,
    correct_answer_index(correctAnswerIndex) 필드를 가진다.

    Raises:
        QuestionBankError: 파일이 없거나, JSON 이 아니거나, 검증 실패, 빈 목록, id 중복.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise QuestionBankError(f"문제은행 파일을 읽을 수 없습니다: {path} ({e})") from e

    try:
        questions = _QUESTION_LIST.validate_python(raw)
    except ValidationError as e:
        raise QuestionBankError(f"문제은행 형식 오류: {path}\n{e}") from e

    if not questions:
        raise QuestionBankError(f"문제은행이 비어 있습니다: {path}")

    ids = [q.id for q in questions]
    if len(set(ids)) != len(ids):
        raise QuestionBankError(f"문제 id가 중복되었습니다: {path}")

    logger.info(f"문제은행 로드 완료 - {len(questions)}문제 ({path})")
    return questions


def get_questions(path: str = QUIZ_QUESTIONS_FILE) -> List[Question]:
    """설정된 문제은행을 반환. 파일 경로가 비어 있으면 내장 문제 사용."""
    if path:
        return load_questions(path)
    return list(QUIZ_QUESTIONS)
