"""
Tests for the Question model and the question bank loader.
"""

import json

import pytest
from pydantic import ValidationError

from jupeb_quiz.data.question_bank import (
    QUIZ_QUESTIONS, QuestionBankError, get_questions, load_questions,
)
from jupeb_quiz.models.question_model import Question


class TestQuestionModel:

    def test_options_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            Question(id=1, question_text="Q", options=[], correct_answer_index=0)

    def test_question_text_required(self):
        with pytest.raises(ValidationError):
            Question(id=1, question_text="", options=["a"], correct_answer_index=0)

    def test_question_is_frozen(self):
        q = Question(id=1, question_text="Q", options=["a", "b"], correct_answer_index=1)
        with pytest.raises(ValidationError):
            q.correct_answer_index = 0

    def test_accepts_camel_case_fields(self):
        q = Question.model_validate(
            {"id": 7, "questionText": "Q", "options": ["x", "y"], "correctAnswerIndex": 1}
        )
        assert q.question_text == "Q"
        assert q.correct_answer_index == 1

    def test_has_option_bounds(self):
        q = Question(id=1, question_text="Q", options=["a", "b"], correct_answer_index=0)
        assert q.has_option(0)
        assert q.has_option(1)
        assert not q.has_option(2)
        assert not q.has_option(-1)

    def test_option_text_out_of_range_is_empty(self):
        q = Question(id=1, question_text="Q", options=["a"], correct_answer_index=5)
        assert q.option_text(0) == "a"
        assert q.option_text(5) == ""


class TestQuestionBank:

    def test_builtin_bank_is_consistent(self):
        ids = [q.id for q in QUIZ_QUESTIONS]
        assert len(ids) == len(set(ids))
        for q in QUIZ_QUESTIONS:
            assert q.has_option(q.correct_answer_index)

    def test_get_questions_without_file_returns_builtin(self):
        assert get_questions("") == QUIZ_QUESTIONS

    def test_load_questions_from_json(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text(json.dumps([
            {"id": 1, "questionText": "2 + 2 = ?", "options": ["3", "4"], "correctAnswerIndex": 1},
            {"id": 2, "question_text": "Capital of Nigeria?", "options": ["Lagos", "Abuja"],
             "correct_answer_index": 1},
        ]), encoding="utf-8")

        questions = load_questions(str(path))

        assert [q.id for q in questions] == [1, 2]
        assert questions[1].options[questions[1].correct_answer_index] == "Abuja"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(QuestionBankError):
            load_questions(str(tmp_path / "nope.json"))

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(QuestionBankError):
            load_questions(str(path))

    def test_invalid_question_raises(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text(json.dumps([{"id": 1, "question_text": "Q", "options": []}]), encoding="utf-8")
        with pytest.raises(QuestionBankError):
            load_questions(str(path))

    def test_empty_bank_raises(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(QuestionBankError):
            load_questions(str(path))

    def test_duplicate_ids_raise(self, tmp_path):
        path = tmp_path / "bank.json"
        item = {"id": 1, "question_text": "Q", "options": ["a"], "correct_answer_index": 0}
        path.write_text(json.dumps([item, item]), encoding="utf-8")
        with pytest.raises(QuestionBankError):
            load_questions(str(path))
