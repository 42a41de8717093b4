"""
api/routes.py — FastAPI 엔드포인트
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from config import QUIZ_TITLE
from jupeb_quiz.models.question_model import Question
from jupeb_quiz.services.quiz_session import (
    InvalidOptionError, QuizSession, UnknownQuestionError,
)

router = APIRouter()

# ── Pydantic request bodies ──────────────────────────────────────────────────

class SelectAnswerBody(BaseModel):
    question_id: int
    option_index: int


# ── 헬퍼 ─────────────────────────────────────────────────────────────────────

def get_quiz_session(request: Request) -> QuizSession:
    return request.app.state.quiz_session


def _question_to_dict(q: Question, reveal_answer: bool) -> dict:
    d = {
        "id": q.id,
        "question_text": q.question_text,
        "options": q.options,
    }
    # 제출 전에는 정답을 내려보내지 않음
    if reveal_answer:
        d["correct_answer_index"] = q.correct_answer_index
    return d


def _state_to_dict(quiz: QuizSession) -> dict:
    state = quiz.state
    return {
        "phase": state.phase.value,
        "answers": {str(k): v for k, v in state.answers.items()},
        "remaining_seconds": state.remaining_seconds,
        "remaining_label": quiz.remaining_time_label(),
        "answered_count": len(state.answers),
        "total": len(quiz.questions),
    }


# ── 엔드포인트 ───────────────────────────────────────────────────────────────

@router.get("/api/quiz")
async def get_quiz(quiz: QuizSession = Depends(get_quiz_session)):
    reveal = quiz.is_submitted
    return {
        "title": QUIZ_TITLE,
        "total": len(quiz.questions),
        "duration": quiz.duration,
        "questions": [_question_to_dict(q, reveal) for q in quiz.questions],
    }


@router.get("/api/state")
async def get_state(quiz: QuizSession = Depends(get_quiz_session)):
    return _state_to_dict(quiz)


@router.post("/api/answer")
async def select_answer(body: SelectAnswerBody, quiz: QuizSession = Depends(get_quiz_session)):
    try:
        recorded = quiz.select_answer(body.question_id, body.option_index)
    except UnknownQuestionError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidOptionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not recorded:
        raise HTTPException(status_code=409, detail="이미 제출된 퀴즈입니다.")
    return {"ok": True, "answered_count": quiz.answered_count()}


@router.post("/api/submit")
async def submit_quiz(quiz: QuizSession = Depends(get_quiz_session)):
    quiz.submit()
    result = quiz.result()
    return {"ok": True, "result": result.model_dump(mode="json")}


@router.get("/api/results")
async def get_results(quiz: QuizSession = Depends(get_quiz_session)):
    result = quiz.result()
    if result is None:
        raise HTTPException(status_code=409, detail="퀴즈가 아직 제출되지 않았습니다.")
    return result.model_dump(mode="json")


@router.post("/api/restart")
async def restart_quiz(quiz: QuizSession = Depends(get_quiz_session)):
    if not quiz.is_submitted:
        raise HTTPException(status_code=409, detail="제출한 뒤에만 다시 시작할 수 있습니다.")
    quiz.restart()
    return {"ok": True, **_state_to_dict(quiz)}
