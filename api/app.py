"""
api/app.py — FastAPI 앱 인스턴스 + 퀴즈 세션 수명 관리 + static 파일 서빙
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional, Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from config import QUIZ_DURATION_SECONDS, QUIZ_TITLE, STATIC_DIR, TICK_INTERVAL_SECONDS
from api.routes import router
from jupeb_quiz.data.question_bank import get_questions
from jupeb_quiz.models.question_model import Question
from jupeb_quiz.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


def create_app(
    questions: Optional[Sequence[Question]] = None,
    duration: Optional[int] = None,
    tick_interval: Optional[float] = None,
) -> FastAPI:
    """
    단일 퀴즈 세션을 가진 앱을 생성한다.
    카운트다운은 앱 시작 시 시작되고, 종료 시 반드시 해제된다.
    """
    quiz_session = QuizSession(
        questions if questions is not None else get_questions(),
        duration=QUIZ_DURATION_SECONDS if duration is None else duration,
        tick_interval=TICK_INTERVAL_SECONDS if tick_interval is None else tick_interval,
        start_timer=False,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        quiz_session.start()
        logger.info("퀴즈 타이머 시작")
        try:
            yield
        finally:
            quiz_session.close(timeout=2.0)
            logger.info("퀴즈 세션 해제")

    app = FastAPI(title=QUIZ_TITLE, docs_url=None, redoc_url=None, lifespan=lifespan)
    app.state.quiz_session = quiz_session

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    # static 파일 마운트
    if os.path.isdir(STATIC_DIR):
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # 루트 → index.html
    @app.get("/")
    async def serve_index():
        index_path = os.path.join(STATIC_DIR, "index.html")
        if os.path.exists(index_path):
            return FileResponse(index_path)
        return {"error": "index.html not found"}

    return app
