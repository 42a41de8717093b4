"""
views/quiz_view.py — 퀴즈 풀기 화면

레이아웃:
  - st.sidebar : 타이머 + 진행 현황
  - 메인 영역  : 전체 문제 목록 + 최종 제출

상태 관리:
  - st.session_state.quiz_session  (QuizSession)
  - radio 위젯 선택 → quiz_session.select_answer() 로 즉시 기록
"""

from __future__ import annotations

import streamlit as st

from jupeb_quiz.services.quiz_session import QuizSession
from jupeb_quiz.views.components import question_card as qcard
from jupeb_quiz.views.components import sidebar as nav
from jupeb_quiz.views.components import timer as tmr


def _submit(quiz: QuizSession) -> None:
    quiz.submit()


def render(quiz: QuizSession) -> None:
    """퀴즈 화면 렌더링."""

    # ── 사이드바 ───────────────────────────────────────────────────────────
    with st.sidebar:
        tmr.render(quiz)
        st.divider()
        nav.render(quiz)

    # ── 문제 목록 ─────────────────────────────────────────────────────────
    for number, question in enumerate(quiz.questions, start=1):
        saved = quiz.recorded_answer(question.id)
        selected = qcard.render(
            question=question,
            question_number=number,
            saved_answer=saved,
        )

        # 선택한 답을 즉시 세션에 기록 (제출 후라면 세션이 무시함)
        if selected is not None and selected != saved:
            quiz.select_answer(question.id, selected)

        st.markdown("<br>", unsafe_allow_html=True)

    # ── 제출 ─────────────────────────────────────────────────────────────
    _, center, _ = st.columns([1, 2, 1])
    with center:
        st.button(
            "Submit Answers",
            key="submit_btn",
            type="primary",
            use_container_width=True,
            on_click=_submit,
            args=(quiz,),
        )
