"""
views/result_view.py — 퀴즈 결과 화면

표시 내용:
  - 정답률 (대형 숫자, 등급별 색상)
  - 정답 수 요약
  - 문제별 채점 내역 (내 답 / 정답)
  - 다시 풀기 버튼
"""

from __future__ import annotations

import streamlit as st

from jupeb_quiz.services.quiz_service import AnswerReview, AnswerStatus
from jupeb_quiz.services.quiz_session import QuizSession
from jupeb_quiz.views.components.question_card import radio_key

_BAND_COLORS = {
    "high": "#10b981",
    "medium": "#eab308",
    "low": "#f43f5e",
}


def _restart_quiz(quiz: QuizSession) -> None:
    """같은 문제로 퀴즈를 다시 시작."""
    # 이전 라디오 위젯 상태 초기화
    for q in quiz.questions:
        key = radio_key(q.id)
        if key in st.session_state:
            del st.session_state[key]
    quiz.restart()


def render(quiz: QuizSession) -> None:
    """결과 화면 렌더링."""
    result = quiz.result()
    if result is None:
        st.warning("결과 정보가 없습니다.")
        return

    color = _BAND_COLORS[result.band]

    st.markdown(
        "<h2 style='text-align:center;'>Quiz Completed!</h2>",
        unsafe_allow_html=True,
    )
    st.markdown(
        f"<p style='text-align:center; font-size:4.5rem; font-weight:800; "
        f"color:{color}; margin:0;'>{result.percentage}%</p>",
        unsafe_allow_html=True,
    )
    st.markdown(
        f"<p style='text-align:center; font-size:1.2rem;'>"
        f"You answered {result.score} out of {result.total} questions correctly.</p>",
        unsafe_allow_html=True,
    )

    # ── 통계 3분할 ────────────────────────────────────────────────────────
    s1, s2, s3 = st.columns(3)
    s1.metric("Correct", result.correct_count)
    s2.metric("Incorrect", result.incorrect_count)
    s3.metric("Not Answered", result.unanswered_count)

    st.divider()

    # ── 문제별 채점 내역 ─────────────────────────────────────────────────
    for number, review in enumerate(result.reviews, start=1):
        _render_review(number, review)

    _, center, _ = st.columns([1, 2, 1])
    with center:
        st.button(
            "Try Again",
            key="retry_btn",
            type="primary",
            use_container_width=True,
            on_click=_restart_quiz,
            args=(quiz,),
        )


def _render_review(number: int, review: AnswerReview) -> None:
    is_correct = review.status is AnswerStatus.CORRECT
    border = "#10b981" if is_correct else "#f43f5e"
    background = "#ecfdf5" if is_correct else "#fff1f2"
    mark = "✔" if is_correct else "✘"

    correct_line = ""
    if not is_correct:
        correct_line = (
            f"<p style='margin:2px 0;'>Correct answer: "
            f"<b style='color:#059669;'>{review.correct_answer_text}</b></p>"
        )

    st.markdown(
        f"""
        <div style="padding:12px 16px; border-left:4px solid {border};
                    background:{background}; border-radius:8px; margin-bottom:12px;">
            <p style="font-weight:600; margin:0 0 6px 0;">{number}. {review.question_text}</p>
            <p style="margin:2px 0;">{mark} Your answer: <b>{review.user_answer_text}</b></p>
            {correct_line}
        </div>
        """,
        unsafe_allow_html=True,
    )
