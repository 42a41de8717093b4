"""
views/components/sidebar.py

진행 현황(응답한 문제 수)을 보여주는 사이드바 컴포넌트.
"""

from __future__ import annotations

import streamlit as st

from jupeb_quiz.services.quiz_session import QuizSession


def render(quiz: QuizSession) -> None:
    total = len(quiz.questions)
    answered = quiz.answered_count()

    st.markdown(
        f"""
        <div style="display:flex; justify-content:space-between;
                    font-size:0.8rem; color:#6b7280; margin-bottom:4px;">
            <span>Progress</span>
            <span><b>{answered}</b> / {total}</span>
        </div>
        """,
        unsafe_allow_html=True,
    )
    st.progress(answered / total if total > 0 else 0)

    unanswered = total - answered
    if unanswered > 0:
        st.caption(f"⚠️ Unanswered questions: {unanswered}")
