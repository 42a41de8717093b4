"""
views/components/timer.py

남은 퀴즈 시간을 렌더링하는 컴포넌트.
카운트다운 스레드가 세션의 남은 시간을 줄이고,
이 fragment 는 1초마다 다시 그려 그 값을 보여준다.
"""

import streamlit as st

from config import TIME_WARNING_SECONDS
from jupeb_quiz.services.quiz_service import format_remaining_time
from jupeb_quiz.services.quiz_session import QuizSession


@st.fragment(run_every=1)
def render(quiz: QuizSession) -> None:
    """
    남은 시간 표시. 시간 종료로 자동 제출되면 앱 전체를 다시 실행해 결과 화면으로 전환.
    """
    if quiz.is_submitted:
        st.rerun()

    remaining = quiz.remaining_seconds
    is_warning = remaining < TIME_WARNING_SECONDS  # 1분 미만이면 빨간색 경고

    color = "#ef4444" if is_warning else "#1a1a2e"
    icon = "⚠️ " if is_warning else "⏱ "

    st.markdown(
        f"<div style='font-size:1.6rem; font-weight:700; color:{color}; "
        f"font-variant-numeric:tabular-nums;'>{icon}{format_remaining_time(remaining)}</div>",
        unsafe_allow_html=True,
    )
