"""
app.py — Streamlit 진입점

실행: streamlit run jupeb_quiz/app.py
"""

import os
import sys

# ── 패키지 경로 설정 (반드시 최상단) ──────────────────────────────────────────
_BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _BASE_DIR not in sys.path:
    sys.path.insert(0, _BASE_DIR)

import streamlit as st

from config import QUIZ_TITLE
from jupeb_quiz.data.question_bank import get_questions
from jupeb_quiz.services.quiz_session import QuizSession
from jupeb_quiz.views import quiz_view, result_view

st.set_page_config(page_title=QUIZ_TITLE, page_icon="📝", layout="centered")

if "quiz_session" not in st.session_state:
    st.session_state.quiz_session = QuizSession(get_questions())

quiz: QuizSession = st.session_state.quiz_session

st.markdown(
    f"<h1 style='text-align:center; color:#6366f1;'>{QUIZ_TITLE}</h1>",
    unsafe_allow_html=True,
)

if quiz.is_submitted:
    result_view.render(quiz)
else:
    quiz_view.render(quiz)
