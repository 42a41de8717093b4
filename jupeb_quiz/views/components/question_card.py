"""
views/components/question_card.py

단일 문제(Question)를 렌더링하고 사용자의 선택을 반환하는 컴포넌트.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from jupeb_quiz.models.question_model import Question


def radio_key(question_id: int) -> str:
    return f"radio_{question_id}"


def option_label(question: Question, index: int) -> str:
    """보기 앞에 a. b. c. ... 를 붙인다."""
    return f"{chr(97 + index)}. {question.options[index]}"


def render(
    question: Question,
    question_number: int,
    saved_answer: Optional[int] = None,
) -> Optional[int]:
    """
    문제를 렌더링하고 사용자가 선택한 보기 인덱스를 반환한다.

    Args:
        question:        렌더링할 Question 객체
        question_number: 화면 표시용 번호 (1-based)
        saved_answer:    이미 기록된 선택 (없으면 None)

    Returns:
        선택된 보기 인덱스, 아무것도 선택하지 않은 경우 None
    """
    st.markdown(
        f"<p style='font-size:1.05rem; font-weight:600; line-height:1.7;'>"
        f"<span style='color:#6366f1; margin-right:6px;'>{question_number}.</span>"
        f"{question.question_text}</p>",
        unsafe_allow_html=True,
    )

    # index 는 위젯 최초 생성 시에만 쓰이고, 이후에는 key 에 저장된 값이 우선
    return st.radio(
        "보기를 선택하세요",
        options=list(range(len(question.options))),
        index=saved_answer,
        format_func=lambda i: option_label(question, i),
        key=radio_key(question.id),
        label_visibility="collapsed",
    )
