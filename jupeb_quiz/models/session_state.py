"""
models/session_state.py

퀴즈 진행 상태를 담는 답안 카드 모델.
Pydantic BaseModel 기반 — 직렬화 및 타입 안전성 확보.
상태 전이 규칙은 services/quiz_session.py 가 담당한다.
"""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field


class SessionPhase(str, Enum):
    IN_PROGRESS = "in-progress"
    SUBMITTED = "submitted"


class SessionState(BaseModel):
    """
    한 번의 퀴즈 응시(세션) 상태.

    Attributes:
        phase:             진행 단계. SUBMITTED 로 바뀌면 되돌릴 수 없다.
        answers:           사용자 답안지. {question.id: 선택한 보기 인덱스}
                           키가 없으면 미응답.
        remaining_seconds: 남은 시간 (초). 진행 중에는 감소만, 제출 후에는 고정.
    """

    phase: SessionPhase = Field(
        default=SessionPhase.IN_PROGRESS,
        description="진행 단계 (in-progress | submitted)"
    )
    answers: Dict[int, int] = Field(
        default_factory=dict,
        description="사용자 답안지. key: question.id, value: 선택한 보기 인덱스"
    )
    remaining_seconds: int = Field(
        ...,
        ge=0,
        description="남은 시간 (초)"
    )

    @property
    def is_submitted(self) -> bool:
        return self.phase is SessionPhase.SUBMITTED
