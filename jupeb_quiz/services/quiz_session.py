"""
services/quiz_session.py

퀴즈 세션 컨트롤러: 답안 수집, 제한 시간 자동 제출, 채점, 재시작.

상태 변경(select_answer / submit / restart / tick)은 모두 세션의 RLock 아래에서
끝까지 실행된다. 카운트다운은 세션이 소유하며, 제출·재시작·close() 시 해제된다.
submit()은 멱등이라 수동 제출과 시간 종료 틱이 겹쳐도 한 번만 제출된다.
"""

import logging
import threading
from typing import Callable, Dict, Iterable, Optional, Tuple

from config import QUIZ_DURATION_SECONDS, TICK_INTERVAL_SECONDS
from jupeb_quiz.models.question_model import Question
from jupeb_quiz.models.session_state import SessionPhase, SessionState
from jupeb_quiz.services.countdown import Countdown
from jupeb_quiz.services.quiz_service import (
    QuizResult, build_result, calculate_score, format_remaining_time,
)

logger = logging.getLogger(__name__)


class QuizError(ValueError):
    """퀴즈 입력 계약 위반 (호출자/연동 버그)."""


class UnknownQuestionError(QuizError):
    def __init__(self, question_id: int) -> None:
        super().__init__(f"존재하지 않는 문제입니다: {question_id}")
        self.question_id = question_id


class InvalidOptionError(QuizError):
    def __init__(self, question_id: int, option_index: int) -> None:
        super().__init__(f"문제 {question_id}에 보기 {option_index}이(가) 없습니다.")
        self.question_id = question_id
        self.option_index = option_index


class QuizSession:
    """
    한 번의 퀴즈 응시를 관리한다.

    Args:
        questions:     문제은행 (읽기 전용, 순서 유지).
        duration:      제한 시간 (초). 재시작 시에도 같은 값으로 초기화.
        tick_interval: 카운트다운 틱 간격 (초).
        start_timer:   True 이면 생성 즉시 카운트다운 시작.
                       False 이면 start() 호출 전까지 tick()을 직접 호출해야 한다.
        on_submit:     제출될 때마다(세션당 한 번) 호출되는 콜백. 채점 결과를 받는다.
    """

    def __init__(
        self,
        questions: Iterable[Question],
        duration: int = QUIZ_DURATION_SECONDS,
        tick_interval: float = TICK_INTERVAL_SECONDS,
        start_timer: bool = True,
        on_submit: Optional[Callable[[QuizResult], None]] = None,
    ) -> None:
        if duration < 0:
            raise ValueError("제한 시간(duration)은 0 이상이어야 합니다.")

        self._questions: Tuple[Question, ...] = tuple(questions)
        self._by_id: Dict[int, Question] = {q.id: q for q in self._questions}
        if len(self._by_id) != len(self._questions):
            raise ValueError("문제 id가 중복되었습니다.")

        self._duration = duration
        self._tick_interval = tick_interval
        self._on_submit = on_submit
        self._lock = threading.RLock()
        self._countdown: Optional[Countdown] = None
        self._timer_enabled = False
        self._state = self._new_state()

        logger.info(f"퀴즈 세션 생성 - 문제 {len(self._questions)}개, 제한 시간 {duration}초")
        if start_timer:
            self.start()

    # ── 읽기 전용 속성 ──────────────────────────────────────────────────────

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def state(self) -> SessionState:
        """현재 상태의 사본. 사본을 수정해도 세션에는 영향 없음."""
        with self._lock:
            return self._state.model_copy(deep=True)

    @property
    def phase(self) -> SessionPhase:
        return self._state.phase

    @property
    def is_submitted(self) -> bool:
        return self._state.is_submitted

    @property
    def remaining_seconds(self) -> int:
        return self._state.remaining_seconds

    @property
    def timer_running(self) -> bool:
        countdown = self._countdown
        return countdown is not None and not countdown.stopped

    def get_question(self, question_id: int) -> Optional[Question]:
        return self._by_id.get(question_id)

    def recorded_answer(self, question_id: int) -> Optional[int]:
        return self._state.answers.get(question_id)

    def answered_count(self) -> int:
        with self._lock:
            return len(self._state.answers)

    def unanswered_count(self) -> int:
        return len(self._questions) - self.answered_count()

    def remaining_time_label(self) -> str:
        return format_remaining_time(self._state.remaining_seconds)

    # ── 상태 변경 ─────────────────────────────────────────────────────────

    def start(self) -> None:
        """카운트다운 시작. 이미 돌고 있거나 제출된 세션이면 아무 일도 하지 않음."""
        with self._lock:
            self._timer_enabled = True
            if self._countdown is None and not self._state.is_submitted:
                self._start_countdown()

    def select_answer(self, question_id: int, option_index: int) -> bool:
        """
        답안 기록 (같은 문제를 다시 선택하면 덮어씀).

        Returns:
            True  : 기록됨
            False : 이미 제출된 세션이라 무시됨

        Raises:
            UnknownQuestionError: 없는 문제 id
            InvalidOptionError:   보기 범위를 벗어난 인덱스
        """
        with self._lock:
            if self._state.is_submitted:
                logger.debug(f"제출 후 답안 선택 무시 - 문제 {question_id}")
                return False

            question = self._by_id.get(question_id)
            if question is None:
                logger.warning(f"답안 선택 거부 - 없는 문제 {question_id}")
                raise UnknownQuestionError(question_id)
            if not question.has_option(option_index):
                logger.warning(f"답안 선택 거부 - 문제 {question_id}, 보기 {option_index}")
                raise InvalidOptionError(question_id, option_index)

            self._state.answers[question_id] = option_index
            return True

    def submit(self) -> bool:
        """
        최종 제출. 멱등이라 이미 제출된 경우 아무 일도 하지 않는다.

        Returns:
            이번 호출로 제출되었으면 True.
        """
        with self._lock:
            submitted = self._submit_locked(reason="수동 제출")
        if submitted:
            self._notify_submitted()
        return submitted

    def tick(self) -> None:
        """
        카운트다운 한 틱: 남은 시간 1초 감소 (0 하한).
        0에 도달했거나 이미 0이면 자동 제출 후 타이머를 멈춘다.
        """
        with self._lock:
            submitted = self._tick_locked()
        if submitted:
            self._notify_submitted()

    def restart(self) -> None:
        """답안 초기화, 남은 시간 복구, 진행 중 상태로 되돌린다."""
        with self._lock:
            self._release_countdown()
            self._state = self._new_state()
            if self._timer_enabled:
                self._start_countdown()
        logger.info("퀴즈 세션 재시작")

    def close(self, timeout: Optional[float] = None) -> None:
        """세션 해제. 카운트다운을 멈추고 스레드 종료를 기다린다."""
        with self._lock:
            self._timer_enabled = False
            countdown = self._release_countdown()
        # 틱 콜백이 락을 기다리는 중일 수 있으므로 락 밖에서 join
        if countdown is not None:
            countdown.join(timeout)

    def __enter__(self) -> "QuizSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ── 채점 (저장하지 않고 매번 계산) ──────────────────────────────────────

    def score(self) -> Optional[int]:
        """정답 수. 제출 전이면 None."""
        with self._lock:
            if not self._state.is_submitted:
                return None
            return calculate_score(self._questions, self._state.answers)

    def result(self) -> Optional[QuizResult]:
        """채점 결과 전체. 제출 전이면 None."""
        with self._lock:
            if not self._state.is_submitted:
                return None
            return build_result(self._questions, dict(self._state.answers))

    # ── 내부 구현 ─────────────────────────────────────────────────────────

    def _new_state(self) -> SessionState:
        return SessionState(remaining_seconds=self._duration)

    def _start_countdown(self) -> None:
        self._countdown = Countdown(self._on_countdown_tick, interval=self._tick_interval)
        self._countdown.start()

    def _release_countdown(self) -> Optional[Countdown]:
        countdown = self._countdown
        self._countdown = None
        if countdown is not None:
            countdown.stop()
        return countdown

    def _on_countdown_tick(self, countdown: Countdown) -> None:
        with self._lock:
            # 재시작/제출로 교체된 이전 타이머의 늦은 틱은 버린다
            if countdown is not self._countdown:
                countdown.stop()
                return
            submitted = self._tick_locked()
        if submitted:
            self._notify_submitted()

    def _tick_locked(self) -> bool:
        if self._state.is_submitted:
            self._release_countdown()
            return False

        if self._state.remaining_seconds > 0:
            self._state.remaining_seconds -= 1
        logger.debug(f"남은 시간 {self.remaining_time_label()}")

        if self._state.remaining_seconds == 0:
            return self._submit_locked(reason="시간 종료 자동 제출")
        return False

    def _submit_locked(self, reason: str) -> bool:
        if self._state.is_submitted:
            return False
        self._state.phase = SessionPhase.SUBMITTED
        self._release_countdown()
        logger.info(
            f"퀴즈 제출 ({reason}) - 응답 {len(self._state.answers)}/{len(self._questions)}, "
            f"남은 시간 {self.remaining_time_label()}"
        )
        return True

    def _notify_submitted(self) -> None:
        if self._on_submit is None:
            return
        result = self.result()
        if result is not None:
            self._on_submit(result)
