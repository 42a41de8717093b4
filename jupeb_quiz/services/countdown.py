"""
services/countdown.py

퀴즈 세션이 소유하는 1초 주기 반복 타이머.
데몬 스레드가 Event.wait(interval) 로 대기하다가 콜백을 호출한다.
콜백 내부의 상태 변경 직렬화는 소유자(QuizSession)의 락이 담당한다.
"""

import logging
import threading
from typing import Callable, Optional

from config import TICK_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class Countdown:
    """
    한 세션 전용 반복 틱.

    start()는 인스턴스당 한 번만 가능하다. 세션을 재시작하면
    기존 인스턴스를 stop() 하고 새 인스턴스를 만든다.
    """

    def __init__(
        self,
        on_tick: Callable[["Countdown"], None],
        interval: float = TICK_INTERVAL_SECONDS,
        name: str = "quiz-countdown",
    ) -> None:
        if interval <= 0:
            raise ValueError("틱 간격(interval)은 0보다 커야 합니다.")
        self._on_tick = on_tick
        self._interval = interval
        self._name = name
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("이미 시작된 카운트다운입니다.")
        if self.stopped:
            raise RuntimeError("정지된 카운트다운은 다시 시작할 수 없습니다.")
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()
        logger.debug(f"카운트다운 시작 (간격 {self._interval}s)")

    def stop(self) -> None:
        """틱 중단 요청. 블로킹하지 않으므로 락을 쥔 상태에서도 호출 가능."""
        self._stop_event.set()

    def join(self, timeout: Optional[float] = None) -> None:
        """스레드 종료 대기. 콜백 스레드 자신에서 호출하면 무시."""
        thread = self._thread
        if thread is None or thread is threading.current_thread():
            return
        thread.join(timeout)

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            try:
                self._on_tick(self)
            except Exception:
                logger.exception("카운트다운 틱 처리 중 오류 발생 - 타이머를 중단합니다.")
                self._stop_event.set()
