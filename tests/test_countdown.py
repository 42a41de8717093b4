"""
Tests for the countdown thread owned by a quiz session.
"""

import threading
import time

import pytest

from jupeb_quiz.services.countdown import Countdown
from jupeb_quiz.services.quiz_session import QuizSession


def _wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class TestCountdown:

    def test_ticks_until_stopped(self):
        ticks = []
        countdown = Countdown(lambda c: ticks.append(c), interval=0.01)
        countdown.start()

        assert _wait_until(lambda: len(ticks) >= 3)
        countdown.stop()
        countdown.join(1.0)

        assert not countdown.is_alive()
        assert all(t is countdown for t in ticks)

    def test_cannot_start_twice(self):
        countdown = Countdown(lambda c: None, interval=0.01)
        countdown.start()
        try:
            with pytest.raises(RuntimeError):
                countdown.start()
        finally:
            countdown.stop()
            countdown.join(1.0)

    def test_cannot_restart_after_stop(self):
        countdown = Countdown(lambda c: None, interval=0.01)
        countdown.stop()
        with pytest.raises(RuntimeError):
            countdown.start()

    def test_interval_must_be_positive(self):
        with pytest.raises(ValueError):
            Countdown(lambda c: None, interval=0)


class TestSessionTimer:

    def test_timer_auto_submits(self, three_questions):
        submitted = threading.Event()
        quiz = QuizSession(
            three_questions,
            duration=3,
            tick_interval=0.01,
            on_submit=lambda result: submitted.set(),
        )
        try:
            assert submitted.wait(5.0)
            assert quiz.is_submitted
            assert quiz.remaining_seconds == 0
            assert _wait_until(lambda: not quiz.timer_running)
        finally:
            quiz.close(timeout=1.0)

    def test_manual_submit_stops_timer(self, three_questions):
        quiz = QuizSession(three_questions, duration=600, tick_interval=0.01)
        try:
            assert _wait_until(lambda: quiz.remaining_seconds < 600)
            quiz.submit()
            frozen = quiz.remaining_seconds

            time.sleep(0.1)

            assert not quiz.timer_running
            assert quiz.remaining_seconds == frozen
        finally:
            quiz.close(timeout=1.0)

    def test_restart_replaces_timer(self, three_questions):
        quiz = QuizSession(three_questions, duration=600, tick_interval=0.01)
        try:
            assert _wait_until(lambda: quiz.remaining_seconds < 590)
            quiz.submit()

            quiz.restart()

            assert quiz.timer_running
            assert _wait_until(lambda: quiz.remaining_seconds < 600)
            assert not quiz.is_submitted
        finally:
            quiz.close(timeout=1.0)

    def test_stale_tick_from_old_countdown_is_ignored(self, three_questions):
        quiz = QuizSession(three_questions, duration=600, tick_interval=60)
        try:
            stale = quiz._countdown
            quiz.restart()

            quiz._on_countdown_tick(stale)

            assert quiz.remaining_seconds == 600
            assert stale.stopped
        finally:
            quiz.close(timeout=1.0)

    def test_close_releases_timer(self, three_questions):
        quiz = QuizSession(three_questions, duration=600, tick_interval=0.01)
        countdown = quiz._countdown

        quiz.close(timeout=1.0)

        assert not quiz.timer_running
        assert not countdown.is_alive()
