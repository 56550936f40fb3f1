"""Shared fixtures: a manual clock for timers and participant builders."""

from __future__ import annotations

from typing import Callable

import pytest

from reveal_app.core.models import Answer, GameState, GameType, Participant, Quiz
from reveal_app.core.services.scheduler import Scheduler, TimerHandle


class FakeTimerHandle(TimerHandle):
    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class FakeScheduler(Scheduler):
    """Scheduler driven by explicit ``advance`` calls instead of wall time."""

    def __init__(self) -> None:
        self.now_ms = 0
        self.handles: list[FakeTimerHandle] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        handle = FakeTimerHandle(self.now_ms + delay_ms, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeTimerHandle]:
        return [h for h in self.handles if h.active]

    def advance(self, ms: int) -> None:
        """Move the clock forward, firing due timers in due-time order."""
        target = self.now_ms + ms
        while True:
            due = [h for h in self.pending if h.due_ms <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due_ms)
            self.now_ms = handle.due_ms
            handle.fired = True
            handle.callback()
        self.now_ms = target

    def fire_stale(self, handle: FakeTimerHandle) -> None:
        """Run a callback even though its handle was cancelled (a late timer)."""
        handle.callback()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


def make_answers(pattern: str, time_spent: float = 5.0) -> list[Answer]:
    """Build answers from a pattern like "TTFT" (T = correct)."""
    return [Answer(is_correct=ch == "T", time_spent=time_spent) for ch in pattern]


def make_participant(
    pid: str,
    score: float | None = None,
    answers: list[Answer] | None = None,
    *,
    final_score: float | None = None,
    completed: bool = False,
    with_state: bool = True,
    **state_fields,
) -> Participant:
    state = None
    if with_state:
        state = GameState(score=score, answers=list(answers or []), **state_fields)
    return Participant(
        id=pid,
        name=pid.capitalize(),
        completed=completed,
        final_score=final_score,
        game_state=state,
    )


def make_bingo_player(pid: str, score: float, **state_fields) -> Participant:
    return make_participant(pid, score, game_type=GameType.BINGO, **state_fields)


@pytest.fixture
def quiz() -> Quiz:
    return Quiz(id="quiz-1", title="Safety Basics", question_count=5)
