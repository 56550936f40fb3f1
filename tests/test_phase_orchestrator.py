"""
Tests for the reveal phase state machine
"""
import pytest

from reveal_app.core.services.phase_orchestrator import (
    TERMINAL_STATE,
    PhaseOrchestrator,
    PhaseState,
    RevealPhase,
    awards_duration_ms,
    phase_duration_ms,
)


def _record(orchestrator):
    seen = []
    orchestrator.subscribe(lambda state: seen.append(state.phase))
    return seen


def test_not_started_has_no_state(scheduler):
    orchestrator = PhaseOrchestrator(scheduler)
    assert orchestrator.state is None
    assert orchestrator.current_phase is None
    assert not orchestrator.is_on_final_slide()
    assert scheduler.pending == []


def test_full_timeline_with_two_awards(scheduler):
    """podium at 4000, awards at 12000, leaderboard at 18000, stats at 19200"""
    orchestrator = PhaseOrchestrator(scheduler, awards_count=2)
    seen = _record(orchestrator)

    assert orchestrator.start() is True
    assert orchestrator.current_phase is RevealPhase.SPLASH

    scheduler.advance(3999)
    assert orchestrator.current_phase is RevealPhase.SPLASH
    scheduler.advance(1)
    assert orchestrator.current_phase is RevealPhase.PODIUM

    scheduler.advance(8000)
    assert scheduler.now_ms == 12000
    assert orchestrator.current_phase is RevealPhase.AWARDS

    scheduler.advance(5999)
    assert orchestrator.current_phase is RevealPhase.AWARDS
    scheduler.advance(1)
    assert orchestrator.current_phase is RevealPhase.LEADERBOARD
    assert orchestrator.is_on_final_slide()
    assert orchestrator.state.stats_active is False

    scheduler.advance(1200)
    assert scheduler.now_ms == 19200
    assert orchestrator.state == TERMINAL_STATE
    assert orchestrator.current_phase is RevealPhase.STATS

    assert seen == [
        RevealPhase.SPLASH,
        RevealPhase.PODIUM,
        RevealPhase.AWARDS,
        RevealPhase.LEADERBOARD,
        RevealPhase.STATS,
    ]
    assert not orchestrator.has_pending_timer

    scheduler.advance(60000)
    assert len(seen) == 5


def test_at_most_one_pending_timer(scheduler):
    orchestrator = PhaseOrchestrator(scheduler, awards_count=1)
    orchestrator.start()
    for _ in range(6):
        assert len(scheduler.pending) <= 1
        scheduler.advance(2500)
        orchestrator.skip()


def test_zero_awards_phase_lasts_two_seconds(scheduler):
    orchestrator = PhaseOrchestrator(scheduler, awards_count=0)
    orchestrator.start()
    scheduler.advance(12000)
    assert orchestrator.current_phase is RevealPhase.AWARDS
    scheduler.advance(2000)
    assert orchestrator.current_phase is RevealPhase.LEADERBOARD


def test_skip_cancels_stale_podium_timer(scheduler):
    """Skipping podium moves to awards; the old podium timer never advances again"""
    orchestrator = PhaseOrchestrator(scheduler, awards_count=2)
    seen = _record(orchestrator)
    orchestrator.start()
    scheduler.advance(4000)
    podium_timer = scheduler.pending[0]

    assert orchestrator.skip() is True
    assert orchestrator.current_phase is RevealPhase.AWARDS
    assert podium_timer.cancelled

    scheduler.fire_stale(podium_timer)
    assert orchestrator.current_phase is RevealPhase.AWARDS

    # Awards timer was re-armed at skip time (t=4000) for 6000 ms.
    scheduler.advance(5999)
    assert orchestrator.current_phase is RevealPhase.AWARDS
    scheduler.advance(1)
    assert orchestrator.current_phase is RevealPhase.LEADERBOARD
    assert seen == [RevealPhase.SPLASH, RevealPhase.PODIUM, RevealPhase.AWARDS, RevealPhase.LEADERBOARD]


def test_skip_is_noop_before_start_and_on_final_slide(scheduler):
    orchestrator = PhaseOrchestrator(scheduler)
    assert orchestrator.skip() is False

    orchestrator.start()
    orchestrator.skip()
    orchestrator.skip()
    orchestrator.skip()
    assert orchestrator.current_phase is RevealPhase.LEADERBOARD
    assert orchestrator.skip() is False

    # Stats still joins on its own timer.
    scheduler.advance(1200)
    assert orchestrator.state == TERMINAL_STATE
    assert orchestrator.skip() is False


def test_advance_before_start_leaves_run_unstarted(scheduler):
    orchestrator = PhaseOrchestrator(scheduler)
    seen = _record(orchestrator)

    orchestrator._advance()

    assert orchestrator.state is None
    assert seen == []
    assert orchestrator.start() is True


def test_start_only_once(scheduler):
    orchestrator = PhaseOrchestrator(scheduler)
    assert orchestrator.start() is True
    scheduler.advance(4000)
    assert orchestrator.start() is False
    assert orchestrator.current_phase is RevealPhase.PODIUM


def test_disabled_run_is_born_terminal(scheduler):
    orchestrator = PhaseOrchestrator(scheduler, enabled=False)
    seen = _record(orchestrator)

    assert orchestrator.state == TERMINAL_STATE
    assert orchestrator.is_on_final_slide()
    assert orchestrator.start() is False
    assert scheduler.pending == []

    orchestrator.set_enabled(True)
    assert orchestrator.start() is False
    assert orchestrator.state == TERMINAL_STATE
    assert seen == []


def test_disabling_mid_run_jumps_to_final_slide(scheduler):
    orchestrator = PhaseOrchestrator(scheduler, awards_count=3)
    seen = _record(orchestrator)
    orchestrator.start()
    scheduler.advance(4000)

    orchestrator.set_enabled(False)

    assert orchestrator.state == TERMINAL_STATE
    assert not orchestrator.has_pending_timer
    assert seen == [RevealPhase.SPLASH, RevealPhase.PODIUM, RevealPhase.STATS]
    scheduler.advance(60000)
    assert len(seen) == 3


def test_dispose_stops_all_callbacks(scheduler):
    changes = []
    orchestrator = PhaseOrchestrator(scheduler, on_phase_change=changes.append)
    seen = _record(orchestrator)
    orchestrator.start()
    timer = scheduler.pending[0]

    orchestrator.dispose()

    assert timer.cancelled
    scheduler.fire_stale(timer)
    scheduler.advance(60000)
    assert seen == [RevealPhase.SPLASH]
    assert changes == [RevealPhase.SPLASH]
    assert orchestrator.skip() is False
    assert orchestrator.start() is False


def test_on_phase_change_callback(scheduler):
    changes = []
    orchestrator = PhaseOrchestrator(scheduler, on_phase_change=changes.append)
    orchestrator.start()
    orchestrator.skip()
    assert changes == [RevealPhase.SPLASH, RevealPhase.PODIUM]


def test_unsubscribe(scheduler):
    orchestrator = PhaseOrchestrator(scheduler)
    seen = []
    unsubscribe = orchestrator.subscribe(lambda state: seen.append(state.phase))
    orchestrator.start()
    unsubscribe()
    orchestrator.skip()
    assert seen == [RevealPhase.SPLASH]


def test_awards_count_applies_on_next_entry(scheduler):
    orchestrator = PhaseOrchestrator(scheduler, awards_count=0)
    orchestrator.start()
    orchestrator.set_awards_count(4)
    scheduler.advance(12000)
    assert orchestrator.current_phase is RevealPhase.AWARDS
    scheduler.advance(4 * 1500 + 3000)
    assert orchestrator.current_phase is RevealPhase.LEADERBOARD


@pytest.mark.parametrize("bad", [-1, 1.5, True, "3", None])
def test_invalid_awards_count_rejected(scheduler, bad):
    with pytest.raises(ValueError):
        PhaseOrchestrator(scheduler, awards_count=bad)
    orchestrator = PhaseOrchestrator(scheduler)
    with pytest.raises(ValueError):
        orchestrator.set_awards_count(bad)


def test_phase_durations():
    assert phase_duration_ms(RevealPhase.SPLASH) == 4000
    assert phase_duration_ms(RevealPhase.PODIUM) == 8000
    assert phase_duration_ms(RevealPhase.AWARDS, 0) == 2000
    assert phase_duration_ms(RevealPhase.AWARDS, 3) == 7500
    assert phase_duration_ms(RevealPhase.LEADERBOARD) is None
    assert phase_duration_ms(RevealPhase.STATS) is None
    assert awards_duration_ms(2) == 6000
    with pytest.raises(ValueError):
        phase_duration_ms("intermission")


def test_phase_state_activity():
    leaderboard = PhaseState(RevealPhase.LEADERBOARD)
    assert leaderboard.is_active(RevealPhase.LEADERBOARD)
    assert not leaderboard.is_active(RevealPhase.STATS)
    assert leaderboard.is_terminal
    assert TERMINAL_STATE.is_active(RevealPhase.LEADERBOARD)
    assert TERMINAL_STATE.is_active(RevealPhase.STATS)
    assert not PhaseState(RevealPhase.PODIUM).is_terminal
    assert [phase.index for phase in RevealPhase] == [0, 1, 2, 3, 4]
