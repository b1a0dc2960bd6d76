import pytest
from virtcube import VirtualCube, Config, PlaybackStatus, PlaybackError, CubeState, apply_sequence, parse_sequence

SEQ = parse_sequence("R U F' D2 L")

@pytest.fixture
def events(cube):
    events = []
    cube.register_move_handler(lambda i, m, s: events.append(("move", i, str(m), s)))
    cube.register_status_handler(lambda st: events.append(("status", st)))
    return events

def moves_of(events): return [(e[1], e[2]) for e in events if e[0] == "move"]
def statuses_of(events): return [e[1] for e in events if e[0] == "status"]

def test_starts_idle(cube):
    assert cube.playback.status == PlaybackStatus.IDLE
    assert cube.playback.index == -1

def test_step_twice_then_cancel(cube, events):
    start = cube.state
    cube.playback.start(SEQ)
    cube.playback.step()
    cube.playback.step()
    cube.playback.cancel()

    assert cube.playback.status == PlaybackStatus.CANCELLED
    assert cube.state == apply_sequence(start, SEQ[:2])
    assert moves_of(events) == [(0, "R"), (1, "U")]
    assert statuses_of(events) == [PlaybackStatus.PLAYING, PlaybackStatus.CANCELLED]

def test_cancel_stops_scheduled_steps(cube, scheduler):
    cube.playback.start(SEQ)
    cube.playback.cancel()
    scheduler.advance(10)
    assert cube.state == CubeState.solved()
    assert not scheduler.pending

def test_auto_play_runs_to_completion(cube, scheduler, events):
    cube.playback.start(SEQ)
    assert cube.state == CubeState.solved()

    scheduler.advance(0.8)
    assert cube.playback.index == 0
    scheduler.advance(0.7)
    assert cube.playback.index == 0
    scheduler.advance(0.2)
    assert cube.playback.index == 1

    scheduler.advance(10)
    assert cube.playback.status == PlaybackStatus.COMPLETED
    assert cube.state == apply_sequence(CubeState.solved(), SEQ)
    assert [m for _, m in moves_of(events)] == ["R", "U", "F'", "D2", "L"]
    assert statuses_of(events)[-1] == PlaybackStatus.COMPLETED
    assert not scheduler.pending

def test_notified_state_is_the_applied_state(cube):
    seen = []
    cube.register_move_handler(lambda i, m, s: seen.append(s == cube.state))
    cube.playback.start(SEQ)
    for _ in SEQ: cube.playback.step()
    assert seen == [True] * len(SEQ)

def test_pause_and_resume(cube, scheduler, events):
    cube.playback.start(SEQ)
    scheduler.advance(0.8)
    cube.playback.pause()
    scheduler.advance(10)
    assert cube.playback.index == 0
    assert cube.playback.status == PlaybackStatus.PAUSED

    cube.playback.step()
    assert cube.playback.index == 1
    scheduler.advance(10)
    assert cube.playback.index == 1

    cube.playback.resume()
    scheduler.advance(0.8)
    assert cube.playback.index == 2
    assert statuses_of(events) == [PlaybackStatus.PLAYING, PlaybackStatus.PAUSED, PlaybackStatus.PLAYING]

def test_manual_step_restarts_timer(cube, scheduler):
    cube.playback.start(SEQ)
    scheduler.advance(0.5)
    cube.playback.step()
    scheduler.advance(0.5)
    assert cube.playback.index == 0
    scheduler.advance(0.4)
    assert cube.playback.index == 1

def test_previous_restores_snapshots(cube, events):
    cube.playback.start(SEQ)
    cube.playback.step()
    cube.playback.step()
    after_one = apply_sequence(CubeState.solved(), SEQ[:1])

    undone = cube.playback.previous()
    assert str(undone) == "U"
    assert cube.playback.index == 0
    assert cube.playback.status == PlaybackStatus.PAUSED
    assert cube.state == after_one
    assert cube.history == SEQ[:1]
    assert moves_of(events)[-1] == (0, "U'")

    cube.playback.previous()
    assert cube.state == CubeState.solved()
    assert cube.playback.index == -1
    with pytest.raises(PlaybackError):
        cube.playback.previous()

def test_step_after_previous_replays(cube):
    cube.playback.start(SEQ)
    cube.playback.step()
    cube.playback.previous()
    cube.playback.step()
    cube.playback.step()
    assert cube.state == apply_sequence(CubeState.solved(), SEQ[:2])

def test_completed_is_terminal(cube):
    cube.playback.start(SEQ[:1])
    cube.playback.step()
    assert cube.playback.status == PlaybackStatus.COMPLETED
    for op in (cube.playback.step, cube.playback.pause, cube.playback.resume, cube.playback.previous):
        with pytest.raises(PlaybackError):
            op()

def test_invalid_transitions(cube):
    with pytest.raises(PlaybackError):
        cube.playback.step()
    with pytest.raises(PlaybackError):
        cube.playback.pause()
    cube.playback.start(SEQ)
    with pytest.raises(PlaybackError):
        cube.playback.resume()

def test_empty_sequence_completes_immediately(cube, scheduler, events):
    cube.playback.start([])
    assert cube.playback.status == PlaybackStatus.COMPLETED
    assert statuses_of(events) == [PlaybackStatus.COMPLETED]
    assert not scheduler.pending

def test_start_cancels_active_session(cube, scheduler, events):
    first = cube.playback.start(SEQ)
    cube.playback.step()
    second = cube.playback.start(SEQ[:2])

    assert first.status == PlaybackStatus.CANCELLED
    assert second is cube.playback.session
    assert cube.playback.index == -1
    assert statuses_of(events) == [PlaybackStatus.PLAYING, PlaybackStatus.CANCELLED, PlaybackStatus.PLAYING]

    scheduler.advance(10)
    assert cube.state == apply_sequence(CubeState.solved(), SEQ[:1] + SEQ[:2])

def test_reset_goes_idle_without_rollback(cube, events):
    cube.playback.start(SEQ)
    cube.playback.step()
    cube.playback.reset()

    assert cube.playback.status == PlaybackStatus.IDLE
    assert cube.playback.session is None
    assert cube.state == apply_sequence(CubeState.solved(), SEQ[:1])
    assert statuses_of(events) == [PlaybackStatus.PLAYING, PlaybackStatus.CANCELLED, PlaybackStatus.IDLE]

def test_cancel_without_session_is_noop(cube, events):
    cube.playback.cancel()
    cube.playback.reset()
    assert events == []

def test_handler_cancelling_on_last_move_keeps_cancelled(cube):
    def cb(i, m, s):
        if i == 1: cube.playback.cancel()
    cube.register_move_handler(cb)

    cube.playback.start(SEQ[:2])
    cube.playback.step()
    cube.playback.step()
    assert cube.playback.status == PlaybackStatus.CANCELLED

def test_session_tracks_position(cube):
    sess = cube.playback.start(SEQ)
    assert sess.next_move == SEQ[0] and sess.current_move is None
    cube.playback.step()
    assert sess.current_move == SEQ[0]
    assert sess.remaining == 4
    assert len(sess.history) == 1

def test_failing_handler_does_not_stall_auto_play(cube, scheduler, caplog):
    def explode(i, m, s):
        if i == 0: raise RuntimeError("handler failure")
    cube.register_move_handler(explode)

    start = cube.state
    cube.playback.start(SEQ)
    scheduler.advance(0.8 * len(SEQ) + 0.1)

    assert cube.playback.status == PlaybackStatus.COMPLETED
    assert cube.state == apply_sequence(start, SEQ)
    assert "handler failure" in caplog.text

def test_start_without_scheduler_leaves_playback_idle():
    cube = VirtualCube(Config())
    events = []
    cube.register_status_handler(events.append)

    with pytest.raises(RuntimeError):
        cube.playback.start(SEQ)
    assert cube.playback.status == PlaybackStatus.IDLE
    assert cube.playback.session is None
    assert events == []

    #Nothing needs scheduling for an empty sequence
    cube.playback.start([])
    assert cube.playback.status == PlaybackStatus.COMPLETED
