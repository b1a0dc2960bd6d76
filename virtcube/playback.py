import asyncio, enum, logging, typing
from . import log, engine
from .state import CubeState
from .notation import Move
from .errors import PlaybackError

class TimerHandle(typing.Protocol):
    def cancel(self) -> None: ...

class Scheduler(typing.Protocol):
    #Anything able to run a callback after a delay, e.g. an asyncio event loop
    def call_later(self, delay: float, callback: typing.Callable[..., None], *args) -> TimerHandle: ...

class PlaybackStatus(enum.Enum):
    IDLE = enum.auto()
    PLAYING = enum.auto()
    PAUSED = enum.auto()
    COMPLETED = enum.auto()
    CANCELLED = enum.auto()

    @property
    def is_active(self) -> bool: return self in (PlaybackStatus.PLAYING, PlaybackStatus.PAUSED)

class PlaybackSession:
    moves: typing.Tuple[Move, ...]
    index: int
    status: PlaybackStatus
    history: typing.List[CubeState]

    def __init__(self, moves: typing.Iterable[Move]):
        self.moves = tuple(moves)
        self.index = -1
        self.status = PlaybackStatus.PLAYING
        self.history = []

    @property
    def current_move(self) -> typing.Optional[Move]: return self.moves[self.index] if self.index >= 0 else None
    @property
    def next_move(self) -> typing.Optional[Move]: return self.moves[self.index+1] if self.index+1 < len(self.moves) else None
    @property
    def remaining(self) -> int: return len(self.moves) - (self.index+1)

    def __len__(self): return len(self.moves)

class PlaybackController:
    #Only writer of the cube's state while a session is playing or paused

    MOVE_DURATION = 0.8

    cube: "VirtualCube"
    session: typing.Optional[PlaybackSession]
    move_duration: float

    _scheduler: typing.Optional[Scheduler]
    _timer: typing.Optional[TimerHandle]

    def __init__(self, cube: "VirtualCube", scheduler: typing.Optional[Scheduler] = None, move_duration: float = MOVE_DURATION):
        self.cube = cube
        self.session = None
        self.move_duration = move_duration

        self._scheduler = scheduler
        self._timer = None

    @property
    def status(self) -> PlaybackStatus: return self.session.status if self.session else PlaybackStatus.IDLE
    @property
    def index(self) -> int: return self.session.index if self.session else -1
    @property
    def is_active(self) -> bool: return self.status.is_active

    def start(self, moves: typing.Iterable[Move]) -> PlaybackSession:
        #Without a scheduler nothing could ever advance, fail before touching the session
        moves = tuple(moves)
        sched = self._get_scheduler() if moves else None

        if self.is_active:
            log.LOGGER.log(logging.INFO, "Cancelling active playback session for a new one")
            self.cancel()

        self.session = PlaybackSession(moves)
        log.LOGGER.log(logging.INFO, f"Started playback of {len(self.session)} moves")

        if len(self.session) == 0:
            self._set_status(PlaybackStatus.COMPLETED)
        else:
            self._set_status(PlaybackStatus.PLAYING)
            self._schedule(sched)
        return self.session

    def step(self) -> Move:
        self._require(PlaybackStatus.PLAYING, PlaybackStatus.PAUSED)
        self._cancel_timer()

        #Apply the move fully before anyone gets to see the new state
        sess = self.session
        move = sess.moves[sess.index+1]
        prev_state = self.cube.state
        new_state = engine.apply_move(prev_state, move)

        sess.history.append(prev_state)
        sess.index += 1
        self.cube._commit(new_state, move)
        self.cube._notify_move(sess.index, move, new_state)

        #A handler may have cancelled or replaced the session
        if sess is not self.session or not sess.status.is_active: return move

        if sess.index == len(sess) - 1:
            log.LOGGER.log(logging.INFO, f"Playback completed after {len(sess)} moves")
            self._set_status(PlaybackStatus.COMPLETED)
        elif sess.status == PlaybackStatus.PLAYING: self._schedule()

        return move

    def previous(self) -> Move:
        self._require(PlaybackStatus.PLAYING, PlaybackStatus.PAUSED)
        sess = self.session
        if sess.index < 0: raise PlaybackError("No move to step back from")

        self._cancel_timer()
        if sess.status == PlaybackStatus.PLAYING: self._set_status(PlaybackStatus.PAUSED)

        #Restore the snapshot instead of recomputing from the start
        move = sess.moves[sess.index]
        state = sess.history.pop()
        sess.index -= 1
        self.cube._revert(state)
        self.cube._notify_move(sess.index, move.inverse, state)

        return move

    def pause(self):
        self._require(PlaybackStatus.PLAYING)
        self._cancel_timer()
        self._set_status(PlaybackStatus.PAUSED)

    def resume(self):
        self._require(PlaybackStatus.PAUSED)
        self._set_status(PlaybackStatus.PLAYING)
        self._schedule()

    def cancel(self):
        if not self.is_active: return

        #Already applied moves stay applied
        self._cancel_timer()
        log.LOGGER.log(logging.INFO, f"Playback cancelled at move {self.session.index+1}/{len(self.session)}")
        self._set_status(PlaybackStatus.CANCELLED)

    def reset(self):
        self.cancel()
        if not self.session: return

        self.session = None
        self.cube._notify_status(PlaybackStatus.IDLE)

    def _require(self, *statuses: PlaybackStatus):
        if self.status not in statuses:
            raise PlaybackError(f"Invalid in playback status {self.status.name}, expected {' or '.join(s.name for s in statuses)}")

    def _set_status(self, status: PlaybackStatus):
        self.session.status = status
        log.LOGGER.log(logging.DEBUG, f"playback status -> {status.name}")
        self.cube._notify_status(status)

    def _get_scheduler(self) -> Scheduler: return self._scheduler or asyncio.get_running_loop()

    def _schedule(self, sched: typing.Optional[Scheduler] = None):
        if sched is None: sched = self._get_scheduler()
        self._timer = sched.call_later(self.move_duration, self._on_timer)

    def _cancel_timer(self):
        if self._timer:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self):
        self._timer = None
        if self.status == PlaybackStatus.PLAYING: self.step()
