import logging, random, typing
from . import log, engine
from .state import CubeState
from .notation import Move, parse_sequence, format_sequence
from .scramble import scramble
from .solver import SolverPort, run_solver
from .playback import PlaybackController, PlaybackStatus, Scheduler
from .config import Config
from .errors import PlaybackError

MoveHandler = typing.Callable[[int, Move, CubeState], None]
StatusHandler = typing.Callable[[PlaybackStatus], None]
ScrambleHandler = typing.Callable[[typing.List[Move]], None]

class VirtualCube:
    config: Config
    rng: random.Random
    playback: PlaybackController

    origin: CubeState
    history: typing.List[Move]

    _state: CubeState
    _solving: bool
    _move_handlers: typing.List[MoveHandler]
    _status_handlers: typing.List[StatusHandler]
    _scramble_handlers: typing.List[ScrambleHandler]

    def __init__(self, config: typing.Optional[Config] = None, scheduler: typing.Optional[Scheduler] = None, rng: typing.Optional[random.Random] = None):
        self.config = config or Config()
        self.rng = rng or self.config.make_rng()
        self.playback = PlaybackController(self, scheduler, self.config.move_duration)

        self._state = self.origin = CubeState.solved()
        self.history = []
        self._solving = False

        self._move_handlers = []
        self._status_handlers = []
        self._scramble_handlers = []

    @property
    def state(self) -> CubeState: return self._state

    def register_move_handler(self, cb: MoveHandler): self._move_handlers.append(cb)
    def unregister_move_handler(self, cb: MoveHandler): self._move_handlers.remove(cb)
    def register_status_handler(self, cb: StatusHandler): self._status_handlers.append(cb)
    def unregister_status_handler(self, cb: StatusHandler): self._status_handlers.remove(cb)
    def register_scramble_handler(self, cb: ScrambleHandler): self._scramble_handlers.append(cb)
    def unregister_scramble_handler(self, cb: ScrambleHandler): self._scramble_handlers.remove(cb)

    def reset(self):
        self.playback.reset()
        self._set_origin(CubeState.solved())

    def load(self, faces: typing.Union[CubeState, str, typing.Mapping]) -> CubeState:
        #Build the state first, a rejected scan must leave the cube untouched
        if isinstance(faces, CubeState): state = faces
        elif isinstance(faces, str): state = CubeState.from_string(faces)
        else: state = CubeState.from_faces(faces)

        if self._solving: raise PlaybackError("Cannot load a state while a solve is pending")
        self.playback.reset()
        self._set_origin(state)
        log.LOGGER.log(logging.INFO, f"Loaded cube state {state}")
        return state

    def apply(self, moves: typing.Union[str, typing.Iterable[Move]]) -> CubeState:
        self._require_writable("apply moves")
        if isinstance(moves, str): moves = parse_sequence(moves)
        moves = list(moves)

        for i, m in enumerate(moves):
            state = engine.apply_move(self._state, m)
            self._commit(state, m)
            self._notify_move(i, m, state)

        return self._state

    def scramble(self, length: typing.Optional[int] = None) -> typing.List[Move]:
        self._require_writable("scramble")

        moves = scramble(self.config.scramble_length if length is None else length, self.rng)
        log.LOGGER.log(logging.INFO, f"Scramble: {format_sequence(moves)}")
        self._dispatch(self._scramble_handlers, moves)

        self.apply(moves)
        return moves

    async def solve(self, solver: SolverPort, timeout: typing.Optional[float] = None) -> typing.List[Move]:
        if self._solving: raise PlaybackError("A solve is already pending")

        #Solver errors propagate before playback is touched
        state = self._state
        self._solving = True
        try: moves = await run_solver(solver, state, self.config.solver_timeout if timeout is None else timeout)
        finally: self._solving = False

        #Only reset may touch the cube meanwhile, a solution for the old state is useless
        if self._state != state: raise PlaybackError("Cube changed while the solver was running")
        self.playback.start(moves)
        return moves

    def _require_writable(self, action: str):
        if self._solving: raise PlaybackError(f"Cannot {action} while a solve is pending")
        if self.playback.is_active: raise PlaybackError(f"Cannot {action} while a playback session is active")

    def _set_origin(self, state: CubeState):
        self._state = self.origin = state
        self.history = []

    def _commit(self, state: CubeState, move: Move):
        self._state = state
        self.history.append(move)

    def _revert(self, state: CubeState):
        self._state = state
        self.history.pop()

    def _notify_move(self, index: int, move: Move, state: CubeState):
        self._dispatch(self._move_handlers, index, move, state)

    def _notify_status(self, status: PlaybackStatus):
        self._dispatch(self._status_handlers, status)

    def _dispatch(self, handlers: typing.List[typing.Callable], *args):
        #A failing handler must not leave a move half committed or stall playback
        for h in list(handlers):
            try: h(*args)
            except Exception:
                log.LOGGER.log(logging.ERROR, f"Error in event handler {h!r}", exc_info=True)

    def __str__(self): return str(self._state)
