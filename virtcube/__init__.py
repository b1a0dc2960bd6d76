from .log import LOGGER
from .errors import CubeError, ParseError, InvalidStateError, SolverError, Unsolvable, SolverTimeout, PlaybackError
from .state import Color, Face, CubeState
from .notation import Move, parse, parse_sequence, format_sequence, invert_sequence, simplify
from .engine import apply_move, apply_sequence
from .scramble import scramble
from .solver import SolverPort, run_solver
from .inverse_solver import InverseSolver
from .playback import PlaybackController, PlaybackStatus, PlaybackSession
from .config import Config
from .cube import VirtualCube
from .transcript import explain, format_transcript, write_transcript, SolutionProgress
