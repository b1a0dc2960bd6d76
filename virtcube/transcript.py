import math, typing, logging
from . import log
from .notation import Move, format_sequence

EXPLANATIONS: typing.Dict[str, str] = {
    "R": "Rotate right face clockwise",
    "R'": "Rotate right face counter-clockwise",
    "R2": "Rotate right face half a turn",
    "L": "Rotate left face clockwise",
    "L'": "Rotate left face counter-clockwise",
    "L2": "Rotate left face half a turn",
    "U": "Rotate upper face clockwise",
    "U'": "Rotate upper face counter-clockwise",
    "U2": "Rotate upper face half a turn",
    "D": "Rotate down face clockwise",
    "D'": "Rotate down face counter-clockwise",
    "D2": "Rotate down face half a turn",
    "F": "Rotate front face clockwise",
    "F'": "Rotate front face counter-clockwise",
    "F2": "Rotate front face half a turn",
    "B": "Rotate back face clockwise",
    "B'": "Rotate back face counter-clockwise",
    "B2": "Rotate back face half a turn"
}

MOVES_PER_SECOND = 4

def explain(move: Move) -> str: return EXPLANATIONS[str(move)]

def transcript_lines(moves: typing.Iterable[Move]) -> typing.List[str]: return [f"{i+1}. {m} - {explain(m)}" for i, m in enumerate(moves)]

def format_transcript(moves: typing.Iterable[Move]) -> str: return "\n".join(transcript_lines(moves))

def write_transcript(moves: typing.Sequence[Move], path: str):
    with open(path, "w") as f: f.write(format_transcript(moves) + "\n")
    log.LOGGER.log(logging.INFO, f"Wrote {len(moves)} move transcript to {path}")

class SolutionProgress:
    #Steps of a solution the user has marked as done

    moves: typing.Tuple[Move, ...]
    completed: typing.Set[int]

    def __init__(self, moves: typing.Iterable[Move]):
        self.moves = tuple(moves)
        self.completed = set()

    def mark_done(self, index: int):
        if not 0 <= index < len(self.moves): raise IndexError(f"Step {index+1} out of range 1-{len(self.moves)}")
        self.completed.add(index)

    @property
    def num_completed(self) -> int: return len(self.completed)
    @property
    def fraction(self) -> float: return self.num_completed / len(self.moves) if self.moves else 0.0
    @property
    def is_complete(self) -> bool: return len(self.moves) > 0 and self.num_completed == len(self.moves)
    @property
    def estimated_seconds(self) -> int: return math.ceil(len(self.moves) / MOVES_PER_SECOND)

    @property
    def text(self) -> str: return format_sequence(self.moves)

    def __str__(self): return f"{self.num_completed}/{len(self.moves)} completed"
