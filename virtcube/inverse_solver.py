import typing
from . import engine
from .state import CubeState
from .notation import Move, invert_sequence, simplify
from .solver import SolverPort
from .errors import Unsolvable

class InverseSolver(SolverPort):
    #Only solves states reached from the solved state through the cube's recorded history

    cube: "VirtualCube"

    def __init__(self, cube: "VirtualCube"): self.cube = cube

    def solve(self, state: CubeState) -> typing.List[Move]:
        origin, history = self.cube.origin, list(self.cube.history)
        if not origin.is_solved: raise Unsolvable("Cube was loaded in an unknown state, its move history is unavailable")
        if engine.apply_sequence(origin, history) != state: raise Unsolvable("State is not reachable through the recorded move history")

        return simplify(invert_sequence(history))
