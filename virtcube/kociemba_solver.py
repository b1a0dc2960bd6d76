import typing
import kociemba
from .state import CubeState, Face
from .notation import Move, parse_sequence
from .solver import SolverPort
from .errors import Unsolvable

#Facelet order of the two-phase solver's cube strings
KOCIEMBA_FACES = [Face.U, Face.R, Face.F, Face.D, Face.L, Face.B]

def to_kociemba_string(state: CubeState) -> str:
    #The solver names stickers by the face whose center shares their color
    center_faces = { state[f, 4]: f for f in KOCIEMBA_FACES }
    return "".join(center_faces[c].name for f in KOCIEMBA_FACES for c in state.face(f))

class KociembaSolver(SolverPort):
    def solve(self, state: CubeState) -> typing.List[Move]:
        if state.is_solved: return []
        if len(set(state.centers)) != len(KOCIEMBA_FACES): raise Unsolvable("Centers do not have 6 distinct colors")

        try: solution = kociemba.solve(to_kociemba_string(state))
        except ValueError as e: raise Unsolvable(str(e)) from e

        return parse_sequence(solution)
