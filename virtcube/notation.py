import typing, enum, math
from .state import Face
from .errors import ParseError

class Move(enum.Enum):
    U = (Face.U, 1)
    Ur = (Face.U, 3)
    U2 = (Face.U, 2)
    D = (Face.D, 1)
    Dr = (Face.D, 3)
    D2 = (Face.D, 2)
    L = (Face.L, 1)
    Lr = (Face.L, 3)
    L2 = (Face.L, 2)
    R = (Face.R, 1)
    Rr = (Face.R, 3)
    R2 = (Face.R, 2)
    F = (Face.F, 1)
    Fr = (Face.F, 3)
    F2 = (Face.F, 2)
    B = (Face.B, 1)
    Br = (Face.B, 3)
    B2 = (Face.B, 2)

    @staticmethod
    def of(face: Face, turns: int) -> "Move": return Move((face, turns % 4))

    @property
    def face(self) -> Face: return self.value[0]
    @property
    def turns(self) -> int: return self.value[1]
    @property
    def is_ccw(self) -> bool: return self.turns == 3
    @property
    def is_double_rot(self) -> bool: return self.turns == 2

    @property
    def inverse(self) -> "Move": return Move.of(self.face, 4 - self.turns)

    @property
    def angle(self) -> float: return (-1 if self.is_ccw else +1) * (2 if self.is_double_rot else 1) * math.pi / 2

    def __str__(self): return self.name.replace('r', '\'')

TOKENS: typing.Dict[str, Move] = { str(m): m for m in Move }

def parse(token: str) -> Move:
    try: return TOKENS[token]
    except KeyError: raise ParseError(token) from None

def parse_sequence(text: str) -> typing.List[Move]:
    #Every token is parsed before anything is returned, so callers never see half a sequence
    return [parse(tok) for tok in text.split()]

def format_sequence(moves: typing.Iterable[Move]) -> str: return " ".join(str(m) for m in moves)

def invert_sequence(moves: typing.Sequence[Move]) -> typing.List[Move]: return [m.inverse for m in reversed(moves)]

def simplify(moves: typing.Iterable[Move]) -> typing.List[Move]:
    #Merge runs on the same face, dropping runs that cancel out
    out: typing.List[Move] = []
    for m in moves:
        if out and out[-1].face == m.face:
            turns = (out.pop().turns + m.turns) % 4
            if turns: out.append(Move.of(m.face, turns))
        else: out.append(m)
    return out
