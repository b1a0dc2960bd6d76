import typing, enum, collections
from .errors import InvalidStateError

class Color(enum.Enum):
    WHITE = 'W'
    YELLOW = 'Y'
    RED = 'R'
    GREEN = 'G'
    BLUE = 'B'
    ORANGE = 'O'

class Face(enum.Enum):
    F = enum.auto()
    B = enum.auto()
    L = enum.auto()
    R = enum.auto()
    U = enum.auto()
    D = enum.auto()

    @property
    def label(self) -> str: return {
        Face.F: "front",
        Face.B: "back",
        Face.L: "left",
        Face.R: "right",
        Face.U: "top",
        Face.D: "bottom"
    }[self]

    @property
    def color(self) -> Color: return {
        Face.F: Color.GREEN,
        Face.B: Color.BLUE,
        Face.L: Color.ORANGE,
        Face.R: Color.RED,
        Face.U: Color.WHITE,
        Face.D: Color.YELLOW
    }[self]

    @property
    def opposite(self) -> "Face": return {
        Face.F: Face.B,
        Face.B: Face.F,
        Face.L: Face.R,
        Face.R: Face.L,
        Face.U: Face.D,
        Face.D: Face.U
    }[self]

    @property
    def offset(self) -> int: return FACES.index(self) * FACE_SIZE

    @staticmethod
    def lookup(key: typing.Union["Face", str]) -> "Face":
        if isinstance(key, Face): return key
        if key in Face.__members__: return Face[key]

        label = str(key).lower()
        for f in Face:
            if f.label == label: return f
        if label == "up": return Face.U
        if label == "down": return Face.D

        raise InvalidStateError(f"Unknown face {key!r}")

FACES: typing.List[Face] = list(Face)
FACE_SIZE = 9
CENTER = 4
NUM_FACELETS = len(FACES) * FACE_SIZE

def _to_color(c: typing.Union[Color, str]) -> Color:
    if isinstance(c, Color): return c
    try: return Color(str(c).upper())
    except ValueError: raise InvalidStateError(f"Unknown color {c!r}") from None

class CubeState:
    #Faces stored in FACES order, row-major as seen from outside
    #Side faces have U on top, U has B on top, D has F on top

    facelets: typing.Tuple[Color, ...]

    def __init__(self, facelets: typing.Iterable[typing.Union[Color, str]]):
        facelets = tuple(_to_color(c) for c in facelets)
        if len(facelets) != NUM_FACELETS: raise InvalidStateError(f"Expected {NUM_FACELETS} facelets, got {len(facelets)}")

        #Moves only permute facelets, so every color has to show up exactly once per face's worth
        counts = collections.Counter(facelets)
        for c in Color:
            if counts[c] != FACE_SIZE: raise InvalidStateError(f"Color {c.name} occurs {counts[c]} times instead of {FACE_SIZE}")

        self.facelets = facelets

    @staticmethod
    def solved() -> "CubeState": return CubeState(f.color for f in FACES for _ in range(FACE_SIZE))

    @staticmethod
    def from_faces(faces: typing.Mapping[typing.Union[Face, str], typing.Sequence]) -> "CubeState":
        #Keys are Face members, letters or labels, values 9 colors flat or as 3 rows
        by_face: typing.Dict[Face, typing.List[Color]] = {}
        for key, colors in faces.items():
            face = Face.lookup(key)
            if face in by_face: raise InvalidStateError(f"Face {face.label} given more than once")

            flat = []
            for c in colors:
                if isinstance(c, (list, tuple)) or (isinstance(c, str) and len(c) > 1): flat.extend(c)
                else: flat.append(c)
            if len(flat) != FACE_SIZE: raise InvalidStateError(f"Face {face.label} has {len(flat)} facelets instead of {FACE_SIZE}")

            by_face[face] = [_to_color(c) for c in flat]

        missing = [f.label for f in FACES if f not in by_face]
        if missing: raise InvalidStateError(f"Missing faces: {', '.join(missing)}")

        return CubeState(c for f in FACES for c in by_face[f])

    @staticmethod
    def from_string(s: str) -> "CubeState":
        groups = s.split()
        if len(groups) == 1: groups = [groups[0][i:i+FACE_SIZE] for i in range(0, len(groups[0]), FACE_SIZE)]
        if len(groups) != len(FACES): raise InvalidStateError(f"Expected {len(FACES)} faces, got {len(groups)}")
        return CubeState.from_faces(dict(zip(FACES, groups)))

    def face(self, face: Face) -> typing.Tuple[Color, ...]: return self.facelets[face.offset:face.offset+FACE_SIZE]

    def to_faces(self) -> typing.Dict[str, typing.List[str]]: return { f.label: [c.value for c in self.face(f)] for f in FACES }

    def color_counts(self) -> typing.Counter[Color]: return collections.Counter(self.facelets)

    @property
    def centers(self) -> typing.Tuple[Color, ...]: return tuple(self.facelets[f.offset + CENTER] for f in FACES)

    @property
    def is_solved(self) -> bool: return all(len(set(self.face(f))) == 1 for f in FACES)

    def __getitem__(self, idx: typing.Tuple[Face, int]) -> Color: return self.facelets[idx[0].offset + idx[1]]

    def __iter__(self) -> typing.Iterator[typing.Tuple[Face, int, Color]]:
        for f in FACES:
            for i in range(FACE_SIZE):
                yield f, i, self.facelets[f.offset + i]

    def __eq__(self, other): return isinstance(other, CubeState) and self.facelets == other.facelets
    def __hash__(self): return hash(self.facelets)

    def __str__(self): return " ".join("".join(c.value for c in self.face(f)) for f in FACES)
    def __repr__(self): return f"CubeState({str(self)!r})"
