import typing, logging
from . import log
from .state import Face, CubeState, FACES, FACE_SIZE, CENTER, NUM_FACELETS
from .notation import Move

Sticker = typing.Tuple[Face, int]
Cycle = typing.Tuple[Sticker, Sticker, Sticker, Sticker]

#Clockwise quarter turn of a face's own stickers, as seen from outside
FACE_CYCLES: typing.List[typing.Tuple[int, int, int, int]] = [(0, 2, 8, 6), (1, 5, 7, 3)]

#Stickers of the neighbouring faces bordering each face, one cycle per row/column position
#each cycle (a, b, c, d) moves the sticker at a to b, b to c, c to d and d to a
ADJACENT_CYCLES: typing.Dict[Face, typing.List[Cycle]] = {
    Face.U: [
        ((Face.F, 0), (Face.L, 0), (Face.B, 0), (Face.R, 0)),
        ((Face.F, 1), (Face.L, 1), (Face.B, 1), (Face.R, 1)),
        ((Face.F, 2), (Face.L, 2), (Face.B, 2), (Face.R, 2))
    ],
    Face.D: [
        ((Face.F, 6), (Face.R, 6), (Face.B, 6), (Face.L, 6)),
        ((Face.F, 7), (Face.R, 7), (Face.B, 7), (Face.L, 7)),
        ((Face.F, 8), (Face.R, 8), (Face.B, 8), (Face.L, 8))
    ],
    Face.L: [
        ((Face.U, 0), (Face.F, 0), (Face.D, 0), (Face.B, 8)),
        ((Face.U, 3), (Face.F, 3), (Face.D, 3), (Face.B, 5)),
        ((Face.U, 6), (Face.F, 6), (Face.D, 6), (Face.B, 2))
    ],
    Face.R: [
        ((Face.F, 2), (Face.U, 2), (Face.B, 6), (Face.D, 2)),
        ((Face.F, 5), (Face.U, 5), (Face.B, 3), (Face.D, 5)),
        ((Face.F, 8), (Face.U, 8), (Face.B, 0), (Face.D, 8))
    ],
    Face.F: [
        ((Face.U, 6), (Face.R, 0), (Face.D, 2), (Face.L, 8)),
        ((Face.U, 7), (Face.R, 3), (Face.D, 1), (Face.L, 5)),
        ((Face.U, 8), (Face.R, 6), (Face.D, 0), (Face.L, 2))
    ],
    Face.B: [
        ((Face.U, 2), (Face.L, 0), (Face.D, 6), (Face.R, 8)),
        ((Face.U, 1), (Face.L, 3), (Face.D, 7), (Face.R, 5)),
        ((Face.U, 0), (Face.L, 6), (Face.D, 8), (Face.R, 2))
    ]
}

def face_cycles(face: Face) -> typing.List[Cycle]:
    return [tuple((face, i) for i in cyc) for cyc in FACE_CYCLES] + ADJACENT_CYCLES[face]

def _quarter_turn(face: Face) -> typing.List[int]:
    #perm[dst] = src, i.e. the new state's facelet dst is the old state's facelet src
    perm = list(range(NUM_FACELETS))
    for cyc in face_cycles(face):
        idxs = [f.offset + i for f, i in cyc]
        for src, dst in zip(idxs, idxs[1:] + idxs[:1]): perm[dst] = src
    return perm

def _build_table() -> typing.Dict[Move, typing.Tuple[int, ...]]:
    table = {}
    for face in FACES:
        quarter = _quarter_turn(face)
        perm = list(range(NUM_FACELETS))
        for turns in range(1, 4):
            perm = [perm[quarter[i]] for i in range(NUM_FACELETS)]
            table[Move.of(face, turns)] = tuple(perm)

    #Sanity check the tables: bijections which never relocate a center
    for move, perm in table.items():
        assert sorted(perm) == list(range(NUM_FACELETS)), f"{move} is not a permutation"
        assert all(perm[f.offset + CENTER] == f.offset + CENTER for f in FACES), f"{move} moves a center"

    return table

MOVE_TABLE: typing.Dict[Move, typing.Tuple[int, ...]] = _build_table()

def apply_move(state: CubeState, move: Move) -> CubeState:
    perm = MOVE_TABLE[move]
    new_state = CubeState(state.facelets[src] for src in perm)
    log.LOGGER.log(logging.DEBUG, f"apply {move!s:2s} -> {new_state}")
    return new_state

def apply_sequence(state: CubeState, moves: typing.Iterable[Move]) -> CubeState:
    for m in moves: state = apply_move(state, m)
    return state
