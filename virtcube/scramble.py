import typing, random, logging
from . import log
from .notation import Move, format_sequence

DEFAULT_LENGTH = 20

def scramble(length: int = DEFAULT_LENGTH, rng: typing.Optional[random.Random] = None) -> typing.List[Move]:
    #Same or opposite face neighbours commute and would only cancel or merge
    if length < 0: raise ValueError(f"Scramble length must not be negative: {length}")
    if rng is None: rng = random.Random()

    moves: typing.List[Move] = []
    for _ in range(length):
        prev = moves[-1].face if moves else None
        candidates = [m for m in Move if prev is None or (m.face != prev and m.face != prev.opposite)]
        moves.append(rng.choice(candidates))

    log.LOGGER.log(logging.DEBUG, f"scramble | {format_sequence(moves)}")
    return moves
