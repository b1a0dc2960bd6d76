import abc, asyncio, typing, logging
from . import log
from .state import CubeState
from .notation import Move, format_sequence
from .errors import SolverTimeout

class SolverPort(abc.ABC):
    #Raises Unsolvable for impossible states, SolverTimeout when giving up

    @abc.abstractmethod
    def solve(self, state: CubeState) -> typing.List[Move]: ...

async def run_solver(solver: SolverPort, state: CubeState, timeout: typing.Optional[float] = None) -> typing.List[Move]:
    #Solvers are CPU bound and blocking, keep them off the event loop
    loop = asyncio.get_running_loop()
    try:
        moves = await asyncio.wait_for(loop.run_in_executor(None, solver.solve, state), timeout)
    except asyncio.TimeoutError:
        log.LOGGER.log(logging.INFO, f"{type(solver).__name__} timed out after {timeout}s")
        raise SolverTimeout(f"No solution found within {timeout}s") from None

    moves = list(moves)
    log.LOGGER.log(logging.INFO, f"{type(solver).__name__} found {len(moves)} move solution: {format_sequence(moves)}")
    return moves
