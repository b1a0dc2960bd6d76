class CubeError(Exception): pass

class ParseError(CubeError):
    token: str

    def __init__(self, token: str):
        super().__init__(f"Invalid move token {token!r}")
        self.token = token

class InvalidStateError(CubeError): pass

class SolverError(CubeError): pass
class Unsolvable(SolverError): pass
class SolverTimeout(SolverError): pass

class PlaybackError(CubeError): pass
