import dataclasses, random, typing
from .scramble import DEFAULT_LENGTH

@dataclasses.dataclass
class Config:
    move_duration: float = 0.8
    scramble_length: int = DEFAULT_LENGTH
    solver_timeout: float = 30.0
    seed: typing.Optional[int] = None

    def __post_init__(self):
        if self.move_duration <= 0: raise ValueError(f"move_duration must be positive: {self.move_duration}")
        if self.scramble_length < 0: raise ValueError(f"scramble_length must not be negative: {self.scramble_length}")
        if self.solver_timeout <= 0: raise ValueError(f"solver_timeout must be positive: {self.solver_timeout}")

    def make_rng(self) -> random.Random: return random.Random(self.seed)
