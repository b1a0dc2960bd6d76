import pytest
from virtcube import VirtualCube, Config

class ManualTimer:
    def __init__(self, when, callback, args):
        self.when, self.callback, self.args = when, callback, args
        self.cancelled = False

    def cancel(self): self.cancelled = True

class ManualScheduler:
    #Clock only moves when the test advances it

    def __init__(self):
        self.now = 0.0
        self.timers = []

    def call_later(self, delay, callback, *args):
        timer = ManualTimer(self.now + delay, callback, args)
        self.timers.append(timer)
        return timer

    @property
    def pending(self): return [t for t in self.timers if not t.cancelled]

    def advance(self, dt):
        target = self.now + dt
        while True:
            due = [t for t in self.pending if t.when <= target]
            if not due: break

            timer = min(due, key=lambda t: t.when)
            self.timers.remove(timer)
            self.now = timer.when
            timer.callback(*timer.args)
        self.now = target

@pytest.fixture
def scheduler(): return ManualScheduler()

@pytest.fixture
def cube(scheduler): return VirtualCube(Config(move_duration=0.8, seed=1234), scheduler)
