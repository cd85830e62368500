# engine/hooks.py
from typing import Protocol


class ComputeHooks(Protocol):
    def method_start(self, *, method, people, rides, present): ...
    def ride_scored(self, *, method, index, deltas): ...
    def method_end(self, *, method, groups, wall_ms): ...
    def error(self, *, method, exc: BaseException): ...


class NoopHooks:
    def method_start(self, **_):
        pass

    def ride_scored(self, **_):
        pass

    def method_end(self, **_):
        pass

    def error(self, **_):
        pass
