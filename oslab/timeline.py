"""Process records and the CPU timeline that schedulers produce."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

# A timeline keeps at most this many characters of a process identifier.
PID_LENGTH = 9


@dataclass
class Process:
    """A job to be scheduled, with the bookkeeping a scheduler fills in."""

    pid: str
    arrival: float
    job_time: float
    remaining: float = 0.0
    response: float = 0.0
    turnaround: float = 0.0
    switch_run: float = 0.0

    def reset(self) -> None:
        """Prepare the process for a fresh scheduling run."""
        self.remaining = self.job_time
        self.switch_run = 0.0


@dataclass
class Slice:
    """A stretch of time during which one process held the CPU."""

    pid: str
    start: float
    end: float


@dataclass
class Timeline:
    """An ordered record of CPU use; adjacent runs of one process merge."""

    slices: list[Slice] = field(default_factory=list)

    def add(self, pid: str, start: float, end: float) -> None:
        """Record that ``pid`` ran from ``start`` to ``end``.

        If the previous slice belongs to the same process, it is extended
        to ``end`` instead of adding a new slice.
        """
        if self.slices and self.slices[-1].pid == pid:
            self.slices[-1].end = end
        else:
            self.slices.append(Slice(pid[:PID_LENGTH], start, end))

    def format(self) -> str:
        """Render every slice as ``pid start end `` with two decimals."""
        return "".join(f"{s.pid} {s.start:.2f} {s.end:.2f} " for s in self.slices)

    def __iter__(self) -> Iterator[Slice]:
        return iter(self.slices)

    def __len__(self) -> int:
        return len(self.slices)