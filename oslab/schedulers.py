"""CPU scheduling policies: FCFS, round robin, SJF, SRTF and MLFQ.

Every scheduler expects processes sorted by arrival time. It works on
copies of them, so the caller's records are left untouched. The result
holds the CPU timeline, the average turnaround and response times, and
the scheduled copies with their bookkeeping filled in.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, replace
from typing import Iterable

from oslab.timeline import Process, Timeline

# Stands in for "no further arrival" when looking ahead.
_FAR_FUTURE = float(2**31 - 1)


@dataclass
class ScheduleResult:
    """The outcome of one scheduling run."""

    timeline: Timeline
    avg_turnaround: float
    avg_response: float
    precision: int = 2
    processes: list[Process] = field(default_factory=list)

    def format(self, precision: int | None = None) -> str:
        """Render the timeline line followed by the two averages."""
        digits = self.precision if precision is None else precision
        return (
            f"{self.timeline.format()}\n"
            f"{self.avg_turnaround:.{digits}f} {self.avg_response:.{digits}f}\n"
        )


class _RemainingHeap:
    """Binary min-heap keyed on remaining time.

    Items pushed are only put in order by an explicit ``build``; this
    keeps the tie-breaking of the scheduling runs stable and predictable.
    """

    def __init__(self) -> None:
        self._items: list[Process] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, process: Process) -> None:
        self._items.append(process)

    def build(self) -> None:
        for index in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(index)

    def pop(self) -> Process:
        items = self._items
        smallest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return smallest

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and items[left].remaining < items[smallest].remaining:
                smallest = left
            if right < size and items[right].remaining < items[smallest].remaining:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest


def _prepare(processes: Iterable[Process]) -> list[Process]:
    copies = [replace(p) for p in processes]
    if not copies:
        raise ValueError("no processes to schedule")
    for process in copies:
        process.reset()
    return copies


def _result(
    timeline: Timeline, processes: list[Process], precision: int
) -> ScheduleResult:
    count = len(processes)
    return ScheduleResult(
        timeline=timeline,
        avg_turnaround=sum(p.turnaround for p in processes) / count,
        avg_response=sum(p.response for p in processes) / count,
        precision=precision,
        processes=processes,
    )


def fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """First come, first served: run each process to completion in order."""
    jobs = _prepare(processes)
    timeline = Timeline()
    now = 0.0
    for process in jobs:
        now = max(now, process.arrival)
        process.response = now - process.arrival
        now += process.job_time
        process.turnaround = now - process.arrival
        timeline.add(process.pid, now - process.job_time, now)
    return _result(timeline, jobs, precision=3)


def round_robin(processes: Iterable[Process], time_slice: float) -> ScheduleResult:
    """Round robin with a whole-number time slice.

    Processes arriving within one slice of the current time join the
    queue; the last unfinished process runs to completion at once.
    """
    quantum = int(time_slice)
    if quantum <= 0:
        raise ValueError("time slice must be a positive whole number")
    jobs = _prepare(processes)
    timeline = Timeline()
    queue: deque[Process] = deque()
    now = 0.0
    completed = 0
    pending = iter(jobs)
    upcoming = next(pending, None)

    while queue or upcoming is not None:
        if not queue and upcoming is not None:
            now = max(now, upcoming.arrival)
        while upcoming is not None and upcoming.arrival <= now + quantum:
            queue.append(upcoming)
            upcoming = next(pending, None)

        current = queue.popleft()
        if current.job_time == current.remaining:
            current.response = now - current.arrival

        if current.remaining <= quantum or completed == len(jobs) - 1:
            now += current.remaining
            current.turnaround = now - current.arrival
            timeline.add(current.pid, now - current.remaining, now)
            current.remaining = 0.0
            completed += 1
        else:
            current.remaining -= quantum
            now += quantum
            queue.append(current)
            timeline.add(current.pid, now - quantum, now)

    return _result(timeline, jobs, precision=3)


def sjf(processes: Iterable[Process]) -> ScheduleResult:
    """Shortest job first, without preemption."""
    jobs = _prepare(processes)
    timeline = Timeline()
    heap = _RemainingHeap()
    now = 0.0
    pending = iter(jobs)
    upcoming = next(pending, None)

    while upcoming is not None or heap:
        if not heap and upcoming is not None:
            now = max(now, upcoming.arrival)
        while upcoming is not None and upcoming.arrival <= now:
            heap.push(upcoming)
            upcoming = next(pending, None)
        heap.build()

        running = heap.pop()
        if running.job_time == running.remaining:
            running.response = now - running.arrival
        now += running.job_time
        running.turnaround = now - running.arrival
        timeline.add(running.pid, now - running.job_time, now)

    return _result(timeline, jobs, precision=2)


def srtf(processes: Iterable[Process]) -> ScheduleResult:
    """Shortest remaining time first, preempting at each arrival."""
    jobs = _prepare(processes)
    timeline = Timeline()
    heap = _RemainingHeap()
    now = jobs[0].arrival
    completed = 0
    pending = iter(jobs)
    upcoming = next(pending, None)

    while upcoming is not None and upcoming.arrival <= now:
        heap.push(upcoming)
        upcoming = next(pending, None)
    heap.build()

    while completed < len(jobs):
        if not heap and upcoming is not None:
            now = max(now, upcoming.arrival)
        while upcoming is not None and upcoming.arrival <= now:
            heap.push(upcoming)
            upcoming = next(pending, None)
        heap.build()

        if upcoming is not None:
            next_arrival, next_job = upcoming.arrival, upcoming.job_time
        else:
            next_arrival, next_job = _FAR_FUTURE, _FAR_FUTURE

        running = heap.pop()
        if running.job_time == running.remaining:
            running.response = now - running.arrival

        gap = next_arrival - now
        if running.remaining <= gap:
            running.switch_run += running.remaining
            now += running.remaining
            running.remaining = 0.0
            running.turnaround = now - running.arrival
            completed += 1
            timeline.add(running.pid, now - running.switch_run, now)
        elif running.remaining - gap < next_job:
            running.switch_run += gap
            running.remaining -= gap
            now = next_arrival
            heap.push(running)
        else:
            running.switch_run += gap
            running.remaining -= gap
            now = next_arrival
            timeline.add(running.pid, now - running.switch_run, now)
            running.switch_run = 0.0
            heap.push(running)

    return _result(timeline, jobs, precision=2)


def mlfq(
    processes: Iterable[Process],
    slice1: float,
    slice2: float,
    slice3: float,
    boost: float,
) -> ScheduleResult:
    """Three-level feedback queue with a periodic priority boost.

    Raises ValueError when the boost period is shorter than any slice,
    or when a slice is not positive.
    """
    slices = (slice1, slice2, slice3)
    if any(boost < s for s in slices) or any(s <= 0 for s in slices):
        raise ValueError("Invalid time quantum.")
    jobs = _prepare(processes)
    timeline = Timeline()
    levels: tuple[deque[Process], ...] = (deque(), deque(), deque())
    demote_to = (levels[1], levels[2], levels[2])
    now = jobs[0].arrival
    completed = 0
    next_boost = boost
    pending = iter(jobs)
    upcoming = next(pending, None)

    while completed < len(jobs):
        while upcoming is not None and upcoming.arrival <= now:
            levels[0].append(upcoming)
            upcoming = next(pending, None)

        level = next((i for i, queue in enumerate(levels) if queue), None)
        if level is None:
            now = upcoming.arrival if upcoming is not None else _FAR_FUTURE
        else:
            queue, quantum = levels[level], slices[level]
            current = queue.popleft()
            if current.remaining == current.job_time:
                current.response = now - current.arrival
            if current.remaining <= quantum:
                completed += 1
                timeline.add(current.pid, now, now + current.remaining)
                now += current.remaining
                current.remaining = 0.0
                current.turnaround = now - current.arrival
            else:
                now += quantum
                current.remaining -= quantum
                timeline.add(current.pid, now - quantum, now)
                demote_to[level].append(current)

        if now >= next_boost:
            next_boost += boost
            for lower in levels[1:]:
                levels[0].extend(lower)
                lower.clear()

    return _result(timeline, jobs, precision=2)