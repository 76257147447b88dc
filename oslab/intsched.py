"""Whole-number CPU schedulers: FCFS, round robin and SJF.

Each scheduler takes jobs sorted by arrival time and returns its report:
a line of ``pid start end `` slices followed by the average turnaround
and response times with two decimals. Slices are reported as they run,
without merging consecutive runs of one job.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Sequence, TextIO

from oslab.schedulers import _RemainingHeap

_USAGE_ERROR = "Invalid number of arguments."


@dataclass
class Job:
    """A job with whole-number arrival and run times."""

    pid: str
    arrival: int
    job_time: int
    remaining: int = field(init=False)

    def __post_init__(self) -> None:
        self.remaining = self.job_time


def _fresh(jobs: Iterable[Job]) -> list[Job]:
    copies = [Job(job.pid, job.arrival, job.job_time) for job in jobs]
    if not copies:
        raise ValueError("no jobs to schedule")
    return copies


def _report(
    slices: list[tuple[str, int, int]],
    total_turnaround: float,
    total_response: float,
    count: int,
) -> str:
    line = "".join(f"{pid} {start} {end} " for pid, start, end in slices)
    return (
        f"{line}\n"
        f"{total_turnaround / count:.2f} {total_response / count:.2f}\n"
    )


def read_jobs(stream: TextIO) -> list[Job]:
    """Read whitespace-separated ``pid arrival job_time`` integer triples.

    A trailing incomplete triple is ignored. Raises ValueError when a
    time is not a whole number.
    """
    tokens = stream.read().split()
    complete = len(tokens) - len(tokens) % 3
    fields = iter(tokens[:complete])
    jobs = []
    for pid, arrival, job_time in zip(fields, fields, fields):
        try:
            jobs.append(Job(pid, int(arrival), int(job_time)))
        except ValueError:
            raise ValueError(f"bad job line: {pid} {arrival} {job_time}") from None
    return jobs


def fcfs(jobs: Iterable[Job]) -> str:
    """Run each job to completion in the given order, back to back."""
    queue = _fresh(jobs)
    slices = []
    now = 0
    total_turnaround = total_response = 0.0
    for job in queue:
        total_response += now - job.arrival
        now += job.job_time
        total_turnaround += now - job.arrival
        slices.append((job.pid, now - job.job_time, now))
    return _report(slices, total_turnaround, total_response, len(queue))


def round_robin(jobs: Iterable[Job], time_slice: int) -> str:
    """Sweep the arrived jobs in order, giving each up to one slice.

    When no job has arrived the clock advances one unit. Raises
    ValueError for a non-positive slice or job time.
    """
    if time_slice <= 0:
        raise ValueError("time slice must be positive")
    queue = _fresh(jobs)
    if any(job.job_time <= 0 for job in queue):
        raise ValueError("job times must be positive")
    slices = []
    now = 0
    completed = 0
    total_turnaround = total_response = 0.0

    while completed < len(queue):
        found = False
        for job in queue:
            if job.remaining <= 0 or job.arrival > now:
                continue
            found = True
            if job.remaining == job.job_time:
                total_response += now - job.arrival
            run = min(job.remaining, time_slice)
            now += run
            job.remaining -= run
            if job.remaining == 0:
                completed += 1
                total_turnaround += now - job.arrival
            slices.append((job.pid, now - run, now))
        if not found:
            now += 1

    return _report(slices, total_turnaround, total_response, len(queue))


def sjf(jobs: Iterable[Job]) -> str:
    """Shortest job first, without preemption; idle until the next arrival."""
    queue = _fresh(jobs)
    heap = _RemainingHeap()
    slices = []
    now = 0
    total_turnaround = total_response = 0.0
    pending = iter(queue)
    upcoming = next(pending, None)

    while upcoming is not None or heap:
        while upcoming is not None and upcoming.arrival <= now:
            heap.push(upcoming)
            upcoming = next(pending, None)
        heap.build()

        if heap:
            running = heap.pop()
            total_response += now - running.arrival
            now += running.remaining
            total_turnaround += now - running.arrival
            slices.append((running.pid, now - running.remaining, now))
        elif upcoming is not None:
            now = upcoming.arrival

    return _report(slices, total_turnaround, total_response, len(queue))


def main(argv: Sequence[str] | None = None) -> int:
    """Usage: INPUT OUTPUT TS_RR TS_MLFQ1 TS_MLFQ2 TS_MLFQ3 BOOST.

    Reads the jobs and prints the SJF report to standard output.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 7:
        print(_USAGE_ERROR)
        return 1

    input_path = args[0]
    try:
        with open(input_path, encoding="utf-8") as stream:
            jobs = read_jobs(stream)
    except OSError as exc:
        print(f"{input_path}: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{input_path}: {exc}", file=sys.stderr)
        return 1

    jobs.sort(key=lambda job: job.arrival)
    try:
        print(sjf(jobs), end="")
    except ValueError as exc:
        print(f"{input_path}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())