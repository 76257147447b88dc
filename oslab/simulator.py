"""Run every scheduler over a process list read from a file."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Sequence, TextIO

from oslab.schedulers import fcfs, mlfq, round_robin, sjf, srtf
from oslab.timeline import Process

_USAGE_ERROR = "Invalid number of arguments."
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the leading integer of ``text``; text without one gives 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_processes(stream: TextIO) -> list[Process]:
    """Read whitespace-separated ``pid arrival job_time`` triples.

    A trailing incomplete triple is ignored. Raises ValueError when an
    arrival or job time is not a number.
    """
    tokens = stream.read().split()
    complete = len(tokens) - len(tokens) % 3
    fields = iter(tokens[:complete])
    processes = []
    for pid, arrival, job_time in zip(fields, fields, fields):
        try:
            processes.append(Process(pid, float(arrival), float(job_time)))
        except ValueError:
            raise ValueError(
                f"bad process line: {pid} {arrival} {job_time}"
            ) from None
    return processes


def run_all(
    processes: Iterable[Process],
    rr_slice: float,
    slice1: float,
    slice2: float,
    slice3: float,
    boost: float,
) -> str:
    """Schedule the processes with every policy and return the report.

    The processes are ordered by arrival time first. Raises ValueError
    when there are no processes.
    """
    ordered = sorted(processes, key=lambda p: p.arrival)
    if not ordered:
        raise ValueError("no processes to schedule")

    parts = [fcfs(ordered).format()]
    try:
        parts.append(round_robin(ordered, rr_slice).format())
    except ValueError:
        parts.append("Invalid time slice.\n")
    parts.append(sjf(ordered).format())
    parts.append(srtf(ordered).format())
    try:
        parts.append(mlfq(ordered, slice1, slice2, slice3, boost).format())
    except ValueError:
        parts.append("Invalid time quantum.\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Usage: INPUT OUTPUT TS_RR TS_MLFQ1 TS_MLFQ2 TS_MLFQ3 BOOST."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 7:
        print(_USAGE_ERROR)
        return 1

    input_path, output_path, *numbers = args
    rr_slice, slice1, slice2, slice3, boost = (
        float(_leading_int(n)) for n in numbers
    )

    try:
        with open(input_path, encoding="utf-8") as stream:
            processes = read_processes(stream)
    except OSError as exc:
        print(f"{input_path}: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{input_path}: {exc}", file=sys.stderr)
        return 1

    try:
        report = run_all(processes, rr_slice, slice1, slice2, slice3, boost)
    except ValueError as exc:
        print(f"{input_path}: {exc}", file=sys.stderr)
        return 1

    try:
        with open(output_path, "w", encoding="utf-8") as out:
            out.write(report)
    except OSError as exc:
        print(f"{output_path}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())