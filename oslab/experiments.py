"""Generate random workloads and run every scheduler over them."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Sequence

from oslab.simulator import run_all
from oslab.timeline import Process


def _exponential(rng: random.Random, scale: float) -> float:
    return -math.log(1.0 - rng.random()) * scale


def random_process(number: int, rng: random.Random) -> Process:
    """A process named ``J<number>`` with a whole arrival time below 10
    and an exponentially distributed job time of mean 25."""
    return Process(
        pid=f"J{number}",
        arrival=float(rng.randrange(10)),
        job_time=_exponential(rng, 25),
    )


def random_processes(count: int, rng: random.Random) -> list[Process]:
    """``count`` random processes named J1, J2, ..."""
    return [random_process(number, rng) for number in range(1, count + 1)]


def random_quanta(rng: random.Random) -> tuple[float, float, float, float, float]:
    """Random RR slice, three MLFQ slices and MLFQ boost period."""
    rr, q1, q2, q3, boost = (_exponential(rng, s) for s in (10, 10, 15, 20, 25))
    return rr, q1, q2, q3, boost


def _ask_int(prompt: str) -> int:
    return int(input(prompt).strip())


def main(argv: Sequence[str] | None = None) -> int:
    """Prompt for a workload size, simulate it and write the report."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=1, help="random seed")
    parser.add_argument("--output", default="out.txt", help="report file")
    options = parser.parse_args(argv)

    try:
        count = _ask_int("Enter Number Of Processes : ")
        _ask_int("Enter MaxValue for JobTime : ")
        _ask_int("Enter MaxValue for ArrivalTime : ")
    except (ValueError, EOFError):
        print("expected a whole number", file=sys.stderr)
        return 1
    if count <= 0:
        print("the number of processes must be positive", file=sys.stderr)
        return 1

    rng = random.Random(options.seed)
    quanta = random_quanta(rng)
    processes = random_processes(count, rng)
    report = run_all(processes, *quanta)

    try:
        with open(options.output, "w", encoding="utf-8") as out:
            out.write(report)
    except OSError as exc:
        print(f"{options.output}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())