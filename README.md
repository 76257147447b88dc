# oslab

Small operating-systems lab tools, usable as a library or from the command line:

- a CPU scheduling simulator (FCFS, Round Robin, SJF, SRTF and a three-level MLFQ with priority boost),
- a random-workload experiment runner for the same schedulers,
- an integer-time scheduler checker (FCFS, Round Robin, SJF),
- a line/word/character counter,
- a first-fit heap allocator model with block splitting and coalescing,
- two small interactive Unix shells with pipes.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Scheduling simulator

The input file lists processes as whitespace-separated triples: an identifier, an arrival time and a job time. A trailing incomplete triple is ignored.

```
J1 0 10
J2 2 4
J3 5 7
```

Run all five schedulers, giving the input and output files, the Round Robin slice, the three MLFQ slices and the MLFQ boost period:

```
oslab-sim jobs.txt out.txt 4 2 4 8 20
```

The five numbers are read as whole numbers. For each scheduler the output file holds one line of `pid start end` slices (two decimals), followed by a line with the average turnaround time and the average response time — three decimals for FCFS and Round Robin, two for the others. A non-positive Round Robin slice writes `Invalid time slice.` in place of that scheduler's result; an MLFQ boost period shorter than any slice, or a non-positive MLFQ slice, writes `Invalid time quantum.`.

From Python:

```python
import io
from oslab.simulator import read_processes
from oslab.schedulers import fcfs, round_robin, sjf, srtf, mlfq

processes = read_processes(io.StringIO("J1 0 10\nJ2 2 4\n"))
result = round_robin(processes, 3)
print(result.format(3))
print(result.avg_turnaround, result.avg_response)
```

Each scheduler expects processes sorted by arrival time, works on copies of them and returns a `ScheduleResult` holding the `timeline`, the two averages and the scheduled `processes`. `oslab.simulator.run_all` sorts a workload and returns the report for every scheduler. `oslab.timeline.Timeline` is the slice record the schedulers build; consecutive slices of the same process are merged.

## Random experiments

```
oslab-experiments [--seed N] [--output FILE]
```

asks for the number of processes and the maximum job and arrival times, generates a random workload with random quanta, and writes every scheduler's result to `out.txt` (or `FILE`). The seed defaults to 1. The generators are available as `oslab.experiments.random_process`, `random_processes` and `random_quanta`, each taking a `random.Random`.

## Integer-time scheduler checker

```
oslab-intsched jobs.txt out.txt 4 2 4 8 20
```

takes the same seven arguments as `oslab-sim`, reads whole-number arrival and job times from the input file and prints the SJF schedule to standard output. The library functions `oslab.intsched.fcfs`, `round_robin` and `sjf` work on lists of `Job` and return the report text; their slices are not merged.

## Word counter

```
oslab-wc < file.txt
```

prints the number of lines, words and characters (bytes) of standard input. Words are separated by spaces, tabs and newlines. From Python, `oslab.wc.count(text)` returns a `Counts` with `lines`, `words` and `characters`.

## Heap allocator model

```
oslab-alloc
```

runs a short demonstration, printing values to standard output and the heap layout to standard error. From Python:

```python
from oslab.allocator import Heap

heap = Heap()
address = heap.calloc(20, 1)
heap.write(address, b"ABCDEFGHIJKLMNOPQRST")
print(heap.read(address, 20))
heap.free(address)
print(heap.info())
```

`Heap.malloc` uses first fit, splits a free block when the rest can hold another header, and maps a new region when nothing fits; `Heap.free` coalesces neighbouring free blocks. `Heap.blocks()` returns copies of the blocks in list order.

## Shells

```
oslab-shell
```

starts a shell with the prompt `user:cwd MTL 458 > `. It supports `cd` (including `cd ~`), `history N`, `exit`, and pipelines of up to 20 commands joined with `|`. Inside a pipeline, `history` is a stage of its own and `exit` ends only its stage.

```
oslab-refshell
```

greets the user, clears the screen, and starts a simpler shell with the prompt `Dir: cwd`, the builtins `exit`, `cd`, `help` and `hello`, and a single `|` between two commands.

## What it does not do

- The heap allocator is a model: addresses point into a simulated address space held by `Heap`, not into process memory.
- `oslab-experiments` asks for maximum job and arrival times but does not use them; arrival times are whole numbers below 10 and job times are exponentially distributed with mean 25.
- `oslab-intsched` only reports SJF from the command line and does not write the output file it is given; it has no SRTF or MLFQ.
- The shells have no redirection, quoting, globbing or job control.