import pytest

from oslab.schedulers import ScheduleResult, fcfs, mlfq, round_robin, sjf, srtf
from oslab.timeline import Process, Timeline


def make(*specs):
    return [Process(pid, arrival, job) for pid, arrival, job in specs]


MIXED = (("J1", 0, 7), ("J2", 1, 3), ("J3", 2, 9), ("J4", 3, 1), ("J5", 12, 4))


def all_results(processes):
    return {
        "fcfs": fcfs(processes),
        "rr": round_robin(processes, 2),
        "sjf": sjf(processes),
        "srtf": srtf(processes),
        "mlfq": mlfq(processes, 2, 4, 6, 20),
    }


def pids(result):
    return [s.pid for s in result.timeline]


def test_fcfs_single_process_format():
    result = fcfs(make(("J1", 0, 5)))
    assert result.format() == "J1 0.00 5.00 \n5.000 0.000\n"


def test_sjf_format_uses_two_decimals():
    result = sjf(make(("J1", 0, 5)))
    assert result.format() == "J1 0.00 5.00 \n5.00 0.00\n"


def test_format_precision_override():
    result = ScheduleResult(Timeline(), 1.25, 0.5, precision=3)
    assert result.format(1) == "\n1.2 0.5\n"
    assert result.format() == "\n1.250 0.500\n"


def test_fcfs_waits_for_late_arrival():
    procs = make(("J1", 0, 2), ("J2", 10, 3))
    result = fcfs(procs)
    slices = list(result.timeline)
    assert slices[1].start == procs[1].arrival
    assert slices[1].end == procs[1].arrival + procs[1].job_time
    assert result.avg_response == 0


def test_input_processes_not_mutated():
    procs = make(*MIXED)
    all_results(procs)
    assert all(p.turnaround == 0.0 and p.remaining == 0.0 for p in procs)


@pytest.mark.parametrize("name", ["fcfs", "rr", "sjf", "srtf", "mlfq"])
def test_averages_match_process_records(name):
    result = all_results(make(*MIXED))[name]
    count = len(result.processes)
    assert result.avg_turnaround == pytest.approx(
        sum(p.turnaround for p in result.processes) / count
    )
    assert result.avg_response == pytest.approx(
        sum(p.response for p in result.processes) / count
    )


@pytest.mark.parametrize("name", ["fcfs", "rr", "sjf", "mlfq"])
def test_busy_time_equals_total_work(name):
    result = all_results(make(*MIXED))[name]
    busy = sum(s.end - s.start for s in result.timeline)
    assert busy == pytest.approx(sum(job for _, _, job in MIXED))


def test_sjf_picks_shortest_available():
    result = sjf(make(("J1", 0, 8), ("J2", 1, 4), ("J3", 1, 2)))
    assert pids(result) == ["J1", "J3", "J2"]


def test_round_robin_alternates():
    result = round_robin(make(("J1", 0, 5), ("J2", 0, 3)), 2)
    assert pids(result) == ["J1", "J2", "J1", "J2", "J1"]
    assert list(result.timeline)[-1].end == 5 + 3


def test_round_robin_last_process_runs_to_completion():
    result = round_robin(make(("J1", 0, 10)), 3)
    assert len(result.timeline) == 1
    assert list(result.timeline)[0].end == 10


def test_round_robin_truncates_slice():
    procs = make(*MIXED)
    assert round_robin(procs, 2.9).format() == round_robin(procs, 2).format()


def test_round_robin_rejects_zero_slice():
    with pytest.raises(ValueError):
        round_robin(make(("J1", 0, 1)), 0)


def test_srtf_preempts_for_shorter_arrival():
    result = srtf(make(("J1", 0, 10), ("J2", 2, 3)))
    slices = list(result.timeline)
    assert pids(result) == ["J1", "J2", "J1"]
    assert slices[0].end == slices[1].start == 2
    assert slices[1].end == slices[2].start
    assert slices[2].end == 10 + 3


def test_mlfq_demotes_long_job():
    result = mlfq(make(("J1", 0, 10), ("J2", 0, 1)), 2, 4, 8, 100)
    slices = list(result.timeline)
    assert pids(result) == ["J1", "J2", "J1"]
    assert slices[0].end == 2
    assert slices[2].end == 10 + 1


def test_mlfq_with_frequent_boost_completes():
    procs = make(*MIXED)
    result = mlfq(procs, 1, 1, 1, 1)
    busy = sum(s.end - s.start for s in result.timeline)
    assert busy == pytest.approx(sum(job for _, _, job in MIXED))


def test_mlfq_rejects_short_boost():
    with pytest.raises(ValueError, match="Invalid time quantum."):
        mlfq(make(("J1", 0, 1)), 2, 4, 8, 5)


@pytest.mark.parametrize(
    "run",
    [
        fcfs,
        sjf,
        srtf,
        lambda p: round_robin(p, 2),
        lambda p: mlfq(p, 1, 2, 3, 4),
    ],
)
def test_empty_input_rejected(run):
    with pytest.raises(ValueError):
        run([])