import io

import pytest

from cpusched.cli import evaluate, main
from cpusched.process import MAX_PROCESSES, TABLE_HEADER, Process


def make(pid, waiting, turnaround):
    proc = Process(
        pid=pid,
        arrival_time=0,
        cpu_burst_time=1,
        io_burst_time=0,
        io_request_time=1,
        priority=1,
    )
    proc.waiting_time = waiting
    proc.turnaround_time = turnaround
    return proc


def test_evaluate_averages():
    assert evaluate([make(1, 2, 4), make(2, 4, 6)]) == (3.0, 5.0)


def test_evaluate_rejects_empty():
    with pytest.raises(ValueError):
        evaluate([])


@pytest.mark.parametrize("algorithm", range(1, 7))
def test_main_schedules_every_process(algorithm, capsys):
    assert main(["--seed", "3", "--algorithm", str(algorithm)]) == 0
    out = capsys.readouterr().out
    assert out.count(TABLE_HEADER) == MAX_PROCESSES
    assert "\ngantt chart\n0" in out
    for pid in range(1, MAX_PROCESSES + 1):
        assert f"---P{pid}---" in out
    assert "average waiting time : " in out
    assert "average turnaround time : " in out


def test_main_is_deterministic_for_a_seed(capsys):
    main(["--seed", "11", "--algorithm", "5"])
    first = capsys.readouterr().out
    main(["--seed", "11", "--algorithm", "5"])
    second = capsys.readouterr().out
    assert first == second


def test_main_reads_choice_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "(1)FCFS / (2)SJF" in out
    assert "Round Robin Scheduling" in out


def test_main_with_unknown_choice_reports_zero_averages(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n"))
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "gantt chart" not in out
    assert "average waiting time : 0.00" in out
    assert "average turnaround time : 0.00" in out


def test_main_rejects_bad_quantum():
    with pytest.raises(SystemExit) as excinfo:
        main(["--algorithm", "4", "--quantum", "0"])
    assert excinfo.value.code == 2