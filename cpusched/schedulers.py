"""CPU scheduling algorithms simulated tick by tick, with one I/O request per process."""

from __future__ import annotations

import enum
from collections import deque
from typing import Callable, Iterable

from cpusched.gantt import GanttChart
from cpusched.process import Process

DEFAULT_TIME_QUANTUM = 2


class Algorithm(enum.IntEnum):
    """The scheduling algorithms, numbered as offered to the user."""

    FCFS = 1
    SJF = 2
    PRIORITY = 3
    ROUND_ROBIN = 4
    PREEMPTIVE_SJF = 5
    PREEMPTIVE_PRIORITY = 6

    @property
    def label(self) -> str:
        """Human-readable name of the algorithm."""
        return _LABELS[self]


_LABELS = {
    Algorithm.FCFS: "FCFS",
    Algorithm.SJF: "non-preemptive SJF",
    Algorithm.PRIORITY: "Priority",
    Algorithm.ROUND_ROBIN: "Round Robin",
    Algorithm.PREEMPTIVE_SJF: "Preemptive SJF",
    Algorithm.PREEMPTIVE_PRIORITY: "Preemptive Priority",
}

_SortKey = Callable[[Process], int]


def _by_remaining(process: Process) -> int:
    return process.remaining_time


def _by_priority(process: Process) -> int:
    return process.priority


class _Simulation:
    """Clock, ready and waiting queues and the chart of one scheduling run."""

    def __init__(self, processes: Iterable[Process]) -> None:
        self.processes = list(processes)
        self.ready: deque[Process] = deque()
        self.waiting: deque[Process] = deque()
        self.chart = GanttChart()
        self.time = 0
        self.completed = 0
        self._admitted = [False] * len(self.processes)

    @property
    def done(self) -> bool:
        return self.completed >= len(self.processes)

    def admit_arrivals(self) -> None:
        """Move every process that has arrived by now into the ready queue, once."""
        for index, process in enumerate(self.processes):
            if not self._admitted[index] and process.arrival_time <= self.time:
                self.ready.append(process)
                self._admitted[index] = True

    def service_io(self) -> None:
        """Advance the I/O of every waiting process by one tick."""
        for _ in range(len(self.waiting)):
            process = self.waiting.popleft()
            process.io_burst_time -= 1
            if process.io_burst_time <= 0:
                self.ready.append(process)
            else:
                self.waiting.append(process)

    def idle_tick(self) -> None:
        self.time += 1
        self.service_io()

    def execute_tick(self, process: Process, *, consume_request: bool, admit: bool) -> None:
        """Run ``process`` on the CPU for one tick."""
        self.time += 1
        process.remaining_time -= 1
        if consume_request:
            process.io_request_time -= 1
        if admit:
            self.admit_arrivals()
        self.service_io()

    def sort_ready(self, key: _SortKey) -> None:
        self.ready = deque(sorted(self.ready, key=key))

    def finish(self, process: Process) -> None:
        process.record_completion(self.time)
        self.completed += 1


def _non_preemptive(processes: Iterable[Process], key: _SortKey | None) -> GanttChart:
    sim = _Simulation(processes)
    while not sim.done:
        sim.admit_arrivals()
        if not sim.ready:
            sim.idle_tick()
            continue
        if key is not None:
            sim.sort_ready(key)
        process = sim.ready.popleft()
        start = sim.time

        while process.remaining_time > 0 and process.io_request_time > 0:
            sim.execute_tick(process, consume_request=True, admit=False)

        if (
            process.io_request_time == 0
            and process.io_burst_time > 0
            and process.remaining_time > 0
        ):
            sim.waiting.append(process)
            sim.chart.add(process.pid, start, sim.time)
            continue

        if process.io_burst_time == 0:
            while process.remaining_time > 0:
                sim.execute_tick(process, consume_request=False, admit=False)

        sim.finish(process)
        sim.chart.add(process.pid, start, sim.time)
    return sim.chart


def _preemptive(processes: Iterable[Process], key: _SortKey) -> GanttChart:
    sim = _Simulation(processes)
    while not sim.done:
        sim.admit_arrivals()
        if not sim.ready:
            sim.idle_tick()
            continue
        sim.sort_ready(key)
        process = sim.ready.popleft()
        start = sim.time
        sim.execute_tick(process, consume_request=True, admit=True)

        if process.io_request_time == 0 and process.remaining_time > 0:
            sim.waiting.append(process)
        elif process.remaining_time > 0:
            sim.ready.append(process)
        else:
            sim.finish(process)
        sim.chart.extend_or_add(process.pid, start, sim.time)
    return sim.chart


def fcfs(processes: Iterable[Process]) -> GanttChart:
    """First come, first served. Mutates the processes' timing fields."""
    return _non_preemptive(processes, None)


def sjf(processes: Iterable[Process]) -> GanttChart:
    """Non-preemptive shortest remaining job first."""
    return _non_preemptive(processes, _by_remaining)


def priority(processes: Iterable[Process]) -> GanttChart:
    """Non-preemptive priority scheduling; a smaller value runs first."""
    return _non_preemptive(processes, _by_priority)


def round_robin(processes: Iterable[Process], time_quantum: int = DEFAULT_TIME_QUANTUM) -> GanttChart:
    """Round robin with the given time quantum."""
    if time_quantum < 1:
        raise ValueError(f"time quantum must be at least 1, got {time_quantum}")
    sim = _Simulation(processes)
    while not sim.done:
        sim.admit_arrivals()
        if not sim.ready:
            sim.idle_tick()
            continue
        process = sim.ready.popleft()
        start = sim.time
        executed = 0

        while (
            executed < time_quantum
            and process.remaining_time > 0
            and process.io_request_time > 0
        ):
            sim.execute_tick(process, consume_request=True, admit=True)
            executed += 1

        if (
            process.io_request_time == 0
            and process.io_burst_time > 0
            and process.remaining_time > 0
        ):
            sim.waiting.append(process)
            sim.chart.add(process.pid, start, sim.time)
            continue

        if process.io_burst_time == 0:
            while process.remaining_time > 0 and executed < time_quantum:
                sim.execute_tick(process, consume_request=False, admit=True)
                executed += 1

        if process.remaining_time > 0:
            sim.ready.append(process)
        else:
            sim.finish(process)
        sim.chart.add(process.pid, start, sim.time)
    return sim.chart


def preemptive_sjf(processes: Iterable[Process]) -> GanttChart:
    """Shortest remaining time first, re-evaluated every tick."""
    return _preemptive(processes, _by_remaining)


def preemptive_priority(processes: Iterable[Process]) -> GanttChart:
    """Priority scheduling re-evaluated every tick."""
    return _preemptive(processes, _by_priority)


def run(
    algorithm: Algorithm | int,
    processes: Iterable[Process],
    time_quantum: int = DEFAULT_TIME_QUANTUM,
) -> GanttChart:
    """Schedule ``processes`` with ``algorithm`` and return the Gantt chart."""
    algorithm = Algorithm(algorithm)
    if algorithm is Algorithm.FCFS:
        return fcfs(processes)
    if algorithm is Algorithm.SJF:
        return sjf(processes)
    if algorithm is Algorithm.PRIORITY:
        return priority(processes)
    if algorithm is Algorithm.ROUND_ROBIN:
        return round_robin(processes, time_quantum)
    if algorithm is Algorithm.PREEMPTIVE_SJF:
        return preemptive_sjf(processes)
    return preemptive_priority(processes)