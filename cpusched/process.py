"""Process records and random workload generation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable

MAX_PROCESSES = 10

TABLE_HEADER = "pid\tarrival time\tcpuburst\tio burst\tio request\tpriority"


@dataclass
class Process:
    """A simulated process with one optional I/O request."""

    pid: int
    arrival_time: int
    cpu_burst_time: int
    io_burst_time: int
    io_request_time: int
    priority: int
    io_total: int = field(init=False)
    remaining_time: int = field(init=False)
    waiting_time: int = field(default=0, init=False)
    turnaround_time: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.io_total = self.io_burst_time
        self.remaining_time = self.cpu_burst_time

    @property
    def did_io(self) -> bool:
        """True once the process has requested I/O and finished it."""
        return self.io_total > 0 and self.io_burst_time == 0

    def record_completion(self, current_time: int) -> None:
        """Store turnaround and waiting time for a process finishing now."""
        self.turnaround_time = current_time - self.arrival_time
        self.waiting_time = self.turnaround_time - self.cpu_burst_time
        if self.did_io:
            self.waiting_time -= self.io_total


def generate_processes(count: int, rng: random.Random) -> list[Process]:
    """Create ``count`` processes with random timings, pids starting at 1."""
    if not 0 <= count <= MAX_PROCESSES:
        raise ValueError(f"process count must be between 0 and {MAX_PROCESSES}, got {count}")
    processes = []
    for pid in range(1, count + 1):
        arrival_time = rng.randrange(10)
        cpu_burst_time = rng.randrange(10) + 1
        io_burst_time = rng.randrange(5)
        io_request_time = rng.randrange(5) + 1
        priority = rng.randrange(10) + 1
        processes.append(
            Process(
                pid=pid,
                arrival_time=arrival_time,
                cpu_burst_time=cpu_burst_time,
                io_burst_time=io_burst_time,
                io_request_time=io_request_time,
                priority=priority,
            )
        )
    return processes


def format_process_table(processes: Iterable[Process]) -> str:
    """Render each process as a header line followed by its row."""
    lines = []
    for p in processes:
        lines.append(TABLE_HEADER)
        lines.append(
            f"{p.pid}\t{p.arrival_time}\t\t{p.cpu_burst_time}\t\t"
            f"{p.io_burst_time}\t\t{p.io_request_time}\t\t{p.priority}"
        )
    return "".join(line + "\n" for line in lines)