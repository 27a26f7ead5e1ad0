"""Gantt chart recording and text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

MAX_GANTT_SIZE = 100


@dataclass
class GanttEntry:
    """One contiguous run of a process on the CPU."""

    pid: int
    start_time: int
    end_time: int


@dataclass
class GanttChart:
    """An ordered list of CPU runs; entries beyond the capacity are dropped."""

    capacity: int = MAX_GANTT_SIZE
    entries: list[GanttEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[GanttEntry]:
        return iter(self.entries)

    def add(self, pid: int, start_time: int, end_time: int) -> None:
        """Append a run unless the chart is full."""
        if len(self.entries) < self.capacity:
            self.entries.append(GanttEntry(pid, start_time, end_time))

    def extend_or_add(self, pid: int, start_time: int, end_time: int) -> None:
        """Stretch the last run if it belongs to ``pid``, else add a new one."""
        if self.entries and self.entries[-1].pid == pid:
            self.entries[-1].end_time = end_time
        else:
            self.add(pid, start_time, end_time)

    def render(self) -> str:
        """Return the chart as text, marking gaps between runs as idle."""
        parts = ["\ngantt chart\n0"]
        previous_end = 0
        for entry in self.entries:
            if entry.start_time != previous_end:
                parts.append(f" ---idle--- {entry.start_time}")
            parts.append(f" ---P{entry.pid}--- {entry.end_time}")
            previous_end = entry.end_time
        return "".join(parts)