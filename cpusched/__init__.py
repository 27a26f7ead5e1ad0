"""Simulate CPU scheduling algorithms with I/O bursts, Gantt charts and average waiting/turnaround times."""

__version__ = "0.1.0"
__all__ = ["process", "gantt", "schedulers", "cli"]