"""Command line: generate a random workload, schedule it and report averages."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, Sequence

from cpusched.process import MAX_PROCESSES, Process, format_process_table, generate_processes
from cpusched.schedulers import DEFAULT_TIME_QUANTUM, Algorithm, run

PROMPT = (
    "Enter a number to choose a scheduling algorithm.\n"
    "(1)FCFS / (2)SJF / (3)Priority / (4)RR / (5)Preemptive SJF / (6)Preemptive Priority\n"
)


def evaluate(processes: Iterable[Process]) -> tuple[float, float]:
    """Return the average waiting time and average turnaround time."""
    processes = list(processes)
    if not processes:
        raise ValueError("cannot evaluate an empty set of processes")
    count = len(processes)
    average_waiting = sum(p.waiting_time for p in processes) / count
    average_turnaround = sum(p.turnaround_time for p in processes) / count
    return average_waiting, average_turnaround


def _prompt_choice() -> int | None:
    sys.stdout.write(PROMPT)
    sys.stdout.flush()
    line = sys.stdin.readline()
    try:
        return int(line.strip())
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cpusched", description="Simulate CPU scheduling of a random workload."
    )
    parser.add_argument("--seed", type=int, help="seed for the random workload")
    parser.add_argument(
        "--algorithm", type=int, help="algorithm number (1-6); asked for when omitted"
    )
    parser.add_argument(
        "--quantum",
        type=int,
        default=DEFAULT_TIME_QUANTUM,
        help="round robin time quantum",
    )
    args = parser.parse_args(argv)
    if args.quantum < 1:
        parser.error("--quantum must be at least 1")

    processes = generate_processes(MAX_PROCESSES, random.Random(args.seed))
    out = sys.stdout
    out.write(format_process_table(processes))

    choice = args.algorithm if args.algorithm is not None else _prompt_choice()
    try:
        algorithm: Algorithm | None = Algorithm(choice)
    except ValueError:
        algorithm = None

    if algorithm is not None:
        out.write(f"{algorithm.label} Scheduling\n")
        chart = run(algorithm, processes, args.quantum)
        out.write(f"{algorithm.label} result")
        out.write(chart.render())

    average_waiting, average_turnaround = evaluate(processes)
    out.write(f"\naverage waiting time : {average_waiting:.2f}\n")
    out.write(f"average turnaround time : {average_turnaround:.2f}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())