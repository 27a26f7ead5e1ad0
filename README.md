# cpusched

A small CPU scheduling simulator. It generates ten random processes. Each one
has an arrival time (0–9), a CPU burst (1–10), an I/O burst (0–4, where 0
means no I/O), the number of CPU ticks after which the I/O is requested (1–5)
and a priority (1–10, lower runs first). It then runs them under one of six
scheduling algorithms:

1. FCFS (first come, first served)
2. Non-preemptive SJF (shortest remaining time first, running until I/O or completion)
3. Non-preemptive Priority
4. Round Robin (time quantum 2 by default)
5. Preemptive SJF (decided again every tick)
6. Preemptive Priority (decided again every tick)

A process that requests I/O waits in a waiting queue. Its I/O burst goes down
by one each tick, and the process goes back to the ready queue when the burst
reaches zero. After the run the simulator prints a Gantt chart that marks idle
gaps, then the average waiting time and the average turnaround time. For a
process that did I/O, the waiting time excludes its I/O time.

## Installation

```
pip install .
```

## Command line

```
cpusched [--seed N] [--algorithm {1..6}] [--quantum Q]
```

- `--seed` seeds the random workload, so a run can be repeated.
- `--algorithm` chooses the algorithm by number. If you leave it out, the
  program asks for the number on standard input.
- `--quantum` sets the Round Robin time quantum. The default is 2, and the
  value must be at least 1.

The program prints the generated process table, the name of the algorithm,
the Gantt chart and the two averages, formatted to two decimal places. If the
number is not between 1 and 6, no scheduling takes place. The averages then
come out as zero.

Example:

```
cpusched --seed 7 --algorithm 4
```

## Library use

```python
import random

from cpusched.process import generate_processes, format_process_table
from cpusched.schedulers import Algorithm, run
from cpusched.cli import evaluate

processes = generate_processes(10, random.Random(42))
print(format_process_table(processes))

chart = run(Algorithm.ROUND_ROBIN, processes, 2)
print(chart.render())
print(evaluate(processes))  # (average waiting time, average turnaround time)
```

Modules:

- `cpusched.process`:
  - `Process`, a dataclass.
  - `Process.record_completion(current_time)`, which stores the turnaround
    and waiting times.
  - `generate_processes(count, rng)`, which takes a count from 0 to 10 and
    raises `ValueError` otherwise.
  - `format_process_table(processes)`.
- `cpusched.gantt`:
  - `GanttEntry` and `GanttChart`. `GanttChart` has `add`, `extend_or_add`
    and `render`.
  - A chart holds at most 100 entries. Further entries are dropped.
- `cpusched.schedulers`:
  - `Algorithm`, an `IntEnum` numbered 1–6 with a `label` property.
  - `fcfs`, `sjf`, `priority`, `round_robin(processes, time_quantum=2)`,
    `preemptive_sjf`, `preemptive_priority` and
    `run(algorithm, processes, time_quantum=2)`.
  - Each scheduler returns a `GanttChart` and changes the timing fields of
    the `Process` objects it is given: the remaining time, the I/O counters
    and the waiting and turnaround times. Generate a fresh list for each run.
  - `round_robin` raises `ValueError` for a quantum below 1.
- `cpusched.cli`:
  - `evaluate(processes)` returns the two averages. It raises `ValueError`
    for an empty set of processes.
  - `main(argv=None)` is the command-line entry point.

## Limitations

The workload is always random. The command line cannot read processes from a
file or accept them as arguments, and it always generates exactly ten. Each
process makes at most one I/O request.

## Running the tests

```
pip install .[test]
pytest
```