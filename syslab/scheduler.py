"""First-come-first-served and round-robin scheduling of simulated processes."""

from __future__ import annotations

import sys
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, Sequence


@dataclass
class Process:
    """A simulated process and the times recorded when it runs."""

    pid: int
    burst_time: int
    arrival_time: int
    completion_time: int = 0
    waiting_time: int = 0
    turnaround_time: int = 0


class SharedResource:
    """A counter that processes update under a lock."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self._lock = threading.Lock()

    def add(self, amount: int) -> int:
        """Add ``amount`` and return the new value."""
        with self._lock:
            self.value += amount
            return self.value


@dataclass(frozen=True)
class Metrics:
    """Averages and throughput over a finished set of processes."""

    average_turnaround_time: float
    average_waiting_time: float
    throughput: float


shared_resource = SharedResource()

Sleeper = Callable[[float], object]


def _access(resource: SharedResource, pid: int, amount: int) -> None:
    print(f"Process {pid} accessing shared resource.")
    value = resource.add(amount)
    print(f"Shared Resource updated to: {value}")


def first_come_first_served(
    processes: Sequence[Process],
    resource: Optional[SharedResource] = None,
    sleep: Optional[Sleeper] = None,
) -> None:
    """Run each process to completion in list order, recording its times."""
    resource = shared_resource if resource is None else resource
    sleep = time.sleep if sleep is None else sleep
    current_time = 0
    for process in processes:
        current_time = max(current_time, process.arrival_time)
        _access(resource, process.pid, process.pid)
        print(f"Executing Process: {process.pid}")
        sleep(process.burst_time)
        process.completion_time = current_time + process.burst_time
        process.turnaround_time = process.completion_time - process.arrival_time
        process.waiting_time = process.turnaround_time - process.burst_time
        print(f"Process {process.pid} execution complete.")
        current_time += process.burst_time


def round_robin(
    processes: Sequence[Process],
    time_quantum: int,
    resource: Optional[SharedResource] = None,
    sleep: Optional[Sleeper] = None,
) -> None:
    """Run the processes in turns of at most ``time_quantum``.

    Each process's ``burst_time`` is used up as it runs and ends at zero.
    """
    resource = shared_resource if resource is None else resource
    sleep = time.sleep if sleep is None else sleep
    ready: Deque[Process] = deque(processes)
    current_time = 0
    while ready:
        process = ready.popleft()
        current_time = max(current_time, process.arrival_time)
        slice_time = min(time_quantum, process.burst_time)

        _access(resource, process.pid, process.pid * 2)
        print(f"Executing Process {process.pid} for {slice_time} seconds.")
        sleep(slice_time)

        process.burst_time -= slice_time
        current_time += slice_time

        if process.burst_time > 0:
            ready.append(process)
        else:
            process.completion_time = current_time
            process.turnaround_time = process.completion_time - process.arrival_time
            process.waiting_time = process.turnaround_time - (
                process.burst_time + slice_time
            )
            print(f"Process {process.pid} execution complete.")


def calculate_metrics(processes: Sequence[Process]) -> Metrics:
    """Return average turnaround, average waiting time and throughput.

    Raises ``ValueError`` for an empty list of processes.
    """
    if not processes:
        raise ValueError("no processes to measure")
    count = len(processes)
    total_turnaround = sum(p.turnaround_time for p in processes)
    total_waiting = sum(p.waiting_time for p in processes)
    total_completion = max(0, max(p.completion_time for p in processes))
    throughput = count / total_completion if total_completion else float("inf")
    return Metrics(total_turnaround / count, total_waiting / count, throughput)


def _print_metrics(metrics: Metrics) -> None:
    print("\nMetrics:")
    print(f"Average Turnaround Time: {metrics.average_turnaround_time:g}")
    print(f"Average Waiting Time: {metrics.average_waiting_time:g}")
    print(f"Throughput: {metrics.throughput:g} processes/unit time")


def main(argv: Optional[Sequence[str]] = None) -> int:
    processes: List[Process] = [
        Process(1, 5, 0),
        Process(2, 3, 1),
        Process(3, 8, 2),
        Process(4, 6, 3),
    ]
    print("Starting First-Come, First-Served Scheduling...")
    first_come_first_served(processes)
    _print_metrics(calculate_metrics(processes))

    print("\nStarting Round Robin Scheduling...")
    round_robin(processes, 2)
    _print_metrics(calculate_metrics(processes))
    return 0


if __name__ == "__main__":
    sys.exit(main())