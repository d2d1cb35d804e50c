"""Concurrency: sharing read-only data and a locked counter between threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

_JOB_DELAY_SECONDS = 0.25


def offset_sums(numbers: Iterable[int], workers: int) -> list[int]:
    """Sum every workers-th number, one thread per offset; result indexed by offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass
class JobStatus:
    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def complete_one(self) -> None:
        with self._lock:
            self.jobs_completed += 1


def complete_jobs(count: int) -> JobStatus:
    """Run count jobs on their own threads, each marking itself completed."""
    status = JobStatus()

    def job() -> None:
        time.sleep(_JOB_DELAY_SECONDS)
        status.complete_one()

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        print(f"jobs completed {status.jobs_completed}")
    return status