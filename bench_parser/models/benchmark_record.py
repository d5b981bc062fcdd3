"""Structured records reconstructed from benchmark logs."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class BenchmarkResult:
    """
    One profiled run: a ``time memory cpu`` line of the log.

    Values are kept as the raw text tokens; numeric conversion happens
    when rows are built.
    """
    exec_time: str
    mem_usage: str  # kilobytes
    cpu_usage: str  # percent, may carry a trailing '%'


@dataclass
class Dataset:
    name: str = ""
    results: List[BenchmarkResult] = field(default_factory=list)

    def has_record(self) -> bool:
        return bool(self.name) and bool(self.results)

    def clear(self) -> None:
        self.name = ""
        self.results = []


@dataclass
class Benchmark:
    """A benchmarking run identified by its banner line."""
    name: str
    datasets: List[Dataset] = field(default_factory=list)


@dataclass
class Record:
    """
    One completed benchmark + dataset group with the host context that was
    active when the group ended.
    """
    cpu: str
    os: str
    version: str
    benchmark: Benchmark
