"""Models for benchmark log data structures."""

from .benchmark_record import Benchmark, BenchmarkResult, Dataset, Record
from .metadata_info import AppInfo, PublicationInfo
from .parsed_line import ParsedLine

__all__ = [
    "AppInfo",
    "Benchmark",
    "BenchmarkResult",
    "Dataset",
    "ParsedLine",
    "PublicationInfo",
    "Record",
]
