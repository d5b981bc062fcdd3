"""Exceptions raised while turning benchmark logs into CSV rows."""
from pathlib import Path
from typing import Optional


class BenchParseError(Exception):
    """
    Base error for every fatal condition of a parsing run.

    Carries the offending file, benchmark banner and dataset name when known,
    so callers can report a failure per file instead of aborting blindly.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        benchmark: Optional[str] = None,
        dataset: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = path
        self.benchmark = benchmark
        self.dataset = dataset

    def with_context(self, path: Optional[Path] = None, benchmark: Optional[str] = None,
                     dataset: Optional[str] = None) -> "BenchParseError":
        """Fill in context fields that are still missing and return self."""
        if self.path is None:
            self.path = path
        if self.benchmark is None:
            self.benchmark = benchmark
        if self.dataset is None:
            self.dataset = dataset
        return self

    def __str__(self) -> str:
        parts = [self.message]
        if self.path is not None:
            parts.append(f"file={self.path}")
        if self.benchmark:
            parts.append(f"benchmark={self.benchmark!r}")
        if self.dataset:
            parts.append(f"dataset={self.dataset!r}")
        return " | ".join(parts)


class LogFormatError(BenchParseError):
    """A log line does not have the shape its keyword or position requires."""


class FieldFormatError(BenchParseError):
    """A raw token (time, memory) cannot be converted to a number."""


class DatasetSizeError(BenchParseError):
    """A completed dataset holds a result count other than the configured size."""

    def __init__(self, expected: int, actual: int, path: Optional[Path] = None,
                 benchmark: Optional[str] = None, dataset: Optional[str] = None):
        super().__init__(
            f"Invalid dataset result length: expected {expected}, found {actual}",
            path=path, benchmark=benchmark, dataset=dataset,
        )
        self.expected = expected
        self.actual = actual


class InputError(BenchParseError):
    """Input paths or globs resolve to no readable file."""
