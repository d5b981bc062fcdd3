"""
Benchmark log state machine.

BenchReader consumes the lines of one log and yields a Record each time a
benchmark + dataset group is complete. Host lines (CPU model, OS, tool
version) are sparse and apply to every later benchmark in the file until
overwritten, so they are carried as accumulator state.

States:
    IDLE          no "Benchmarking" banner seen yet, dataset lines ignored
    IN_BENCHMARK  banner seen, waiting for a "Dataset" line
    IN_DATASET    collecting result rows, ``remaining`` rows still expected

A dataset has no explicit end marker: the window closes after exactly
``dataset_size`` result rows, at which point the record is emitted.
"""
import copy
from typing import Iterable, Iterator, Optional

from bench_parser.consts.LineKind import LineKind
from bench_parser.consts.ReaderState import ReaderState
from bench_parser.models.benchmark_record import Benchmark, Dataset, Record
from bench_parser.models.parsed_line import ParsedLine
from bench_parser.service.log_parser.line_classifier import capture_name, classify_line, parse_result_row
from bench_parser.util.errors import BenchParseError
from bench_parser.util.log_config import setup_logger

logger = setup_logger(__name__)


class BenchReader:

    def __init__(self, lines: Iterable[str], dataset_size: int):
        if dataset_size < 1:
            raise ValueError(f"dataset_size must be positive, got {dataset_size}")
        self.lines = iter(lines)
        self.dataset_size = dataset_size
        self.cpu = ""
        self.os = ""
        self.version = ""
        self.bench_name = ""
        self.dataset = Dataset()
        self.state = ReaderState.IDLE
        self.remaining = 0
        self.line_no = 0
        self._exhausted = False

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        record = self.next_record()
        if record is None:
            raise StopIteration
        return record

    def next_record(self) -> Optional[Record]:
        if self._exhausted:
            return None

        for line in self.lines:
            self.line_no += 1
            try:
                parsed = classify_line(line, in_result_window=self.state == ReaderState.IN_DATASET)
                record = self._step(parsed)
            except BenchParseError as e:
                raise e.with_context(benchmark=self.bench_name or None,
                                     dataset=self.dataset.name or None)
            if record is not None:
                return record

        self._exhausted = True
        if self.dataset.has_record():
            logger.debug(f"End of input: flushing dataset '{self.dataset.name}' "
                         f"({len(self.dataset.results)} results)")
            record = self._emit()
            self.bench_name = ""
            return record
        return None

    def _step(self, parsed: ParsedLine) -> Optional[Record]:
        """Apply one classified line; return a Record when a group completes."""
        kind = parsed.kind

        if kind == LineKind.SYSTEM_INFO:
            if parsed.cpu is not None:
                self.cpu = parsed.cpu
            if parsed.os is not None:
                self.os = parsed.os
            return None

        if kind == LineKind.VERSION_TAG:
            self.version = parsed.text
            return None

        if kind == LineKind.BANNER:
            record = self._flush_incomplete()
            self.bench_name = parsed.text
            self._transition(ReaderState.IN_BENCHMARK)
            return record

        if kind == LineKind.DATASET_START:
            if self.state == ReaderState.IDLE:
                logger.debug(f"Line {self.line_no}: dataset line before any banner, ignored")
                return None
            name = capture_name(parsed.raw)
            record = self._flush_incomplete()
            self.dataset.name = name
            self.remaining = self.dataset_size
            self._transition(ReaderState.IN_DATASET)
            return record

        if kind == LineKind.RESULT_ROW:
            self.dataset.results.append(parse_result_row(parsed.raw))
            self.remaining -= 1
            if self.remaining == 0:
                record = self._emit()
                self._transition(ReaderState.IN_BENCHMARK)
                return record
            return None

        return None

    def _flush_incomplete(self) -> Optional[Record]:
        """
        Emit a dataset whose result window was interrupted by a new banner
        or dataset line, even one without results. Its short result count is
        reported downstream.
        """
        if self.state != ReaderState.IN_DATASET:
            return None
        if not self.dataset.name:
            return None
        logger.debug(f"Line {self.line_no}: dataset '{self.dataset.name}' interrupted "
                     f"after {len(self.dataset.results)} of {self.dataset_size} results")
        return self._emit()

    def _emit(self) -> Record:
        record = Record(
            cpu=self.cpu,
            os=self.os,
            version=self.version,
            benchmark=Benchmark(name=self.bench_name, datasets=[copy.deepcopy(self.dataset)]),
        )
        logger.debug(f"Emitting record: {self.bench_name} / {self.dataset.name} "
                     f"({len(self.dataset.results)} results)")
        self.dataset.clear()
        self.remaining = 0
        return record

    def _transition(self, state: ReaderState) -> None:
        if state != self.state:
            logger.debug(f"Line {self.line_no}: {self.state.value} -> {state.value}")
        self.state = state
