from pathlib import Path
from typing import Iterator

from bench_parser.models.benchmark_record import Record
from bench_parser.service.log_parser.bench_reader import BenchReader
from bench_parser.util.errors import BenchParseError, InputError, LogFormatError


class LogParser:
    def __init__(self, log_path: Path, dataset_size: int):
        self.log_path = log_path
        self.dataset_size = dataset_size

    def parse_log(self) -> Iterator[Record]:
        """
        Yield the records of the log file, one per benchmark + dataset group.

        Raises:
            InputError: If the log file is missing or cannot be read
            LogFormatError: If the file is not valid UTF-8 text
            BenchParseError: On malformed lines, with the file path attached
        """
        try:
            with open(self.log_path, 'r', encoding='utf-8') as f:
                reader = BenchReader(f, self.dataset_size)
                yield from reader
        except BenchParseError as e:
            raise e.with_context(path=self.log_path)
        except UnicodeDecodeError as e:
            raise LogFormatError(f"Log file is not valid UTF-8 text: {e}", path=self.log_path) from e
        except OSError as e:
            raise InputError(f"Failed reading log file: {e}", path=self.log_path) from e
