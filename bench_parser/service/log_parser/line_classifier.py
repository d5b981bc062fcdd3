"""
Line classification for benchmark logs.

Maps a single log line to one of the LineKind variants. Keyword checks are
case-sensitive and evaluated in order; the first match wins.
"""
from typing import Tuple

from bench_parser.consts.LineKind import LineKind
from bench_parser.consts.OsName import OsName
from bench_parser.models.benchmark_record import BenchmarkResult
from bench_parser.models.parsed_line import ParsedLine
from bench_parser.util.errors import LogFormatError

APPLE_M1_CPU = "Apple M1"
MB_AIR_CPU = "Intel Core i5-4260U"
RESULT_FIELD_COUNT = 3


def capture_name(line: str) -> str:
    """Text after the first colon, trimmed."""
    _, sep, tail = line.partition(':')
    if not sep:
        raise LogFormatError(f"Failed capturing name, no ':' in line {line!r}")
    return tail.strip()


def classify_line(line: str, in_result_window: bool = False) -> ParsedLine:
    """
    Classify one log line.

    Args:
        line: Raw line, trailing newline allowed
        in_result_window: True while the reader still expects result rows
            for the current dataset; non-blank lines that match no keyword
            are then RESULT_ROW instead of OTHER

    Raises:
        LogFormatError: When a Model or segul line lacks its expected tokens
    """
    line = line.rstrip('\r\n')

    if line.startswith("Model"):
        return ParsedLine(LineKind.SYSTEM_INFO, line, cpu=capture_name(line), os=OsName.LINUX.value)
    if line.startswith("Darwin"):
        return ParsedLine(LineKind.SYSTEM_INFO, line, cpu=APPLE_M1_CPU, os=OsName.MACOS.value)
    if "Microsoft" in line:
        return ParsedLine(LineKind.SYSTEM_INFO, line, os=OsName.WSL.value)
    if "X86_64" in line:
        return ParsedLine(LineKind.SYSTEM_INFO, line, cpu=MB_AIR_CPU, os=OsName.MACOS_MB_AIR.value)
    if line.startswith("Benchmarking"):
        return ParsedLine(LineKind.BANNER, line, text=line)
    if line.startswith("segul"):
        tokens = line.split()
        if len(tokens) < 2:
            raise LogFormatError(f"Missing version token in line {line!r}")
        return ParsedLine(LineKind.VERSION_TAG, line, text=tokens[1])
    if line.startswith("Dataset"):
        # The name is captured by the reader, which ignores dataset lines before a banner
        return ParsedLine(LineKind.DATASET_START, line)
    if in_result_window and line.strip():
        return ParsedLine(LineKind.RESULT_ROW, line)
    return ParsedLine(LineKind.OTHER, line)


def split_result_row(line: str) -> Tuple[str, str, str]:
    tokens = line.split()
    if len(tokens) != RESULT_FIELD_COUNT:
        raise LogFormatError(
            f"Result line must have {RESULT_FIELD_COUNT} whitespace separated fields, "
            f"found {len(tokens)}: {line.strip()!r}"
        )
    return tokens[0], tokens[1], tokens[2]


def parse_result_row(line: str) -> BenchmarkResult:
    """Parse a ``time memory cpu`` line into a BenchmarkResult."""
    exec_time, mem_usage, cpu_usage = split_result_row(line)
    return BenchmarkResult(exec_time=exec_time, mem_usage=mem_usage, cpu_usage=cpu_usage)
