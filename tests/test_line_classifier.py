import pytest

from bench_parser.consts.LineKind import LineKind
from bench_parser.service.log_parser.line_classifier import capture_name, classify_line, parse_result_row
from bench_parser.util.errors import LogFormatError


def test_model_line_sets_cpu_and_linux():
    parsed = classify_line("Model name:   Intel(R) Core(TM) i7-8700K CPU @ 3.70GHz\n")
    assert parsed.kind == LineKind.SYSTEM_INFO
    assert parsed.cpu == "Intel(R) Core(TM) i7-8700K CPU @ 3.70GHz"
    assert parsed.os == "Linux"


def test_darwin_line_is_apple_m1():
    parsed = classify_line("Darwin MacBook-Pro.local 21.6.0 Darwin Kernel Version 21.6.0")
    assert (parsed.cpu, parsed.os) == ("Apple M1", "macOS")


def test_microsoft_line_only_sets_os():
    parsed = classify_line("Linux DESKTOP 4.4.0-19041-Microsoft #1237-Microsoft")
    assert parsed.kind == LineKind.SYSTEM_INFO
    assert parsed.cpu is None
    assert parsed.os == "Windows (WSL)"


def test_x86_64_line_is_macbook_air():
    parsed = classify_line("root:xnu-8020.141.5~2/RELEASE_X86_64 x86_64")
    assert (parsed.cpu, parsed.os) == ("Intel Core i5-4260U", "macOS (Mb Air)")


def test_first_matching_rule_wins():
    # Starts with Darwin and contains X86_64: the Darwin rule comes first
    parsed = classify_line("Darwin host 21.6.0 RELEASE_X86_64 x86_64")
    assert parsed.os == "macOS"


def test_banner_keeps_full_line():
    parsed = classify_line("Benchmarking SEGUL concat ignore datatype\n")
    assert parsed.kind == LineKind.BANNER
    assert parsed.text == "Benchmarking SEGUL concat ignore datatype"


def test_version_tag():
    parsed = classify_line("segul 0.18.1")
    assert parsed.kind == LineKind.VERSION_TAG
    assert parsed.text == "0.18.1"


def test_version_tag_without_version_is_fatal():
    with pytest.raises(LogFormatError):
        classify_line("segul")


def test_dataset_start():
    parsed = classify_line("Dataset:  esselstyn_2021_nexus  ")
    assert parsed.kind == LineKind.DATASET_START
    assert capture_name(parsed.raw) == "esselstyn_2021_nexus"


def test_dataset_without_colon_is_classified():
    assert classify_line("Dataset esselstyn").kind == LineKind.DATASET_START


def test_capture_name_requires_colon():
    with pytest.raises(LogFormatError):
        capture_name("Dataset esselstyn")


def test_result_row_only_inside_window():
    line = "0:42.10 1048576 387%"
    assert classify_line(line).kind == LineKind.OTHER
    assert classify_line(line, in_result_window=True).kind == LineKind.RESULT_ROW


def test_blank_line_is_never_a_result():
    assert classify_line("   \n", in_result_window=True).kind == LineKind.OTHER


def test_keyword_wins_over_result_window():
    parsed = classify_line("Dataset: jarvis", in_result_window=True)
    assert parsed.kind == LineKind.DATASET_START


def test_parse_result_row():
    result = parse_result_row("0:42.10   1048576\t387%")
    assert (result.exec_time, result.mem_usage, result.cpu_usage) == ("0:42.10", "1048576", "387%")


@pytest.mark.parametrize("line", ["0:42.10 1048576", "0:42.10 1048576 387% extra"])
def test_parse_result_row_requires_three_fields(line):
    with pytest.raises(LogFormatError):
        parse_result_row(line)
