import csv

import pytest

from bench_parser.service.emitter.csv_columns import COLUMNS
from bench_parser.service.emitter.record_emitter import RecordEmitter
from bench_parser.service.metadata.metadata_tables import MetadataTables, load_metadata
from bench_parser.util.errors import DatasetSizeError, InputError, LogFormatError

from log_builder import build_log


def read_csv(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


def test_rows_for_file(write_log):
    path = write_log(
        "concat_bench_raw_aa_OpenSUSE_2022-10-04.txt",
        build_log(("Benchmarking SEGUL concat", [("esselstyn", 5)])),
    )
    rows = RecordEmitter(dataset_size=5).rows_for_file(path)
    assert len(rows) == 5
    row = dict(zip(COLUMNS, rows[0]))
    assert row["Apps"] == "SEGUL"
    assert row["Version"] == "v0.18.1"
    assert row["Pubs"] == "Esselstyn et al. 2021"
    assert row["Datasets"] == "Esselstyn et al. 2021 (DNA)"
    assert row["NTAX"] == 102
    assert row["Alignment_counts"] == 4040
    assert row["Site_counts"] == 5398947
    assert row["Datatype"] == "DNA"
    assert row["Analyses"] == "Alignment Concatenation (NEXUS)"
    assert row["Platform"] == "Desktop"
    assert row["OS_name"] == "Linux"
    assert row["CPU"] == "AMD Ryzen 9 5950X 16-Core Processor"
    assert row["Benchmark_dates"] == "10/04/2022"
    assert row["Latest_bench"] == "TRUE"
    assert row["Execution_time"] == "0:01.50"
    assert row["RAM_usage_kb"] == "2048"
    assert row["Percent_CPU_usage"] == "99"
    assert row["Execution_time_secs"] == pytest.approx(1.5)
    assert row["RAM_usage_Mb"] == pytest.approx(2.0)


def test_row_count_matches_result_lines(write_log):
    path = write_log(
        "summary_bench_2023-01-15.txt",
        build_log(
            ("Benchmarking SEGUL summary", [("esselstyn", 5), ("jarvis", 5)]),
            ("Benchmarking AMAS summary", [("esselstyn", 5), ("jarvis", 5), ("shen", 5)]),
        ),
    )
    assert len(RecordEmitter(dataset_size=5).rows_for_file(path)) == 25


def test_short_dataset_is_fatal_and_named(write_log):
    path = write_log("concat_bench.txt", build_log(("Benchmarking SEGUL concat", [("esselstyn", 5), ("jarvis", 4)])))
    with pytest.raises(DatasetSizeError) as excinfo:
        RecordEmitter(dataset_size=5).rows_for_file(path)
    error = excinfo.value
    assert error.dataset == "jarvis"
    assert error.benchmark == "Benchmarking SEGUL concat"
    assert error.path == path
    assert (error.expected, error.actual) == (5, 4)
    assert "jarvis" in str(error)


def test_malformed_line_carries_file(write_log):
    content = "Benchmarking SEGUL concat\nDataset: jarvis\n0:01.00 2048\n"
    path = write_log("concat_bench.txt", content)
    with pytest.raises(LogFormatError) as excinfo:
        RecordEmitter(dataset_size=5).rows_for_file(path)
    assert excinfo.value.path == path


def test_gui_platform_and_unknown_publication(write_log):
    content = (
        "Darwin MacBook-Pro.local 21.6.0\n"
        "segul 0.19.0\n"
        "Benchmarking SEGUL GUI convert\n"
        "Dataset: my_loci\n"
        "0:02.00 1024 100%\n"
    )
    path = write_log("convert-fasta_bench_2023-02-01.txt", content)
    [row] = RecordEmitter(dataset_size=1).rows_for_file(path)
    row = dict(zip(COLUMNS, row))
    assert row["Apps"] == "SEGUL (GUI)"
    assert row["Version"] == "v0.19.0"
    assert row["Platform"] == "GUI (Desktop)"
    assert row["OS_name"] == "macOS"
    assert row["Pubs"] == "my_loci"
    assert row["Datatype"] == "UNKNOWN"
    assert row["NTAX"] == 0
    assert row["Analyses"] == "Alignment Conversion (FASTA)"


def test_read_summary_uses_whole_genome_fallback(write_log):
    content = "Benchmarking SEGUL raw\nDataset: sample_reads\n1:02:03.5 4096 250%\n"
    path = write_log("raw_bench_2023-03-01.txt", content)
    [row] = RecordEmitter(dataset_size=1).rows_for_file(path)
    row = dict(zip(COLUMNS, row))
    assert row["Datatype"] == "Whole Genome"
    assert row["Analyses"] == "Read Summary (NEXUS)"
    assert row["Execution_time_secs"] == pytest.approx(3723.5)


def test_configured_fallback_overrides(write_log):
    content = "Benchmarking SEGUL raw\nDataset: sample_reads\n0:03.00 4096 250%\n"
    path = write_log("raw_bench.txt", content)
    [row] = RecordEmitter(dataset_size=1, fallback_datatype="N/A").rows_for_file(path)
    assert dict(zip(COLUMNS, row))["Datatype"] == "N/A"


def test_emit_writes_header_and_rows_in_file_order(write_log, tmp_path):
    first = write_log("concat_bench_2022-10-04.txt", build_log(("Benchmarking SEGUL concat", [("esselstyn", 2)])))
    second = write_log("split_bench_2022-10-05.txt", build_log(("Benchmarking AMAS split", [("jarvis", 2)])))
    output = tmp_path / "out.csv"
    summary = RecordEmitter(dataset_size=2).emit([first, second], output)

    rows = read_csv(output)
    assert rows[0] == COLUMNS
    assert [r[0] for r in rows[1:]] == ["SEGUL", "SEGUL", "AMAS", "AMAS"]
    assert [r[13] for r in rows[1:]] == ["10/04/2022", "10/04/2022", "10/05/2022", "10/05/2022"]
    assert summary.rows_written == 4
    assert summary.files_parsed == 2
    assert summary.ok


def test_emit_strict_mode_aborts(write_log, tmp_path):
    bad = write_log("concat_bad.txt", build_log(("Benchmarking SEGUL concat", [("esselstyn", 1)])))
    with pytest.raises(DatasetSizeError):
        RecordEmitter(dataset_size=2).emit([bad], tmp_path / "out.csv")


def test_emit_keep_going_skips_failed_file(write_log, tmp_path):
    bad = write_log("concat_bad.txt", build_log(("Benchmarking SEGUL concat", [("esselstyn", 1)])))
    good = write_log("concat_good.txt", build_log(("Benchmarking SEGUL concat", [("jarvis", 2)])))
    output = tmp_path / "out.csv"
    summary = RecordEmitter(dataset_size=2, keep_going=True).emit([bad, good], output)

    assert not summary.ok
    assert [f.path for f in summary.failures] == [bad]
    assert summary.rows_written == 2
    assert len(read_csv(output)) == 3


def test_dataset_without_results_is_fatal_and_named(write_log):
    content = "Benchmarking SEGUL concat\nDataset: esselstyn\nDataset: jarvis\n0:01.00 2048 99%\n0:02.00 2048 99%\n"
    path = write_log("concat_bench.txt", content)
    with pytest.raises(DatasetSizeError) as excinfo:
        RecordEmitter(dataset_size=2).rows_for_file(path)
    assert excinfo.value.dataset == "esselstyn"
    assert excinfo.value.actual == 0


def test_non_utf8_file_is_a_format_error(tmp_path):
    path = tmp_path / "concat_bench.txt"
    path.write_bytes(b"Benchmarking SEGUL concat\nDataset: jarvis\n0:01.00 \xff 99%\n")
    with pytest.raises(LogFormatError) as excinfo:
        RecordEmitter(dataset_size=1).rows_for_file(path)
    assert excinfo.value.path == path


def test_missing_file_is_an_input_error(tmp_path):
    path = tmp_path / "concat_gone.txt"
    with pytest.raises(InputError) as excinfo:
        RecordEmitter(dataset_size=1).rows_for_file(path)
    assert excinfo.value.path == path


def test_metadata_resolved_once_per_dataset(write_log):
    calls = []

    class CountingTables(MetadataTables):
        def resolve_app(self, banner, version):
            calls.append(("app", banner))
            return super().resolve_app(banner, version)

        def resolve_publication(self, dataset_name, fallback_datatype="UNKNOWN"):
            calls.append(("pub", dataset_name))
            return super().resolve_publication(dataset_name, fallback_datatype)

    default = load_metadata()
    tables = CountingTables(default.publications, default.apps, default.fallback_datatypes)
    path = write_log("concat_bench.txt", build_log(("Benchmarking SEGUL concat", [("esselstyn", 5), ("jarvis", 5)])))
    rows = RecordEmitter(dataset_size=5, metadata=tables).rows_for_file(path)

    assert len(rows) == 10
    assert calls == [
        ("app", "Benchmarking SEGUL concat"),
        ("pub", "esselstyn"),
        ("app", "Benchmarking SEGUL concat"),
        ("pub", "jarvis"),
    ]
