"""
Record emitter.

Drives the log state machine over every input file, enriches each record
with application and publication metadata, and writes one CSV row per
benchmark result.
"""
import csv
from pathlib import Path
from typing import Iterable, List, Optional

from bench_parser.models.benchmark_record import BenchmarkResult, Dataset, Record
from bench_parser.models.metadata_info import AppInfo, PublicationInfo
from bench_parser.service.emitter.csv_columns import COLUMNS, LATEST_BENCH
from bench_parser.service.emitter.emit_summary import EmitSummary, FileFailure
from bench_parser.service.log_parser.log_parser import LogParser
from bench_parser.service.metadata.metadata_tables import MetadataTables, load_metadata
from bench_parser.util.errors import BenchParseError, DatasetSizeError
from bench_parser.util.field_utils import (
    analysis_code,
    analysis_label,
    extract_date,
    kb_to_mb,
    platform_label,
    strip_percent,
    time_to_seconds,
)
from bench_parser.util.log_config import setup_logger

logger = setup_logger(__name__)

# Analysis codes whose inputs are raw reads rather than alignments
READ_ANALYSES = {"raw"}


class RecordEmitter:

    def __init__(self, dataset_size: int, metadata: Optional[MetadataTables] = None,
                 fallback_datatype: Optional[str] = None, keep_going: bool = False):
        self.dataset_size = dataset_size
        self.metadata = metadata or load_metadata()
        self.fallback_datatype = fallback_datatype
        self.keep_going = keep_going

    def fallback_for(self, code: str) -> str:
        if self.fallback_datatype:
            return self.fallback_datatype
        key = "whole_genome" if code.split('-', 1)[0] in READ_ANALYSES else "unknown"
        return self.metadata.fallback_datatype(key)

    def rows_for_file(self, path: Path) -> List[list]:
        """
        Parse one log file and build its CSV rows.

        Args:
            path: Benchmark log; its stem carries the analysis code (text
                before the first '_') and optionally a YYYY-MM-DD date

        Returns:
            Rows in record order, then result order

        Raises:
            BenchParseError: On any format, field or dataset size violation
        """
        code = analysis_code(path.stem)
        analysis = analysis_label(code)
        date = extract_date(path.stem)
        fallback = self.fallback_for(code)

        rows = []
        for record in LogParser(path, self.dataset_size).parse_log():
            for dataset in record.benchmark.datasets:
                self.check_dataset(path, record, dataset)
                app = self.metadata.resolve_app(record.benchmark.name, record.version)
                pub = self.metadata.resolve_publication(dataset.name, fallback)
                try:
                    rows.extend(self.build_row(record, app, pub, result, analysis, date)
                                for result in dataset.results)
                except BenchParseError as e:
                    raise e.with_context(path=path, benchmark=record.benchmark.name, dataset=dataset.name)
        return rows

    def check_dataset(self, path: Path, record: Record, dataset: Dataset) -> None:
        if len(dataset.results) != self.dataset_size:
            raise DatasetSizeError(
                expected=self.dataset_size,
                actual=len(dataset.results),
                path=path,
                benchmark=record.benchmark.name,
                dataset=dataset.name,
            )

    def build_row(self, record: Record, app: AppInfo, pub: PublicationInfo, result: BenchmarkResult,
                  analysis: str, date: str) -> list:
        return [
            app.name,
            app.version,
            pub.name,
            pub.dataset_label,
            pub.ntax,
            pub.character_count,
            pub.alignment_count,
            pub.site_count,
            pub.datatype,
            analysis,
            platform_label(record.cpu, app.is_gui),
            record.os,
            record.cpu,
            date,
            LATEST_BENCH,
            result.exec_time,
            result.mem_usage,
            strip_percent(result.cpu_usage),
            time_to_seconds(result.exec_time),
            kb_to_mb(result.mem_usage),
        ]

    def emit(self, paths: Iterable[Path], output: Path) -> EmitSummary:
        """
        Write the CSV for all input files.

        Rows are written in file order, then record order, then result order.
        A file's rows are only written once the whole file parsed.

        Raises:
            BenchParseError: On the first failing file, unless keep_going is set
        """
        summary = EmitSummary(output=output)
        with open(output, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(COLUMNS)
            for path in paths:
                try:
                    rows = self.rows_for_file(path)
                except BenchParseError as e:
                    if not self.keep_going:
                        raise
                    logger.error(f"✗ Skipping {path}: {e}")
                    summary.failures.append(FileFailure(path=path, error=str(e)))
                    continue
                writer.writerows(rows)
                summary.files_parsed += 1
                summary.rows_written += len(rows)
                logger.info(f"✓ Parsed {path}: {len(rows)} rows")
        return summary
