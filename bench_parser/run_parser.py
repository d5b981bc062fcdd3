#!/usr/bin/env python3
"""
Benchmark log to CSV converter.

Parses every input log with the benchmark state machine, enriches the
records with application and publication metadata, and writes the CSV
dataset (plus an optional summary table).
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bench_parser.cli.cli import build_config, parse_args
from bench_parser.config.parser_config import ParserConfig
from bench_parser.service.emitter.emit_summary import EmitSummary
from bench_parser.service.emitter.record_emitter import RecordEmitter
from bench_parser.service.metadata.metadata_tables import load_metadata
from bench_parser.util.cal_utils import write_summary
from bench_parser.util.errors import BenchParseError
from bench_parser.util.file_utils import prepare_output, resolve_inputs, summary_path
from bench_parser.util.log_config import configure_logging, setup_logger

logger = setup_logger(__name__)


def run(config: ParserConfig) -> EmitSummary:
    """
    Convert the configured inputs into the output CSV.

    Raises:
        BenchParseError: On the first fatal parsing error (strict mode)
    """
    files = resolve_inputs(config.inputs)
    output = prepare_output(config.output)
    metadata = load_metadata(Path(config.metadata_file) if config.metadata_file else None)

    logger.info(f"Parsing {len(files)} file(s), dataset size {config.dataset_size}")
    emitter = RecordEmitter(
        dataset_size=config.dataset_size,
        metadata=metadata,
        fallback_datatype=config.fallback_datatype,
        keep_going=config.keep_going,
    )
    result = emitter.emit(files, output)
    logger.info(f"✓ Wrote {result.rows_written} rows from {result.files_parsed} file(s) to: {output.resolve()}")

    if config.summary:
        summary_file = summary_path(output)
        groups = write_summary(output, summary_file)
        logger.info(f"✓ Summary ({groups} groups) exported to: {summary_file.resolve()}")

    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)
    config = build_config(args)

    logger.info("=" * 60)
    logger.info("Parsing Benchmark Logs")
    logger.info("=" * 60)
    try:
        result = run(config)
    except BenchParseError as e:
        logger.error(f"Failed parsing benchmark: {e}")
        return 1

    if not result.ok:
        for failure in result.failures:
            logger.error(f"  {failure.path}: {failure.error}")
        logger.error(f"{len(result.failures)} file(s) failed to parse")
        return 1
    logger.info("All files parsed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
