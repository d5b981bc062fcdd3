#!/usr/bin/env python3
"""
Command-line interface of the benchmark log parser.
"""
import argparse
from pathlib import Path
from typing import List, Optional

from bench_parser.config.config_loader import ConfigLoader
from bench_parser.config.parser_config import ParserConfig


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="segul-bench-parser",
        description="Convert SEGUL benchmark logs into a CSV dataset (one row per profiled run)",
    )
    ap.add_argument("-i", "--input", nargs="+", default=None,
                    help="Input log files or glob patterns (required unless set in --config)")
    ap.add_argument("-o", "--output", type=str, default=None,
                    help="Output path; the extension is forced to .csv (default: result)")
    ap.add_argument("-s", "--size", type=int, default=None,
                    help="Expected number of results per dataset (default: 5)")
    ap.add_argument("-c", "--config", type=Path, default=None,
                    help="YAML config file with parser settings")
    ap.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'dev', 'prod'). "
            "Loads <config>_<env>.yaml in addition to the base config."
        ),
    )
    ap.add_argument("--summary", action="store_true", default=None,
                    help="Also write <output>_summary.csv with per-group statistics")
    ap.add_argument("--keep-going", action="store_true", default=None,
                    help="Log and skip files that fail to parse instead of aborting")
    ap.add_argument("--log-file", type=Path, default=None,
                    help="Append detailed logs to this file")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Enable debug logging")
    return ap


def build_config(args: argparse.Namespace) -> ParserConfig:
    """
    Merge defaults, the optional YAML config and CLI arguments.

    Args:
        args: Parsed command line

    Returns:
        ParserConfig: settings with CLI values taking precedence
    """
    if args.config is not None:
        config = ConfigLoader(args.config, env=args.env).config_data
    else:
        config = ParserConfig()

    if args.input is not None:
        config.inputs = list(args.input)
    if args.output is not None:
        config.output = args.output
    if args.size is not None:
        config.dataset_size = args.size
    if args.summary is not None:
        config.summary = args.summary
    if args.keep_going is not None:
        config.keep_going = args.keep_going
    return config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.input is None and args.config is None:
        ap.error("the following arguments are required: -i/--input")
    if args.size is not None and args.size < 1:
        ap.error("-s/--size must be a positive integer")
    return args
