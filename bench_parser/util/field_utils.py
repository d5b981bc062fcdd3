"""
Field derivation helpers.

Pure functions converting raw log tokens (time strings, memory in kilobytes,
CPU model strings, file name stems) into the normalized CSV values.
"""
import re

from bench_parser.consts.Platform import Platform
from bench_parser.util.errors import FieldFormatError

DATE_PATTERN = re.compile(r'(?P<y>\d{4})-(?P<m>\d{2})-(?P<d>\d{2})')
# Mobile CPUs, e.g. "i5-4260U"
LAPTOP_CPU_PATTERN = re.compile(r'i\d-\d{4}U')
# Plain decimals only: no sign, exponent, nan or inf
DECIMAL_PATTERN = re.compile(r'\d+(\.\d*)?|\.\d+', re.ASCII)

ANALYSIS_NAMES = {
    "concat": "Alignment Concatenation",
    "convert": "Alignment Conversion",
    "summary": "Alignment Summary",
    "remove": "Sequence Removal",
    "split": "Alignment Splitting",
    "raw": "Read Summary",
}
DEFAULT_FORMAT = "NEXUS"


def time_to_seconds(text: str) -> float:
    """
    Convert an elapsed time token to seconds.

    Accepts ``s``, ``m:s`` and ``h:m:s`` where every part is a decimal number,
    e.g. "59", "01:30.00", "1:02:03.5".

    Raises:
        FieldFormatError: On any other shape or a non-numeric part.
    """
    parts = text.strip().split(':')
    if len(parts) > 3:
        raise FieldFormatError(f"Failed parsing time {text!r}: too many ':' separated parts")
    if not all(DECIMAL_PATTERN.fullmatch(part) for part in parts):
        raise FieldFormatError(f"Failed parsing time {text!r}: non-numeric part")
    values = [float(part) for part in parts]

    seconds = 0.0
    for value in values:
        seconds = seconds * 60 + value
    return seconds


def kb_to_mb(text: str) -> float:
    if not DECIMAL_PATTERN.fullmatch(text.strip()):
        raise FieldFormatError(f"Failed parsing memory usage {text!r} as kilobytes")
    return float(text) / 1024


def strip_percent(text: str) -> str:
    return text.replace('%', '')


def classify_platform(cpu_text: str) -> str:
    """Laptop for mobile CPU models (``iN-NNNNU``), Desktop otherwise."""
    if LAPTOP_CPU_PATTERN.search(cpu_text):
        return Platform.LAPTOP.value
    return Platform.DESKTOP.value


def platform_label(cpu_text: str, is_gui: bool = False) -> str:
    """Hardware class, wrapped as ``GUI (<class>)`` for GUI runs."""
    platform = classify_platform(cpu_text)
    if is_gui:
        return f"GUI ({platform})"
    return platform


def extract_date(file_stem: str) -> str:
    """Reformat the first ``YYYY-MM-DD`` in the stem as ``MM/DD/YYYY``."""
    match = DATE_PATTERN.search(file_stem)
    if match is None:
        return file_stem
    return f"{match['m']}/{match['d']}/{match['y']}"


def analysis_code(file_stem: str) -> str:
    return file_stem.split('_', 1)[0]


def analysis_label(code: str) -> str:
    """
    Human readable analysis name for a file name code.

    "remove" -> "Sequence Removal (NEXUS)",
    "convert-fasta" -> "Alignment Conversion (FASTA)".
    Unknown codes pass through with the format suffix.
    """
    name, sep, fmt = code.partition('-')
    label = ANALYSIS_NAMES.get(name, name)
    fmt = fmt.upper() if sep and fmt else DEFAULT_FORMAT
    return f"{label} ({fmt})"
