from dataclasses import dataclass
from typing import Optional

from bench_parser.consts.LineKind import LineKind


@dataclass(frozen=True)
class ParsedLine:
    """
    A classified log line.

    Only the fields relevant to ``kind`` are set: ``cpu``/``os`` for system
    info (either may be None when the line does not change it), ``text`` for
    banners, version tags and dataset names.
    """
    kind: LineKind
    raw: str
    text: Optional[str] = None
    cpu: Optional[str] = None
    os: Optional[str] = None
