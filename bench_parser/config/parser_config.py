"""
Parser configuration data class.

Values come from defaults, then an optional YAML config file, then the
command line, each layer overriding the previous one.
"""

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_OUTPUT = "result"
DEFAULT_DATASET_SIZE = 5


@dataclass
class ParserConfig:

    inputs: List[str] = field(default_factory=list)
    output: str = DEFAULT_OUTPUT
    dataset_size: int = DEFAULT_DATASET_SIZE
    metadata_file: Optional[str] = None
    # None picks per analysis: whole genome for read summaries, unknown otherwise
    fallback_datatype: Optional[str] = None
    summary: bool = False
    keep_going: bool = False
