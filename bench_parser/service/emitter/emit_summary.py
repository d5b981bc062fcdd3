import dataclasses
from pathlib import Path
from typing import List


@dataclasses.dataclass
class FileFailure:
    path: Path
    error: str


@dataclasses.dataclass
class EmitSummary:
    output: Path
    files_parsed: int = 0
    rows_written: int = 0
    failures: List[FileFailure] = dataclasses.field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
