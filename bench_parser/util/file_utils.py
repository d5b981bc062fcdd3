import glob
from pathlib import Path
from typing import Iterable, List

from bench_parser.util.errors import InputError

CSV_SUFFIX = ".csv"


def resolve_inputs(patterns: Iterable[str]) -> List[Path]:
    """
    Expand input paths and glob patterns into a list of files.

    Plain paths are kept in the given order; glob matches are sorted so runs
    are reproducible.

    Raises:
        InputError: If no input is given or a pattern matches nothing
    """
    files: List[Path] = []
    for pattern in patterns:
        if glob.has_magic(pattern):
            matches = sorted(glob.glob(pattern))
            if not matches:
                raise InputError(f"No files match input pattern: {pattern}")
            files.extend(Path(m) for m in matches)
        else:
            path = Path(pattern)
            if not path.is_file():
                raise InputError(f"Input file not found: {pattern}")
            files.append(path)

    if not files:
        raise InputError("No input provided")
    return files


def prepare_output(output: str) -> Path:
    """Force the .csv extension and create parent directories."""
    path = Path(output).with_suffix(CSV_SUFFIX)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def summary_path(output: Path) -> Path:
    return output.with_name(f"{output.stem}_summary{CSV_SUFFIX}")
