"""Function compile time record: one entry of -debug-time-function-bodies output."""

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any


@dataclass(frozen=True)
class FunctionTime:
    file: str  # normalized file identifier, see location.normalize_file
    duration_ms: float
    starting_line: int
    starting_column: int
    signature: str

    @property
    def file_url(self) -> str:
        """The file as a file:// URL, the form Xcode uses for document URLs."""
        path = PurePosixPath(self.file)
        if not path.is_absolute():
            return self.file
        return path.as_uri()


def function_time_to_dict(entry: FunctionTime) -> dict[str, Any]:
    """Map a FunctionTime to the field names downstream report consumers expect."""
    return {
        "file": entry.file,
        "durationMS": entry.duration_ms,
        "startingLine": entry.starting_line,
        "startingColumn": entry.starting_column,
        "signature": entry.signature,
    }
