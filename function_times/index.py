"""Per-file index of function compile times."""

from typing import Iterable

from function_times.location import normalize_file
from function_times.models import FunctionTime


class FileIndex:
    def __init__(self):
        # None until build() runs; {file: [FunctionTime, ...]} in extraction order
        self._data: dict[str, list[FunctionTime]] | None = None

    def build(self, records: Iterable[FunctionTime]) -> None:
        """Group records by file, keeping extraction order. Replaces any previous build."""
        data: dict[str, list[FunctionTime]] = {}
        for record in records:
            data.setdefault(record.file, []).append(record)
        self._data = data

    @property
    def built(self) -> bool:
        return self._data is not None

    def lookup(self, file: str) -> list[FunctionTime]:
        """Records for a path or file:// URL; empty if unknown or not built yet."""
        if self._data is None:
            return []
        return list(self._data.get(normalize_file(file), []))

    def files(self) -> list[str]:
        """Indexed files in first-seen order."""
        if self._data is None:
            return []
        return list(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        if self._data is None:
            return 0
        return sum(len(records) for records in self._data.values())
