"""Glob expansion and whole-file reading of raw function-times payloads."""

import glob
import os
from typing import Generator


def expand_paths(raw_paths: list[str]) -> list[str]:
    """Expand globs, deduplicate, and validate that files exist.

    Raises FileNotFoundError if a non-glob path doesn't exist.
    Raises FileNotFoundError if expansion produces zero files.
    """
    expanded = []
    seen = set()

    for raw in raw_paths:
        if any(c in raw for c in ("*", "?", "[")):
            for m in sorted(glob.glob(raw)):
                if m not in seen and os.path.isfile(m):
                    seen.add(m)
                    expanded.append(m)
        else:
            if not os.path.isfile(raw):
                raise FileNotFoundError(f"File not found: {raw}")
            if raw not in seen:
                seen.add(raw)
                expanded.append(raw)

    if not expanded:
        raise FileNotFoundError("No files found matching the given paths")

    return expanded


def read_payloads(paths: list[str]) -> Generator[tuple[str, str], None, None]:
    """Yield (text, filepath) per file. Line endings are kept as written."""
    for path in paths:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            yield f.read(), path
