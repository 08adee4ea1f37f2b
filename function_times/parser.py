"""Swift function compile times: ingestion, extraction and per-file lookup.

Usage from a build-log decoder:

    parser = FunctionTimesParser()
    for step in steps:
        parser.observe_step(step.command_detail, step.text)
    parser.finalize()
    parser.lookup("/path/to/File.swift")

Nothing here raises on malformed compiler output; bad lines and
entries are dropped.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import chain

from function_times.cache import DedupCache
from function_times.extractor import extract_entries
from function_times.index import FileIndex
from function_times.location import decode_location, normalize_file, parse_duration
from function_times.models import FunctionTime

logger = logging.getLogger(__name__)

COMPILER_FLAG = "-debug-time-function-bodies"


def parse_function_times(text: str) -> list[FunctionTime]:
    """Extract and decode every usable entry of a single payload."""
    records = []
    for entry in extract_entries(text):
        decoded = decode_location(entry.location)
        if decoded is None:
            logger.debug("Discarding entry with bad location %r", entry.location)
            continue
        path, line, column = decoded
        records.append(FunctionTime(
            file=normalize_file(path),
            duration_ms=parse_duration(entry.duration),
            starting_line=line,
            starting_column=column,
            signature=entry.signature,
        ))
    return records


class FunctionTimesParser:
    """Collects raw function-times payloads, then indexes them by file."""

    def __init__(self, compiler_flag: str = COMPILER_FLAG, workers: int = 1):
        self._compiler_flag = compiler_flag
        self._workers = max(1, workers)
        self._cache = DedupCache()
        self._index = FileIndex()

    @property
    def cache(self) -> DedupCache:
        return self._cache

    @property
    def index(self) -> FileIndex:
        return self._index

    def observe(self, raw_text: str, instrumented: bool) -> None:
        """Offer one log step's text; only instrumented, unseen payloads are kept."""
        self._cache.observe(raw_text, instrumented)

    def observe_step(self, command_detail: str, raw_text: str) -> None:
        """Offer a step, treating it as instrumented if its command line has the flag."""
        self.observe(raw_text, self._compiler_flag in command_detail)

    def finalize(self) -> None:
        """Extract every cached payload and build the per-file index.

        May be called again after more observe() calls; the index is
        rebuilt from the whole cache each time.
        """
        payloads = self._cache.payloads()
        if self._workers > 1 and len(payloads) > 1:
            with ThreadPoolExecutor(max_workers=self._workers) as pool:
                per_payload = list(pool.map(parse_function_times, payloads))
        else:
            per_payload = [parse_function_times(p) for p in payloads]

        self._index.build(chain.from_iterable(per_payload))
        logger.info(
            "Indexed %d function times across %d files from %d unique payloads",
            len(self._index), len(self._index.files()), len(payloads),
        )

    def lookup(self, file_path: str) -> list[FunctionTime]:
        return self._index.lookup(file_path)

    def has_entries(self) -> bool:
        return not self._index.is_empty()

    def files(self) -> list[str]:
        return self._index.files()
