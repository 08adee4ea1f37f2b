"""Regex tokenizer for -debug-time-function-bodies output.

Each useful line looks like (fields separated by one or more tabs):

    <duration>ms    <path>:<line>:<column>    <signature>

Xcode log sections end these lines with a bare '\\r'; '\\r\\n' and '\\n'
are accepted too.
"""

import re
from typing import NamedTuple

# Emitted by the compiler when a function body has no source position.
# Some toolchains separate the two words with a tab instead of a space.
INVALID_LOCATION = "<invalid loc>"

# Matched against one line at a time, without its terminator.
FUNCTION_TIME_PATTERN = re.compile(
    r"[ \t]*(?P<duration>[0-9.]+)ms"
    r"\t+(?P<location><invalid[ \t]loc>|[^\t\r\n]+)"
    r"\t+(?P<signature>[^\r\n]+)"
)


class RawEntry(NamedTuple):
    duration: str
    location: str
    signature: str


def is_invalid_location(location: str) -> bool:
    return location.replace("\t", " ") == INVALID_LOCATION


def extract_entries(text: str) -> list[RawEntry]:
    """Return the (duration, location, signature) tokens found in text, top to bottom.

    Lines that do not match are skipped and entries without a source
    position are dropped, so this never fails on any input.
    """
    if not text:
        return []
    entries = []
    for line in text.splitlines():
        m = FUNCTION_TIME_PATTERN.fullmatch(line)
        if not m:
            continue
        location = m.group("location")
        if is_invalid_location(location):
            continue
        entries.append(RawEntry(m.group("duration"), location, m.group("signature")))
    return entries
