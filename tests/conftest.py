"""Shared pytest fixtures for the function-times test suite."""

from __future__ import annotations

import pytest

from function_times.parser import FunctionTimesParser


def function_line(duration: str, location: str, signature: str, end: str = "\r\n") -> str:
    """One line of -debug-time-function-bodies output, as Xcode logs it."""
    return f"\t{duration}ms\t{location}\t{signature}{end}"


@pytest.fixture()
def file_a_text() -> str:
    """Three entries for /src/A.swift."""
    return "".join([
        function_line("1.10", "/src/A.swift:1:1", "first()"),
        function_line("2.20", "/src/A.swift:10:5", "second()"),
        function_line("3.30", "/src/A.swift:20:5", "third()"),
    ])


@pytest.fixture()
def file_b_text() -> str:
    """One entry for /src/B.swift."""
    return function_line("4.40", "/src/B.swift:7:3", "only()")


@pytest.fixture()
def parser() -> FunctionTimesParser:
    return FunctionTimesParser()
