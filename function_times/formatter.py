"""Output formatters: tab-separated text and JSON."""

import json
from typing import Callable

from function_times.models import FunctionTime, function_time_to_dict


def format_text(records: list[FunctionTime]) -> str:
    """One line per record: duration, file:line:column, signature."""
    return "\n".join(
        f"{r.duration_ms:.2f}ms\t{r.file}:{r.starting_line}:{r.starting_column}\t{r.signature}"
        for r in records
    )


def format_json(records: list[FunctionTime]) -> str:
    return json.dumps([function_time_to_dict(r) for r in records], indent=2)


def get_formatter(output_format: str = "text") -> Callable[[list[FunctionTime]], str]:
    """Factory that returns the right formatter based on args."""
    if output_format == "json":
        return format_json
    return format_text
