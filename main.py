"""function-times: index Swift -debug-time-function-bodies output by source file."""

import logging
import sys
from argparse import ArgumentParser

from function_times.config import load_config, load_yaml_config
from function_times.formatter import get_formatter
from function_times.parser import FunctionTimesParser
from function_times.reader import expand_paths, read_payloads

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="function-times",
        description="Index Swift function body compile times by source file.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="Raw compiler output file(s) or glob pattern(s)",
    )
    parser.add_argument(
        "--file",
        dest="lookups",
        action="append",
        default=[],
        help="Only show functions of this source path or file:// URL (repeatable)",
    )
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--config",
        help="Optional YAML config file",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Threads used to extract unique payloads (default: 1)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    return parser


def run(args) -> int:
    """Feed every input file to the parser and print the indexed records."""
    config = load_config(args, load_yaml_config(args.config))
    logging.getLogger().setLevel(config.log_level)

    try:
        paths = expand_paths(args.files)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser = FunctionTimesParser(workers=config.workers)
    for text, path in read_payloads(paths):
        logger.debug("Observing %s", path)
        parser.observe(text, True)
    parser.finalize()

    files = args.lookups or parser.files()
    records = [r for f in files for r in parser.lookup(f)]

    formatter = get_formatter(config.output)
    output = formatter(records)
    if output:
        print(output)
    return 0


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [FUNCTION-TIMES] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
