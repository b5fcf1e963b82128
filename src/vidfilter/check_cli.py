"""CLI for checking a filter file without rendering.

Usage:
    vidfilter check edits.filter
    vidfilter check edits.filter --graph
"""

import argparse
import sys

from .errors import FilterError
from .filterfile import load_filter_file
from .graph import compile_graph, edge_warnings


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Validate a filter file and optionally print its filter graph.",
    )
    parser.add_argument("filter", help="Path to the filter file")
    parser.add_argument(
        "--graph", action="store_true",
        help="Also print the compiled ffmpeg filter_complex expression",
    )
    parsed = parser.parse_args(args)

    try:
        actions = load_filter_file(parsed.filter)
        graph = compile_graph(actions)
    except FilterError as err:
        print(f"error: {parsed.filter}: {err}", file=sys.stderr)
        sys.exit(1)

    print(f"Filter valid: {len(actions)} actions")
    for act in actions:
        print(f"  line {act.line}: {act}")
    for warning in edge_warnings(actions):
        print(f"  WARN   {warning}")
    if parsed.graph:
        print(graph)


if __name__ == "__main__":
    main()
