"""Subcommand dispatcher for vidfilter.

Usage:
    vidfilter render source.mp4 --filter edits.filter --output clean.mp4
    vidfilter render --manifest jobs.yaml
    vidfilter check  edits.filter --graph
"""

import argparse
import sys


def main(args=None):
    parser = argparse.ArgumentParser(
        prog="vidfilter",
        description="Cut and mute video segments from a hand-written filter file.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands. Each delegates to its own module's main().
    subparsers.add_parser("render", help="Apply a filter file to a video with ffmpeg")
    subparsers.add_parser("check", help="Validate a filter file without rendering")

    # Parse only the subcommand name, pass the rest to the subcommand's parser.
    parsed, remaining = parser.parse_known_args(args)

    if parsed.command is None:
        parser.print_help()
        sys.exit(1)

    if parsed.command == "render":
        from .render_cli import main as render_main
        render_main(remaining)
    elif parsed.command == "check":
        from .check_cli import main as check_main
        check_main(remaining)


if __name__ == "__main__":
    main()
