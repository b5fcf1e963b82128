"""CLI for rendering — apply a filter file to a video with ffmpeg.

Usage:
    # Single video
    vidfilter render source.mp4 --filter edits.filter --output clean.mp4

    # Batch from YAML manifest
    vidfilter render --manifest jobs.yaml
"""

import argparse
import sys
from pathlib import Path

from .engine import render, render_batch
from .errors import FilterError
from .filterfile import load_filter_file
from .graph import compile_graph, edge_warnings
from .jobs_manifest import load_jobs_manifest, validate_job_paths


def _check_filter(path: str) -> None:
    """Parse one filter file, printing a status line and any warnings.

    Exits with status 1, naming the file, if the filter does not compile.
    """
    try:
        actions = load_filter_file(path)
        compile_graph(actions)
    except FilterError as err:
        print(f"error: {path}: {err}", file=sys.stderr)
        sys.exit(1)
    print(f"  CHECK  {path}  {len(actions)} actions")
    for warning in edge_warnings(actions):
        print(f"  WARN   {warning}")


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Cut and mute segments of a video as described by a filter file.",
    )
    parser.add_argument(
        "source", nargs="?", default=None,
        help="Path to source video (single mode)",
    )
    parser.add_argument(
        "--filter", default=None,
        help="Path to the filter file (single mode)",
    )
    parser.add_argument(
        "--output", default=None,
        help="Output file path (single mode)",
    )
    parser.add_argument(
        "--manifest", default=None,
        help="Path to jobs YAML manifest (batch mode)",
    )
    parser.add_argument(
        "-f", "--force", action="store_true",
        help="Overwrite existing output files",
    )
    parser.add_argument(
        "--quiet", action="store_true",
        help="Hide ffmpeg's console output",
    )
    parsed = parser.parse_args(args)

    is_single = parsed.source is not None or parsed.filter is not None or parsed.output is not None
    is_batch = parsed.manifest is not None

    if is_single and is_batch:
        parser.error(
            "Cannot mix single-video args (source/--filter/--output) "
            "with batch args (--manifest)"
        )

    if is_single:
        if parsed.source is None or parsed.filter is None or parsed.output is None:
            parser.error("Single mode requires a source video, --filter and --output")
        if not Path(parsed.source).exists():
            raise FileNotFoundError(f"Source video not found: {parsed.source}")

        _check_filter(parsed.filter)
        filter_text = Path(parsed.filter).read_text(encoding="utf-8")
        print(f"Rendering {parsed.source} -> {parsed.output}")
        render(
            parsed.source, filter_text, parsed.output,
            overwrite=parsed.force, quiet=parsed.quiet,
        )
        print(f"Done: {parsed.output}")

    elif is_batch:
        config = load_jobs_manifest(parsed.manifest)
        validate_job_paths(config)
        jobs = config["jobs"]
        if parsed.force:
            jobs = [{**job, "force": True} for job in jobs]

        # Every filter must compile before any ffmpeg run starts.
        for job in jobs:
            _check_filter(job["filter"])

        print(f"Batch rendering {len(jobs)} jobs")
        rendered = render_batch(jobs, quiet=parsed.quiet)
        print(f"Done: {rendered} of {len(jobs)} jobs rendered")

    else:
        parser.error("Specify either a single video (source/--filter/--output) or --manifest")


if __name__ == "__main__":
    main()
