"""ffmpeg invocation — applies a compiled filter graph to a video."""

import subprocess
from pathlib import Path

import imageio_ffmpeg

from .filterfile import compile_filter
from .graph import OUT_AUDIO, OUT_VIDEO

_FFMPEG = imageio_ffmpeg.get_ffmpeg_exe()

# Input 1 of the graph: silent audio used under mute actions.
SILENT_SOURCE = "anullsrc"


def build_ffmpeg_args(
    source: str,
    graph: str,
    output: str,
    overwrite: bool = False,
) -> list[str]:
    """Build the ffmpeg argument list (without the executable).

    Input order matters: the graph refers to the source as input 0 and
    the silent source as input 1.
    """
    return [
        "-y" if overwrite else "-n",
        "-i", source,
        "-f", "lavfi",
        "-i", SILENT_SOURCE,
        "-filter_complex", graph,
        "-map", f"[{OUT_VIDEO}]",
        "-map", f"[{OUT_AUDIO}]",
        output,
    ]


def render(
    source: str,
    filter_text: str,
    output: str,
    overwrite: bool = False,
    quiet: bool = False,
) -> str:
    """Compile a filter file and run ffmpeg over the source video.

    ffmpeg is only started once the whole graph has compiled.

    Args:
        source: Path to source video.
        filter_text: Filter-file contents.
        output: Output file path (parent dirs are created).
        overwrite: Pass -y to ffmpeg instead of -n.
        quiet: Capture ffmpeg's console output instead of passing it through.

    Returns:
        The compiled filter_complex expression.

    Raises:
        FilterError: The filter file did not compile.
        subprocess.CalledProcessError: ffmpeg exited non-zero.
    """
    graph = compile_filter(filter_text)

    Path(output).parent.mkdir(parents=True, exist_ok=True)
    cmd = [_FFMPEG, *build_ffmpeg_args(source, graph, output, overwrite=overwrite)]
    subprocess.run(cmd, check=True, capture_output=quiet)
    return graph


def render_batch(jobs: list[dict], quiet: bool = False) -> int:
    """Render each job of a loaded jobs manifest.

    Jobs whose output already exists are skipped unless their 'force'
    flag is set.

    Returns:
        Number of jobs rendered.
    """
    rendered = 0
    for job in jobs:
        out_path = Path(job["output"])
        if out_path.exists() and not job["force"]:
            print(f"  SKIP   {out_path} (exists, use --force to overwrite)")
            continue

        print(f"  RENDER {job['source']} -> {out_path}")
        filter_text = Path(job["filter"]).read_text(encoding="utf-8")
        render(job["source"], filter_text, str(out_path), overwrite=True, quiet=quiet)
        rendered += 1
    return rendered
