#!/usr/bin/env python3
"""Generate a synthetic source video for the vidfilter demo.

Creates examples/demo-source.mp4: 3 minutes of a test pattern with a
burnt-in timestamp and a continuous 440 Hz tone, so cuts show up as
jumps in the timestamp and mutes as gaps in the tone.

Usage:
    python examples/generate_demo_source.py
    # Then render:
    vidfilter check examples/demo.filter --graph
    vidfilter render examples/demo-source.mp4 \
        --filter examples/demo.filter --output examples/demo-clean.mp4
"""

import subprocess
from pathlib import Path

import imageio_ffmpeg

OUTPUT = Path(__file__).resolve().parent / "demo-source.mp4"
DURATION = 180
SIZE = "320x240"
FPS = 10


def main():
    ffmpeg = imageio_ffmpeg.get_ffmpeg_exe()
    cmd = [
        ffmpeg, "-y",
        "-f", "lavfi", "-i", f"testsrc=size={SIZE}:rate={FPS}:duration={DURATION}",
        "-f", "lavfi", "-i", f"sine=frequency=440:sample_rate=44100:duration={DURATION}",
        "-shortest",
        "-c:v", "libx264", "-crf", "28", "-pix_fmt", "yuv420p",
        "-c:a", "aac", "-b:a", "64k",
        str(OUTPUT),
    ]
    subprocess.run(cmd, check=True, capture_output=True)
    print(f"Done: {OUTPUT}")


if __name__ == "__main__":
    main()
