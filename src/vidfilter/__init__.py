"""vidfilter — cut and mute video segments from a hand-written filter file.

A filter file lists timed edits, one per line:

    cut  1:32-1:45                  # drop the intro
    mute 2:19.2-2:19.85 (profanity:f-word)

The edits are compiled into a single ffmpeg filter_complex expression
and applied to the source video.
"""

from .errors import FilterError
from .filterfile import compile_filter, parse_filter

__all__ = ["FilterError", "compile_filter", "parse_filter"]
