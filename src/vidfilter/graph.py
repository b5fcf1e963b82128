"""Graph compiler — turns validated actions into an ffmpeg filter_complex.

The expression works on two inputs, in this order:
  0: the source media (video `0:v`, audio `0:a`)
  1: an `anullsrc` silent audio source (`1:a`)

Segments are labelled `video<N>` / `audio<N>`. The compiler keeps one
running "accumulated" segment; every newly trimmed segment is concatenated
onto it, producing the next label. The last concat writes the terminal
labels `outv` / `outa`.

Per action:
  cut   Nothing is trimmed for [start, end). The original media between
        the previous action and this one is appended ("before"), and the
        media up to the next action is appended when that action is not
        itself a cut ("after"). Adjacent cuts therefore fuse.
  mute  Video [start, end) from the source, audio [start, end) from the
        silent source. Deviation from the one-segment-per-mute rule: when
        the previous action is also a mute, the original media between
        the two is appended first, otherwise nothing would cover that gap
        and it would be dropped from the output.

Example for `cut 1:32-1:45`:
  [0:v]trim=duration=92.00,setpts=PTS-STARTPTS[video0];
  [0:a]atrim=duration=92.00,asetpts=PTS-STARTPTS[audio0];
  [0:v]trim=start=105.00,setpts=PTS-STARTPTS[video1];
  [0:a]atrim=start=105.00,asetpts=PTS-STARTPTS[audio1];
  [video0][video1]concat[outv];[audio0][audio1]concat=v=0:a=1[outa]
(wrapped here; the real expression is one line.)
"""

from dataclasses import dataclass
from functools import reduce

from .actions import Action, Verb
from .errors import EmptyActionListError, UnsupportedVerbError
from .timecode import Time
from .validate import THRESHOLD

SOURCE_VIDEO = "0:v"
SOURCE_AUDIO = "0:a"
SILENT_AUDIO = "1:a"

OUT_VIDEO = "outv"
OUT_AUDIO = "outa"


def _trim_args(start: Time | None, end: Time | None) -> str:
    if start is None:
        return f"duration={end.seconds_str()}"
    if end is None:
        return f"start={start.seconds_str()}"
    return f"start={start.seconds_str()}:end={end.seconds_str()}"


@dataclass(frozen=True)
class SegmentChain:
    """Accumulator threaded through the compile fold.

    `counter` is the label index of the current accumulated segment.
    Each compilation starts its own chain, so labels never leak between
    concurrent compilations.
    """

    counter: int = 0
    statements: tuple[str, ...] = ()

    def _emit(self, *statements: str) -> "SegmentChain":
        return SegmentChain(self.counter, self.statements + statements)

    def _trim(self, label: int, start: Time | None, end: Time | None,
              audio: str = SOURCE_AUDIO) -> "SegmentChain":
        args = _trim_args(start, end)
        return self._emit(
            f"[{SOURCE_VIDEO}]trim={args},setpts=PTS-STARTPTS[video{label}]",
            f"[{audio}]atrim={args},asetpts=PTS-STARTPTS[audio{label}]",
        )

    def _concat(self, left: int, right: int, out_video: str, out_audio: str) -> "SegmentChain":
        return self._emit(
            f"[video{left}][video{right}]concat[{out_video}]",
            f"[audio{left}][audio{right}]concat=v=0:a=1[{out_audio}]",
        )

    @classmethod
    def begin(cls, first_start: Time) -> "SegmentChain":
        """Head segment [0, first_start)."""
        return cls()._trim(0, None, first_start)

    def append(self, start: Time, end: Time, audio: str = SOURCE_AUDIO) -> "SegmentChain":
        """Trim [start, end) and concatenate it onto the accumulated segment."""
        segment = self.counter + 1
        joined = self.counter + 2
        chain = self._trim(segment, start, end, audio)
        chain = chain._concat(self.counter, segment, f"video{joined}", f"audio{joined}")
        return SegmentChain(joined, chain.statements)

    def finish(self, start: Time) -> "SegmentChain":
        """Open-ended tail segment from `start`, joined into outv/outa."""
        segment = self.counter + 1
        chain = self._trim(segment, start, None)
        chain = chain._concat(self.counter, segment, OUT_VIDEO, OUT_AUDIO)
        return SegmentChain(segment, chain.statements)

    def render(self) -> str:
        return ";".join(self.statements)


def _compile_cut(chain: SegmentChain, prev: Action | None, act: Action,
                 nxt: Action | None) -> SegmentChain:
    if prev is not None:
        chain = chain.append(prev.end, act.start)
    if nxt is not None and nxt.verb is not Verb.CUT:
        chain = chain.append(act.end, nxt.start)
    return chain


def _compile_mute(chain: SegmentChain, prev: Action | None, act: Action,
                  nxt: Action | None) -> SegmentChain:
    # Only a mute-mute pair leaves a gap no other rule emits.
    if prev is not None and prev.verb is Verb.MUTE:
        chain = chain.append(prev.end, act.start)
    return chain.append(act.start, act.end, audio=SILENT_AUDIO)


_COMPILERS = {
    Verb.CUT: _compile_cut,
    Verb.MUTE: _compile_mute,
}


def _step(chain: SegmentChain, window: tuple) -> SegmentChain:
    index, prev, act, nxt = window
    compile_action = _COMPILERS.get(act.verb)
    if compile_action is None:
        raise UnsupportedVerbError(
            f"action {index}: unsupported verb '{act.verb}'", act.line,
        )
    return compile_action(chain, prev, act, nxt)


def compile_graph(actions: list[Action]) -> str:
    """Compile validated actions into a filter_complex expression.

    Raises:
        EmptyActionListError: No actions.
        UnsupportedVerbError: An action verb has no translation.
    """
    if not actions:
        raise EmptyActionListError("no actions to perform")

    windows = [
        (
            i,
            actions[i - 1] if i > 0 else None,
            act,
            actions[i + 1] if i + 1 < len(actions) else None,
        )
        for i, act in enumerate(actions)
    ]
    chain = reduce(_step, windows, SegmentChain.begin(actions[0].start))
    return chain.finish(actions[-1].end).render()


def edge_warnings(actions: list[Action]) -> list[str]:
    """Describe zero-duration segments the compiled graph will contain.

    The graph is emitted unchanged; ffmpeg accepts empty trims. Only the
    head can be checked here since the media length is unknown.
    """
    warnings = []
    if actions and actions[0].start.total_seconds < THRESHOLD:
        warnings.append(
            f"line {actions[0].line}: first action starts at {actions[0].start}; "
            "the leading segment is empty"
        )
    return warnings
