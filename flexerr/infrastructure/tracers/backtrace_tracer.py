"""Backtrace tracer backend.

Full-fidelity backend: every trace records the message chain with the
source location of each entry, plus the call-stack frames captured where
the error first arose. Frame capture walks the live stack (or an absorbed
exception's __traceback__), skips flexerr's own frames, and is bounded by
the configured limit.

Rendered layout (beneath the report's message line):

    Location:
        app/io.py:42

    Caused by:
        0: not found

    ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━ BACKTRACE ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
      File "app/main.py", line 10, in main
        load()
      File "app/io.py", line 42, in load
        return Failure(error=AppError.io(source=e))
"""

import traceback
from dataclasses import dataclass

from flexerr.domain.value_objects import SourceLocation, TraceContext
from flexerr.domain.value_objects.source_location import external_frame, is_internal_file
from flexerr.infrastructure.tracers.chain import (
    exception_chain,
    exception_message,
    render_causes,
)

BACKTRACE_BANNER = f"{'━' * 33} BACKTRACE {'━' * 33}"


@dataclass(frozen=True, slots=True)
class Frame:
    """One captured stack frame.

    Attributes:
        filename: Source file path.
        lineno: Line number.
        function: Function name.
        line: Source line text ("" when unavailable).
    """

    filename: str
    lineno: int
    function: str
    line: str = ""

    @classmethod
    def from_summary(cls, summary: traceback.FrameSummary) -> "Frame":
        return cls(
            filename=summary.filename,
            lineno=summary.lineno or 0,
            function=summary.name,
            line=(summary.line or "").strip(),
        )


@dataclass(frozen=True, slots=True)
class TraceEntry:
    """One message in the chain and where it was recorded."""

    message: str
    location: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class BacktraceTrace:
    """Message chain (innermost first) plus captured frames (oldest first).

    Attributes:
        entries: Chain entries; the last one belongs to the newest report.
        frames: Call-stack frames from where the error first arose.
    """

    entries: tuple[TraceEntry, ...] = ()
    frames: tuple[Frame, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.entries and not self.frames

    @property
    def location(self) -> SourceLocation | None:
        """Location of the newest entry."""
        if not self.entries:
            return None
        return self.entries[-1].location


class BacktraceTracer:
    """Tracer capturing locations, message chain and stack frames.

    Args:
        capture_frames: Walk the call stack on capture.
        limit: Maximum frames kept per trace.
    """

    name = "backtrace"

    def __init__(self, *, capture_frames: bool = True, limit: int = 32) -> None:
        self._capture_frames = capture_frames
        self._limit = limit

    def empty(self) -> BacktraceTrace:
        return BacktraceTrace()

    def new_trace(self, context: TraceContext) -> BacktraceTrace:
        return BacktraceTrace(
            entries=(TraceEntry(context.message, context.location),),
            frames=self._stack_frames(),
        )

    def extend_trace(
        self, existing: BacktraceTrace, context: TraceContext
    ) -> BacktraceTrace:
        """Append an entry; keep the original frames, capture them if absent."""
        return BacktraceTrace(
            entries=existing.entries + (TraceEntry(context.message, context.location),),
            frames=existing.frames or self._stack_frames(),
        )

    def trace_exception(self, error: BaseException) -> BacktraceTrace | None:
        chain = exception_chain(error)
        entries = tuple(
            TraceEntry(exception_message(e), self._raise_location(e)) for e in chain
        )
        frames = self._traceback_frames(chain)
        if not frames and len(chain) < 2:
            return None
        return BacktraceTrace(entries=entries, frames=frames)

    def render(self, trace: BacktraceTrace) -> str:
        if not isinstance(trace, BacktraceTrace):
            return ""
        blocks: list[str] = []
        location = trace.location
        if location is not None:
            blocks.append(f"Location:\n    {location}")
        causes = render_causes([entry.message for entry in trace.entries[:-1]])
        if causes:
            blocks.append(causes)
        if trace.frames:
            lines = [BACKTRACE_BANNER]
            for frame in trace.frames:
                lines.append(
                    f'  File "{frame.filename}", line {frame.lineno}, in {frame.function}'
                )
                if frame.line:
                    lines.append(f"    {frame.line}")
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)

    def _stack_frames(self) -> tuple[Frame, ...]:
        if not self._capture_frames:
            return ()
        frame = external_frame()
        if frame is None:
            return ()
        summaries = traceback.extract_stack(frame, limit=self._limit)
        return tuple(Frame.from_summary(s) for s in summaries)

    def _traceback_frames(self, chain: list[BaseException]) -> tuple[Frame, ...]:
        """Frames of the innermost exception in the chain that was raised."""
        if not self._capture_frames:
            return ()
        for error in chain:
            if error.__traceback__ is not None:
                summaries = traceback.extract_tb(error.__traceback__, limit=self._limit)
                return tuple(
                    Frame.from_summary(s)
                    for s in summaries
                    if not is_internal_file(s.filename)
                )
        return ()

    @staticmethod
    def _raise_location(error: BaseException) -> SourceLocation | None:
        tb = error.__traceback__
        if tb is None:
            return None
        while tb.tb_next is not None:
            tb = tb.tb_next
        return SourceLocation(
            filename=tb.tb_frame.f_code.co_filename,
            lineno=tb.tb_lineno,
            function=tb.tb_frame.f_code.co_name,
        )
