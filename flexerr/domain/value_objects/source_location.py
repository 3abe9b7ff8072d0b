"""Source location value object.

A file/line token identifying where an error report was constructed.
Generated constructors capture the first frame outside this package, so the
location points at application code rather than at flexerr internals.
"""

import os
import sys
from dataclasses import dataclass
from types import FrameType

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def is_internal_file(filename: str) -> bool:
    """Check whether a code filename belongs to the flexerr package."""
    return os.path.abspath(filename).startswith(_PACKAGE_DIR + os.sep)


def external_frame() -> FrameType | None:
    """Return the innermost stack frame outside the flexerr package.

    Returns:
        The calling application frame, or None when the whole stack is
        internal (only possible when flexerr calls itself at import time).
    """
    frame: FrameType | None = sys._getframe(1)
    while frame is not None and is_internal_file(frame.f_code.co_filename):
        frame = frame.f_back
    return frame


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where an error report was constructed.

    Attributes:
        filename: Path of the source file.
        lineno: Line number within the file.
        function: Name of the enclosing function.
    """

    filename: str
    lineno: int
    function: str = "<module>"

    @classmethod
    def from_frame(cls, frame: FrameType) -> "SourceLocation":
        """Build a location from a live stack frame."""
        return cls(
            filename=frame.f_code.co_filename,
            lineno=frame.f_lineno,
            function=frame.f_code.co_name,
        )

    @classmethod
    def capture(cls) -> "SourceLocation | None":
        """Capture the location of the nearest application frame."""
        frame = external_frame()
        if frame is None:
            return None
        return cls.from_frame(frame)

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"
