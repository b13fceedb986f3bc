"""Stack-walking caller resolver.

Purpose
-------
Report the application frame that issued a log call. Frames that belong to the
logging pipeline (``core.py``, ``application/``, ``adapters/``) are skipped,
the same way :mod:`logging` skips its own source file when computing
``funcName``/``filename``. The package CLI is not part of the pipeline, so
``guild-logger emit`` reports its own command function.
"""

from __future__ import annotations

import os
import sys
from types import FrameType
from typing import Final

from ...domain.entry import UNKNOWN, CallSite

_PACKAGE_DIR: Final[str] = os.path.normcase(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
_PIPELINE_DIRS: Final[tuple[str, ...]] = tuple(os.path.join(_PACKAGE_DIR, name) for name in ("application", "adapters"))
_PIPELINE_FILES: Final[frozenset[str]] = frozenset({os.path.join(_PACKAGE_DIR, "core.py")})


def _is_internal(frame: FrameType, roots: tuple[str, ...]) -> bool:
    filename = os.path.normcase(os.path.abspath(frame.f_code.co_filename))
    return filename in _PIPELINE_FILES or any(filename.startswith(root + os.sep) for root in roots)


class StackCallerResolver:
    """Resolve the first frame outside the logging pipeline.

    Parameters
    ----------
    extra_roots:
        Additional source directories whose frames count as plumbing (for
        example an application's own logging wrapper package).
    full_path:
        Report the absolute file path instead of the base name.
    """

    def __init__(self, *, extra_roots: tuple[str, ...] = (), full_path: bool = False) -> None:
        self._roots = _PIPELINE_DIRS + tuple(os.path.normcase(os.path.abspath(root)) for root in extra_roots)
        self._full_path = full_path

    def resolve(self, skip_frames: int = 0) -> CallSite:
        frame: FrameType | None = sys._getframe(1)
        while frame is not None and _is_internal(frame, self._roots):
            frame = frame.f_back
        for _ in range(max(skip_frames, 0)):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return CallSite()
        filename = frame.f_code.co_filename
        if not self._full_path:
            filename = os.path.basename(filename)
        return CallSite(function_name=frame.f_code.co_name or UNKNOWN, file_name=filename or UNKNOWN)


__all__ = ["StackCallerResolver"]
