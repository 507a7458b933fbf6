from __future__ import annotations

import asyncio
import sys
from typing import TextIO

from .cache import ModuleCache
from .fs import FileSystem
from .options import ReportOptions
from .report import print_error


_original_excepthook = None


def install_excepthook(
    modules: ModuleCache,
    *,
    fs: FileSystem | None = None,
    options: ReportOptions | None = None,
    stream: TextIO | None = None,
) -> None:
    """Print uncaught exceptions as located error reports.

    Call `uninstall_excepthook()` to restore the previous hook.
    """
    global _original_excepthook
    if _original_excepthook is None:
        _original_excepthook = sys.excepthook

    def hook(exc_type, exc, tb) -> None:
        if exc.__traceback__ is None:
            exc = exc.with_traceback(tb)
        asyncio.run(print_error(exc, modules=modules, fs=fs, options=options, stream=stream))

    sys.excepthook = hook


def uninstall_excepthook() -> None:
    global _original_excepthook
    if _original_excepthook is not None:
        sys.excepthook = _original_excepthook
        _original_excepthook = None
