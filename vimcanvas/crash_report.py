"""Reporting of unhandled errors to stderr and to a backtrace log file."""

from __future__ import annotations

import os
import sys
import traceback
from datetime import datetime, timezone
from pathlib import Path
from types import TracebackType
from typing import Callable, Optional, Union

BACKTRACES_FILE = "vimcanvas_backtraces.log"
REQUEST_MESSAGE = "This is a bug and we would love for it to be reported."
BACKTRACE_ENV_VAR = "VIMCANVAS_BACKTRACE"
UNPARSABLE_PAYLOAD_MESSAGE = "Could not parse panic payload to a string. This is a bug."

PathLike = Union[str, "os.PathLike[str]"]
ExceptHook = Callable[[type, BaseException, Optional[TracebackType]], None]


def _location(exc: BaseException) -> tuple[str, int, int]:
    frames = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
    if not frames:
        return "<unknown>", 0, 0
    last = frames[-1]
    colno = getattr(last, "colno", None)
    column = colno + 1 if colno is not None else 0
    return last.filename, last.lineno or 0, column


def _format_backtrace(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def generate_panic_message(exc: BaseException) -> str:
    """Describe the error with its message and the place it was raised."""
    file, line, column = _location(exc)
    try:
        payload = str(exc)
    except Exception:
        return UNPARSABLE_PAYLOAD_MESSAGE
    return (
        f"vimcanvas panicked with the message '{payload}'. "
        f"(File: {file}; Line: {line}, Column: {column})"
    )


def generate_stderr_log_message(exc: BaseException, debug: bool = False) -> str:
    """Build the message shown on stderr; debug builds may add the backtrace."""
    panic_msg = generate_panic_message(exc)
    if not debug:
        return f"{panic_msg}\n{REQUEST_MESSAGE}"

    print_backtrace = os.environ.get(BACKTRACE_ENV_VAR) in ("full", "1")
    if print_backtrace:
        backtrace_msg = _format_backtrace(exc)
    else:
        backtrace_msg = (
            f"note: run with `{BACKTRACE_ENV_VAR}=1` environment variable "
            "to display a backtrace"
        )
    return f"{panic_msg}\n{REQUEST_MESSAGE}\n{backtrace_msg}"


def generate_panic_log_message(exc: BaseException, now: Optional[datetime] = None) -> str:
    """Build the timestamped entry written to the backtrace log."""
    if now is None:
        now = datetime.now(timezone.utc)
    timestamp = now.strftime("%Y-%m-%d %H:%M:%S")
    full_panic_msg = f"{timestamp} - {generate_panic_message(exc)}"
    return f"{full_panic_msg}\n{_format_backtrace(exc)}\n"


def log_panic_to_file(exc: BaseException, path: PathLike = BACKTRACES_FILE) -> bool:
    """Append the error to the backtrace log; return whether it was written."""
    log_msg = generate_panic_log_message(exc)
    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as error:
        print(f"Could not create backtraces file. ({error})", file=sys.stderr)
        return False

    with handle:
        try:
            handle.write(log_msg)
        except OSError as error:
            print(f"Failed writing panic to {path}: {error}", file=sys.stderr)
            return False
    print(f"\nBacktrace saved to {Path(path)}!", file=sys.stderr)
    return True


def install_panic_hook(path: PathLike = BACKTRACES_FILE) -> ExceptHook:
    """Install an exception hook that reports unhandled errors; return the hook."""

    def hook(
        exc_type: type, exc: BaseException, tb: Optional[TracebackType]
    ) -> None:
        if exc.__traceback__ is None and tb is not None:
            exc = exc.with_traceback(tb)
        print(generate_stderr_log_message(exc, debug=sys.flags.dev_mode), file=sys.stderr)
        log_panic_to_file(exc, path)

    sys.excepthook = hook
    return hook