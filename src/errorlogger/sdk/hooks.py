"""Uncaught-exception hooks and application bootstrap."""
from __future__ import annotations

import sys
import threading
from types import TracebackType
from typing import Callable, Optional, Type, TypeVar

from errorlogger.core.utils.logging import get_logger

from .client import Reporter, format_stack_trace

logger = get_logger("errorlogger.hooks")

ErrorCallback = Callable[[BaseException, str], None]
T = TypeVar("T")


def _dispatch(
    reporter: Reporter,
    on_error: Optional[ErrorCallback],
    error: BaseException,
    tb: Optional[TracebackType],
) -> None:
    if isinstance(error, KeyboardInterrupt):
        return
    stack = format_stack_trace(error, tb)
    if on_error is not None:
        try:
            on_error(error, stack)
        except Exception:  # noqa: BLE001
            logger.exception("Application error callback failed")
    reporter.report(error, stack)


def install_hooks(reporter: Reporter, on_error: Optional[ErrorCallback] = None) -> Callable[[], None]:
    """Route uncaught exceptions (main and worker threads) to ``reporter``.

    The previously installed hooks keep running first, so tracebacks are
    still dumped to the console. Returns a callable that restores them.
    """
    previous_sys_hook = sys.excepthook
    previous_thread_hook = threading.excepthook

    def sys_hook(
        exc_type: Type[BaseException],
        exc_value: BaseException,
        exc_tb: Optional[TracebackType],
    ) -> None:
        previous_sys_hook(exc_type, exc_value, exc_tb)
        _dispatch(reporter, on_error, exc_value, exc_tb)

    def thread_hook(args: threading.ExceptHookArgs) -> None:
        previous_thread_hook(args)
        if args.exc_value is not None:
            _dispatch(reporter, on_error, args.exc_value, args.exc_traceback)

    sys.excepthook = sys_hook
    threading.excepthook = thread_hook

    def uninstall() -> None:
        sys.excepthook = previous_sys_hook
        threading.excepthook = previous_thread_hook

    return uninstall


def initialize(
    app_builder: Callable[[], T],
    reporter: Reporter,
    on_error: Optional[ErrorCallback] = None,
) -> T:
    """Install the hooks, then run the host application's entry point."""
    install_hooks(reporter, on_error)
    return app_builder()
