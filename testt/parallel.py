"""Parallel fan-out: run several functions under test concurrently.

Each function runs on its own worker thread through capture_fatal with its
own FakeContext. The runner waits for every worker before reporting, so one
fatal failure never cuts the others short. There is no timeout: a function
that never returns blocks the runner indefinitely.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from .capture import capture_fatal
from .config import TesttConfig
from .formatting import func_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from .protocols import TestContext

logger = logging.getLogger(__name__)


def collect_fatals(
    ctx: TestContext,
    *fns: Callable[[TestContext], object],
    config: TesttConfig | None = None,
) -> dict[str, str]:
    """Run fns concurrently and return the fatal messages they produced.

    Args:
        ctx: The real test context, shared by every worker for log calls.
        *fns: Functions under test, one worker thread each.
        config: Harness configuration; loaded from the environment if None.

    Returns:
        Mapping of function identity to captured fatal message, containing
        only the functions that failed fatally. When several failing
        functions share an identity, later entries get a ``#2``, ``#3``...
        suffix so every failure is kept.

    Raises:
        BaseException: The first exception (in argument order) raised by a
            function under test that was not a captured fatal signal. It is
            re-raised only after every worker has finished.
    """
    if not fns:
        return {}
    if config is None:
        # Only thread_name_prefix is read here
        config = TesttConfig.from_env(validate=False)

    fatals: dict[str, str] = {}
    lock = threading.Lock()

    def run(fn: Callable[[TestContext], object]) -> None:
        msg = capture_fatal(ctx, fn)
        if msg is None:
            return
        name = func_name(fn)
        with lock:
            key, n = name, 1
            while key in fatals:
                n += 1
                key = f"{name}#{n}"
            fatals[key] = msg

    logger.debug("Starting %d parallel workers", len(fns))
    with ThreadPoolExecutor(
        max_workers=len(fns), thread_name_prefix=config.thread_name_prefix
    ) as executor:
        futures = [executor.submit(run, fn) for fn in fns]
    # Leaving the executor block joined every worker

    for future in futures:
        exc = future.exception()
        if exc is not None:
            raise exc

    logger.debug("%d of %d functions failed fatally", len(fatals), len(fns))
    return fatals


def format_fatals(fatals: dict[str, str]) -> str:
    """Render aggregated fatal messages as ``name: message`` pairs."""
    return "; ".join(
        f"{name}: {msg.rstrip()!r}" for name, msg in sorted(fatals.items())
    )


def parallel_fatal(
    ctx: TestContext,
    *fns: Callable[[TestContext], object],
    config: TesttConfig | None = None,
) -> None:
    """Run fns in parallel and fail fatally if any of them failed fatally.

    Waits for every function to complete. The single fatal failure reported
    on ctx states how many functions failed and lists each one's identity
    and message.
    """
    ctx.helper()
    fatals = collect_fatals(ctx, *fns, config=config)
    if fatals:
        ctx.fatalf(
            "parallel_fatal: %d functions failed fatally: %s",
            len(fatals),
            format_fatals(fatals),
        )
