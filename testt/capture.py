"""Fatal capture: run a function under test and catch its fatal signal.

capture_fatal runs the function against a fresh FakeContext and converts
the FatalSignal raised by that context into a returned message. Exceptions
of any other kind, including a FatalSignal raised by a different
FakeContext, propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .double import FakeContext, FatalSignal
from .formatting import func_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from .protocols import TestContext

logger = logging.getLogger(__name__)


def capture_fatal(
    ctx: TestContext, fn: Callable[[TestContext], object]
) -> str | None:
    """Return the fatal message if fn fails fatally, else None.

    fn fails fatally when it calls fail_now, fatal or fatalf on the context
    it is given.

    Args:
        ctx: The real test context. Log calls made by fn are delegated to it.
        fn: The function under test.

    Returns:
        The formatted fatal message (empty for fail_now), or None if fn
        returned normally.
    """
    ctx.helper()
    fake = FakeContext(ctx)
    try:
        fn(fake)
    except FatalSignal as sig:
        # A signal from an enclosing capture belongs to that capture's barrier
        if sig.origin is not fake:
            raise
        logger.debug(
            "Captured fatal signal from %s: %r", func_name(fn), sig.message
        )
        return sig.message
    finally:
        fake.close()
    return None


def expect_fatal(ctx: TestContext, fn: Callable[[TestContext], object]) -> str:
    """Fail the test unless fn fails fatally; return the fatal message.

    Check the returned message to tell the expected failure apart from
    unrelated fatal failures.
    """
    ctx.helper()
    msg = capture_fatal(ctx, fn)
    if msg is not None:
        return msg
    ctx.fatalf("%s did not fail fatally as expected", func_name(fn))
    return ""
