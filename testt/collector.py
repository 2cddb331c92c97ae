"""Error collection: run a function under test and return its soft errors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .double import FakeContext
from .formatting import func_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from .protocols import TestContext

logger = logging.getLogger(__name__)


def expect_error(
    ctx: TestContext, fn: Callable[[TestContext], object]
) -> list[str]:
    """Fail the test unless fn records at least one error.

    fn is run synchronously against a fresh FakeContext. Errors never abort
    control flow, so no signal barrier is installed: a fatal call made by fn
    propagates as a FatalSignal.

    Args:
        ctx: The real test context.
        fn: The function under test.

    Returns:
        The messages passed to error/errorf, formatted, in call order.
    """
    ctx.helper()
    fake = FakeContext(ctx)
    try:
        fn(fake)
    finally:
        fake.close()
    errors = fake.errors
    if not errors:
        ctx.fatalf("%s did not raise an error as was expected", func_name(fn))
        return []
    logger.debug("Collected %d errors from %s", len(errors), func_name(fn))
    return errors
