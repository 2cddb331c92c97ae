"""FakeContext: a stand-in TestContext that intercepts failures.

A FakeContext is handed to a function under test in place of the real test
context. Fatal calls raise FatalSignal instead of aborting the test, error
calls are recorded instead of reported, and log calls pass through to the
real context. Anything else the function under test reaches for fails
loudly rather than silently doing nothing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

from .formatting import sprintf, sprintln

if TYPE_CHECKING:
    from .protocols import TestContext

logger = logging.getLogger(__name__)


class FatalSignal(BaseException):
    """Raised by a FakeContext when the function under test fails fatally.

    Derives from BaseException, like pytest's own outcome exceptions, so a
    broad ``except Exception`` in the function under test cannot swallow it.

    Attributes:
        message: The formatted fatal message (empty for fail_now).
        origin: The FakeContext that raised the signal. Only the barrier
            installed for that context may catch it.
    """

    def __init__(self, message: str, origin: FakeContext) -> None:
        super().__init__(message)
        self.message = message
        self.origin = origin


class UnimplementedCapabilityError(NotImplementedError):
    """Raised when a function under test uses a capability FakeContext lacks."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"FakeContext does not implement {name!r}; "
            "the function under test used an unsupported test context capability"
        )


class ClosedContextError(RuntimeError):
    """Raised when a FakeContext is used after its invocation has ended."""


class FakeContext:
    """TestContext implementation that captures fatal and error calls.

    Created fresh for a single invocation of a function under test and
    closed when that invocation ends. Not shared between threads.
    """

    def __init__(self, real: TestContext) -> None:
        self._real = real
        self._errors: list[str] = []
        self._closed = False

    @property
    def errors(self) -> list[str]:
        """Errors recorded via error/errorf, in call order."""
        return list(self._errors)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """End the invocation; further capability calls raise."""
        self._closed = True

    def _check_open(self, name: str) -> None:
        if self._closed:
            raise ClosedContextError(
                f"FakeContext.{name} called after the function under test returned"
            )

    def _fatal(self, message: str) -> NoReturn:
        logger.debug("Fatal signal raised: %r", message)
        raise FatalSignal(message, self)

    def fail_now(self) -> None:
        self._check_open("fail_now")
        self._fatal("")

    def fatal(self, *args: object) -> None:
        self._check_open("fatal")
        self._fatal(sprintln(*args))

    def fatalf(self, format: str, *args: object) -> None:
        self._check_open("fatalf")
        self._fatal(sprintf(format, *args))

    def error(self, *args: object) -> None:
        self._check_open("error")
        self._errors.append(sprintln(*args))

    def errorf(self, format: str, *args: object) -> None:
        self._check_open("errorf")
        self._errors.append(sprintf(format, *args))

    def log(self, *args: object) -> None:
        self._check_open("log")
        self._real.log(*args)

    def logf(self, format: str, *args: object) -> None:
        self._check_open("logf")
        self._real.logf(format, *args)

    def helper(self) -> None:
        self._check_open("helper")

    def __getattr__(self, name: str) -> NoReturn:
        # Only reached for names not defined on the instance or class.
        if name.startswith("_"):
            raise AttributeError(name)
        raise UnimplementedCapabilityError(name)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<FakeContext {state} errors={len(self._errors)}>"
