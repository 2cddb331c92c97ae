"""Protocol definition for the test context capability set.

Functions under test receive a TestContext and report failures through it.
The host framework supplies the real implementation (see
testt.pytest_plugin.PytestContext); testt.double.FakeContext stands in for it
while a harness function observes what the function under test does.

Design principles:
- Structural typing (typing.Protocol) so any object with these methods works
- Only the methods the harness intercepts or delegates are part of the contract
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TestContext(Protocol):
    """Capability set a test context must expose.

    Fatal methods (fail_now, fatal, fatalf) abort the current test. Error
    methods (error, errorf) record a failure and let the test continue. Log
    methods (log, logf) write to the test log.

    Implementations used with testt.parallel must tolerate concurrent calls
    from several threads.
    """

    def fail_now(self) -> None:
        """Abort the test with no message."""
        ...

    def fatal(self, *args: object) -> None:
        """Abort the test with a line-joined message."""
        ...

    def fatalf(self, format: str, *args: object) -> None:
        """Abort the test with a printf-style message."""
        ...

    def error(self, *args: object) -> None:
        """Record a line-joined failure and continue."""
        ...

    def errorf(self, format: str, *args: object) -> None:
        """Record a printf-style failure and continue."""
        ...

    def log(self, *args: object) -> None:
        """Write a line-joined message to the test log."""
        ...

    def logf(self, format: str, *args: object) -> None:
        """Write a printf-style message to the test log."""
        ...

    def helper(self) -> None:
        """Mark the calling function as a test helper."""
        ...
