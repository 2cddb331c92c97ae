"""pytest integration: a real TestContext backed by the running test.

Registered through the ``pytest11`` entry point. Provides the ``tb`` fixture:

    def test_rejects_negative(tb):
        msg = expect_fatal(tb, lambda t: check_positive(t, -1))
        assert "negative" in msg
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, NoReturn

import pytest

from .config import TesttConfig, configure_logging, load_user_env
from .formatting import sprintf, sprintln

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("testt.context")


class PytestContext:
    """TestContext that reports through pytest.

    Fatal calls fail the test immediately via pytest.fail. Error calls are
    recorded and reported together when the test finishes. Log calls go to
    the ``testt.context`` logger, which pytest captures per test. Safe to
    call from several threads.
    """

    def __init__(self, nodeid: str) -> None:
        self._nodeid = nodeid
        self._errors: list[str] = []
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Node id of the running test."""
        return self._nodeid

    @property
    def errors(self) -> list[str]:
        with self._lock:
            return list(self._errors)

    def failed(self) -> bool:
        """Return True if any error has been recorded."""
        with self._lock:
            return bool(self._errors)

    def fail_now(self) -> NoReturn:
        pytest.fail(pytrace=False)

    def fatal(self, *args: object) -> NoReturn:
        pytest.fail(sprintln(*args).rstrip("\n"), pytrace=False)

    def fatalf(self, format: str, *args: object) -> NoReturn:
        pytest.fail(sprintf(format, *args), pytrace=False)

    def error(self, *args: object) -> None:
        self._record(sprintln(*args).rstrip("\n"))

    def errorf(self, format: str, *args: object) -> None:
        self._record(sprintf(format, *args))

    def _record(self, msg: str) -> None:
        with self._lock:
            self._errors.append(msg)
        logger.error("%s: %s", self._nodeid, msg)

    def log(self, *args: object) -> None:
        logger.info("%s: %s", self._nodeid, sprintln(*args).rstrip("\n"))

    def logf(self, format: str, *args: object) -> None:
        logger.info("%s: %s", self._nodeid, sprintf(format, *args))

    def helper(self) -> None:
        pass

    def skip(self, *args: object) -> NoReturn:
        pytest.skip(sprintln(*args).rstrip("\n"))

    def report(self) -> None:
        """Fail the test if any errors were recorded."""
        errors = self.errors
        if errors:
            pytest.fail(
                f"{len(errors)} error(s) recorded:\n"
                + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )


def pytest_configure(config: pytest.Config) -> None:
    """Load ~/.config/testt/.env and apply the configured log level."""
    load_user_env()
    configure_logging(TesttConfig.from_env())


@pytest.fixture
def tb(request: pytest.FixtureRequest) -> Iterator[PytestContext]:
    """TestContext for the current test; recorded errors fail it at teardown."""
    ctx = PytestContext(request.node.nodeid)
    yield ctx
    ctx.report()
