"""Unit tests for FakeContext in testt/double.py."""

from __future__ import annotations

import copy

import pytest

from testt.double import (
    ClosedContextError,
    FakeContext,
    FatalSignal,
    UnimplementedCapabilityError,
)
from testt.protocols import TestContext as ContextProtocol
from tests.fakes import RecordingContext


@pytest.fixture
def real() -> RecordingContext:
    return RecordingContext()


@pytest.fixture
def fake(real: RecordingContext) -> FakeContext:
    return FakeContext(real)


class TestFakeContextFatal:
    """Fatal methods raise FatalSignal instead of aborting."""

    def test_fail_now_has_empty_message(self, fake: FakeContext) -> None:
        with pytest.raises(FatalSignal) as exc_info:
            fake.fail_now()
        assert exc_info.value.message == ""
        assert exc_info.value.origin is fake

    def test_fatal_line_joins_args(self, fake: FakeContext) -> None:
        with pytest.raises(FatalSignal) as exc_info:
            fake.fatal("bad value", 3)
        assert exc_info.value.message == "bad value 3\n"

    def test_fatalf_formats(self, fake: FakeContext) -> None:
        with pytest.raises(FatalSignal) as exc_info:
            fake.fatalf("boom %d", 5)
        assert exc_info.value.message == "boom 5"

    def test_signal_survives_broad_except(self, fake: FakeContext) -> None:
        """Code under test catching Exception cannot swallow a fatal signal."""

        def swallow() -> None:
            try:
                fake.fail_now()
            except Exception:
                pass

        with pytest.raises(FatalSignal):
            swallow()

    def test_fatal_does_not_reach_real_context(
        self, fake: FakeContext, real: RecordingContext
    ) -> None:
        with pytest.raises(FatalSignal):
            fake.fatal("x")
        assert real.fatals == []


class TestFakeContextErrors:
    """Error methods record and continue."""

    def test_errors_recorded_in_order(self, fake: FakeContext) -> None:
        fake.error("a")
        fake.errorf("b=%d", 2)
        fake.error("a")
        assert fake.errors == ["a\n", "b=2", "a\n"]

    def test_errorf_escaped_percent(self, fake: FakeContext) -> None:
        fake.errorf("100%%")
        assert fake.errors == ["100%"]

    def test_errors_returns_copy(self, fake: FakeContext) -> None:
        fake.error("a")
        fake.errors.append("tampered")
        assert fake.errors == ["a\n"]

    def test_errors_do_not_reach_real_context(
        self, fake: FakeContext, real: RecordingContext
    ) -> None:
        fake.errorf("nope")
        assert real.errors == []


class TestFakeContextPassThrough:
    """Log calls are delegated; helper is a no-op."""

    def test_log_delegates(self, fake: FakeContext, real: RecordingContext) -> None:
        fake.log("hello", 1)
        fake.logf("n=%d", 2)
        assert real.logs == ["hello 1\n", "n=2"]

    def test_helper_is_noop(self, fake: FakeContext, real: RecordingContext) -> None:
        fake.helper()
        assert real.helper_calls == 0

    def test_satisfies_protocol(self, fake: FakeContext) -> None:
        assert isinstance(fake, ContextProtocol)


class TestFakeContextUnimplemented:
    """Capabilities FakeContext does not implement fail loudly."""

    def test_unknown_capability_raises(self, fake: FakeContext) -> None:
        with pytest.raises(UnimplementedCapabilityError, match="'skip'"):
            fake.skip("not today")

    def test_property_read_raises(self, fake: FakeContext) -> None:
        """Reading an attribute capability fails as loudly as calling one."""
        with pytest.raises(UnimplementedCapabilityError, match="'name'"):
            fake.name  # noqa: B018

    def test_unimplemented_is_not_a_fatal_signal(self, fake: FakeContext) -> None:
        with pytest.raises(NotImplementedError) as exc_info:
            fake.cleanup(lambda: None)
        assert not isinstance(exc_info.value, FatalSignal)

    def test_private_names_raise_attribute_error(self, fake: FakeContext) -> None:
        assert not hasattr(fake, "_missing")
        assert not hasattr(fake, "__missing__")

    def test_copy_still_works(self, fake: FakeContext) -> None:
        fake.error("a")
        assert copy.copy(fake).errors == ["a\n"]


class TestFakeContextClosed:
    """A closed FakeContext rejects every capability call."""

    def test_calls_after_close_raise(self, fake: FakeContext) -> None:
        fake.close()
        assert fake.closed
        with pytest.raises(ClosedContextError, match="errorf"):
            fake.errorf("late")
        with pytest.raises(ClosedContextError):
            fake.fail_now()
        with pytest.raises(ClosedContextError):
            fake.log("late")
        with pytest.raises(ClosedContextError, match="helper"):
            fake.helper()

    def test_errors_readable_after_close(self, fake: FakeContext) -> None:
        fake.error("a")
        fake.close()
        assert fake.errors == ["a\n"]
