"""In-memory fake implementations for testing.

Fakes are preferred over mocks because they:

1. Implement real protocol contracts, catching interface mismatches at test time
2. Provide deterministic, predictable behavior without call-order dependencies
3. Enable behavior-based testing (assert outputs/state) over interaction testing

Available fakes:
- RecordingContext: Real-context stand-in that records every call and aborts
  fatal calls with RealFatalError (fail-closed)

Usage:
    from tests.fakes import RecordingContext, RealFatalError

    def test_something():
        ctx = RecordingContext()
        with pytest.raises(RealFatalError):
            expect_fatal(ctx, lambda t: None)
"""

from tests.fakes.recording_context import RealFatalError, RecordingContext

__all__ = ["RealFatalError", "RecordingContext"]
