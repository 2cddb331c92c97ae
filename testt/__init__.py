"""testt: assert that code under test fails fatally or records errors."""

from .capture import capture_fatal, expect_fatal
from .collector import expect_error
from .config import ConfigurationError, TesttConfig
from .double import (
    ClosedContextError,
    FakeContext,
    FatalSignal,
    UnimplementedCapabilityError,
)
from .parallel import collect_fatals, parallel_fatal
from .protocols import TestContext

__version__ = "0.1.0"
__all__ = [
    "ClosedContextError",
    "ConfigurationError",
    "FakeContext",
    "FatalSignal",
    "TestContext",
    "TesttConfig",
    "UnimplementedCapabilityError",
    "__version__",
    "capture_fatal",
    "collect_fatals",
    "expect_error",
    "expect_fatal",
    "parallel_fatal",
]
