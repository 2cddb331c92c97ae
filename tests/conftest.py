"""Pytest configuration for testt tests."""

import os

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Configure test environment before collection.

    - Drops TESTT_* overrides inherited from the developer's shell
    - Loads the testt plugin when the package is not installed (no entry point)
    """
    for name in ("TESTT_THREAD_NAME_PREFIX", "TESTT_LOG_LEVEL"):
        os.environ.pop(name, None)

    if not config.pluginmanager.has_plugin("testt"):
        config.pluginmanager.import_plugin("testt.pytest_plugin")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Default unmarked tests to unit category."""
    for item in items:
        if any(marker in item.keywords for marker in ("unit", "integration")):
            continue
        item.add_marker(pytest.mark.unit)
