"""Message formatting and function identity helpers.

Test contexts format their arguments in two ways:

- Line-join: each argument rendered with str(), separated by single spaces
  and terminated by a newline (used by fatal, error and log).
- Printf-style: ``format % args`` (used by fatalf, errorf and logf).
"""

from __future__ import annotations

import functools
from typing import Any


def sprintln(*args: object) -> str:
    """Join args with spaces and terminate with a newline."""
    return " ".join(str(arg) for arg in args) + "\n"


def sprintf(format: str, *args: object) -> str:
    """Format args with printf-style ``%`` formatting.

    With no args only ``%%`` escapes are collapsed; any other ``%`` is kept
    as written, so an argument-free message never raises.
    """
    if not args:
        return format.replace("%%", "%")
    return format % args


def func_name(fn: Any) -> str:
    """Return a diagnostic identity for a callable.

    Distinct closures created from the same code share an identity, so the
    result must not be relied on for uniqueness.

    Args:
        fn: A function, method, functools.partial or callable object.

    Returns:
        Dotted ``module.qualname`` string.
    """
    while isinstance(fn, functools.partial):
        fn = fn.func
    target = fn if hasattr(fn, "__qualname__") else type(fn)
    module = getattr(target, "__module__", None)
    qualname = getattr(target, "__qualname__", repr(target))
    if module:
        return f"{module}.{qualname}"
    return qualname
