# MIT License (see LICENSE)
"""
Exception types raised by projectile_lab.

Both concrete errors derive from ValueError so callers that already guard
numeric input with ``except ValueError`` keep working.
"""
from __future__ import annotations


class ProjectileLabError(Exception):
    """Base class for all errors raised by this package."""


class InvalidConfiguration(ProjectileLabError, ValueError):
    """
    A simulation could not be constructed from the given parameters.

    Raised for non-positive or non-finite mass, an empty trail/history cap,
    or inverted wall boundaries.
    """


class InvalidArgument(ProjectileLabError, ValueError):
    """A per-call argument (e.g. a negative or non-finite dt) was rejected."""
