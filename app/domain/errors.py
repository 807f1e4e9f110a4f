# app/domain/errors.py
"""
Errors raised by the allocation core.

All of them are raised synchronously and never retried: allocation is a pure
computation, so a failure means bad input or a defect, not a transient fault.
"""


class AllocationError(ValueError):
    """Base class for every allocation failure."""


class InvalidConfiguration(AllocationError):
    """Desired group size is not a finite number >= 2, or the roster is too small."""


class InsufficientRoleSupply(AllocationError):
    """Quota targets, role pools and role counts disagree."""


class AllocationInvariantViolation(AllocationError):
    """Final groups do not match their capacities. Never expected in normal operation."""
