"""Exceptions raised by the hex kernel for caller mistakes."""

from __future__ import annotations


class HexKernelError(ValueError):
    """Base class for all kernel errors."""


class InvariantViolation(HexKernelError):
    """Raised when cube coordinates do not satisfy ``q + r + s == 0``."""


class InvalidArgument(HexKernelError):
    """Raised when an argument is outside the range an operation accepts."""


__all__ = ["HexKernelError", "InvalidArgument", "InvariantViolation"]
