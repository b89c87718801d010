from __future__ import annotations


class PensionCalculationError(Exception):
    """Base class for errors raised by the pension engine."""


class InvalidInputError(PensionCalculationError, ValueError):
    """Inputs make the calculation impossible (past retirement, empty working span, ...)."""
