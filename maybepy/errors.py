from __future__ import annotations


class ContractViolation(Exception):
    """Raised when a chain step is configured to treat absence as a failure."""

    def __init__(self, message: str, op: str = ""):
        super().__init__(message); self.message = message; self.op = op


class ProviderReturnedNone(ContractViolation):
    """Raised by ``or_else_async`` when the fallback provider yields ``None``."""
