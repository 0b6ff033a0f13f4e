# =============================================================================
# errors.py — WGE Error Kinds and Status Value
# =============================================================================
#
# Four error kinds, each detected synchronously and reported once:
#
#   InvalidParameter      a WaveParameters invariant is violated
#   UnrepresentableCycle  floor(sample_rate / frequency) == 0
#   UnsupportedOperation  single-cycle export requested for non-sine audio
#   IOFailure             destination cannot be opened, or a write fails
#
# Generators raise these.  validate() and the two SSM writers catch them and
# return a Result instead, so a caller can branch on truthiness without a
# try/except.  Nothing in WGE ever calls sys.exit().

from __future__ import annotations
from typing import NamedTuple, Optional


class WaveError(Exception):
    """Base class for every error WGE reports."""

    kind = "WaveError"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field   = field


class InvalidParameter(WaveError, ValueError):
    kind = "InvalidParameter"


class UnrepresentableCycle(WaveError, ValueError):
    kind = "UnrepresentableCycle"


class UnsupportedOperation(WaveError):
    kind = "UnsupportedOperation"


class IOFailure(WaveError, OSError):
    kind = "IOFailure"


class Result(NamedTuple):
    """
    Success flag plus descriptive message.

    Truthiness follows ``ok`` so ``if not validate(params): ...`` reads the
    way it does for a plain bool.
    """
    ok:      bool
    message: str = ""
    error:   Optional[WaveError] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str = "") -> "Result":
        return cls(True, message, None)

    @classmethod
    def failure(cls, error: WaveError) -> "Result":
        return cls(False, f"{error.kind}: {error.message}", error)
