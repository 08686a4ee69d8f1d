"""Discriminated union types for Git merge operations.

MergeResult | MergeError lets callers treat a failed merge as an expected
outcome rather than an exception.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MergeResult:
    """Success result from merging a branch."""


@dataclass(frozen=True)
class MergeError:
    """Error result from merging a branch (conflict or otherwise)."""

    message: str

    @property
    def error_type(self) -> str:
        return "merge-failed"
