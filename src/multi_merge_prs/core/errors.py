"""Error taxonomy for the combine workflow.

Per-PR errors (CheckStatusError, MergeConflictError) are caught by the
workflow, reported as warnings, and the PR is skipped. Everything else aborts
the run.
"""


class CombineError(Exception):
    """Base class for errors raised by the combine workflow."""


class QueryError(CombineError):
    """Searching or viewing pull requests failed."""


class DefaultBranchError(CombineError):
    """The repository's default branch could not be resolved."""


class LocalSyncError(CombineError):
    """The local repository could not be updated, branched, or checked out."""


class CheckStatusError(CombineError):
    """A PR's check status could not be determined, or no PR passed its checks."""


class MergeConflictError(CombineError):
    """A PR's head branch could not be merged into the combined branch."""

    def __init__(self, pr_number: int, message: str) -> None:
        super().__init__(message)
        self.pr_number = pr_number


class SubmissionError(CombineError):
    """Pushing the combined branch or creating the combined PR failed."""
