"""Building the combined branch.

Updates the default branch, cuts the combined branch from it, and merges each
confirmed PR's head branch in order. A PR that fails to merge is aborted and
skipped; everything else that fails here is fatal.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from multi_merge_prs.core.context import CombineContext
from multi_merge_prs.core.errors import (
    DefaultBranchError,
    LocalSyncError,
    MergeConflictError,
    QueryError,
)
from multi_merge_prs.core.submission import build_pr_body
from multi_merge_prs.core.titles import combine_titles, combined_branch_name
from multi_merge_prs.gateway.git.types import MergeError
from multi_merge_prs.gateway.github.types import PullRequest
from multi_merge_prs.output import user_success, user_warning

logger = logging.getLogger(__name__)

# Remotes tried, in order, when updating the default branch (upstream covers forks)
SYNC_REMOTES = ("origin", "upstream")


@dataclass(frozen=True)
class CombineResult:
    """Outcome of building the combined branch."""

    branch_name: str
    default_branch: str
    title: str
    merged: tuple[PullRequest, ...]
    skipped: tuple[PullRequest, ...]
    body: str


def resolve_default_branch(ctx: CombineContext) -> str:
    """Raises DefaultBranchError if the default branch cannot be determined."""
    try:
        branch = ctx.github.get_default_branch(ctx.cwd)
    except RuntimeError as e:
        raise DefaultBranchError(f"failed to resolve the default branch: {e}") from e
    if not branch:
        raise DefaultBranchError("the repository reported an empty default branch")
    logger.debug("Default branch is %s", branch)
    return branch


def update_default_branch(ctx: CombineContext, branch: str) -> None:
    """Checkout branch and fast-forward it from origin, falling back to upstream.

    Raises:
        LocalSyncError: If the checkout fails or neither remote can fast-forward
    """
    try:
        ctx.git.checkout_branch(ctx.cwd, branch)
    except RuntimeError as e:
        raise LocalSyncError(f"failed to checkout {branch}: {e}") from e

    errors: list[str] = []
    for remote in SYNC_REMOTES:
        try:
            ctx.git.pull_branch(ctx.cwd, remote, branch, ff_only=True)
        except RuntimeError as e:
            logger.debug("Failed to pull %s from %s: %s", branch, remote, e)
            errors.append(f"{remote}: {e}")
            continue
        user_success(f"Branch {branch} updated from {remote}")
        return

    raise LocalSyncError(f"failed to update {branch}:\n" + "\n".join(errors))


def create_combined_branch(ctx: CombineContext, branch_name: str, base: str) -> None:
    """Recreate branch_name from base, dropping any previous branch of that name.

    Raises:
        LocalSyncError: If the branch cannot be created
    """
    try:
        ctx.git.delete_branch(ctx.cwd, branch_name)
    except RuntimeError as e:
        logger.debug("Failed to delete branch %s, ignoring: %s", branch_name, e)

    try:
        ctx.git.create_branch(ctx.cwd, branch_name, base)
    except RuntimeError as e:
        raise LocalSyncError(f"failed to create {branch_name} from {base}: {e}") from e
    user_success(f"Branch {branch_name} created from {base}")


def merge_pull_request(ctx: CombineContext, branch_name: str, pr: PullRequest) -> None:
    """Check out the PR and merge its head branch into branch_name.

    Raises:
        LocalSyncError: If the PR cannot be checked out, or a failed merge cannot
            be aborted
        MergeConflictError: If the merge failed and was aborted
    """
    try:
        ctx.github.checkout_pr(ctx.cwd, pr.number)
    except RuntimeError as e:
        raise LocalSyncError(f"failed to checkout #{pr.number}: {e}") from e

    result = ctx.git.merge(ctx.cwd, branch_name, pr.head_ref_name)
    if isinstance(result, MergeError):
        try:
            ctx.git.abort_merge(ctx.cwd)
        except RuntimeError as e:
            raise LocalSyncError(f"failed to abort merge of #{pr.number}: {e}") from e
        raise MergeConflictError(pr.number, result.message)

    user_success(f"Branch {pr.head_ref_name} merged into {branch_name}")


def combine(ctx: CombineContext, confirmed_prs: Sequence[PullRequest]) -> CombineResult:
    """Build the combined branch from the confirmed PRs.

    Args:
        ctx: Combine context
        confirmed_prs: Non-empty PRs that passed selection and check filtering

    Returns:
        CombineResult. Having no PR merge successfully is not an error.

    Raises:
        DefaultBranchError: If the default branch cannot be resolved
        LocalSyncError: If the local repository cannot be prepared
        QueryError: If a merged PR's summary cannot be fetched
    """
    default_branch = resolve_default_branch(ctx)
    update_default_branch(ctx, default_branch)

    title = combine_titles(confirmed_prs)
    branch_name = combined_branch_name(title)
    create_combined_branch(ctx, branch_name, default_branch)

    merged: list[PullRequest] = []
    skipped: list[PullRequest] = []
    summaries: list[str] = []
    for pr in confirmed_prs:
        try:
            merge_pull_request(ctx, branch_name, pr)
        except MergeConflictError as e:
            logger.debug("Merge of #%d failed: %s", e.pr_number, e)
            user_warning(
                f"Pull request #{pr.number} failed to merge into {branch_name}, skipping PR"
            )
            skipped.append(pr)
            continue

        try:
            summaries.append(ctx.github.view_pr_summary(ctx.cwd, pr.number))
        except RuntimeError as e:
            raise QueryError(f"failed to view #{pr.number}: {e}") from e
        merged.append(pr)

    body = build_pr_body(ctx.options.invocation, summaries, [pr.number for pr in merged])
    return CombineResult(
        branch_name=branch_name,
        default_branch=default_branch,
        title=title,
        merged=tuple(merged),
        skipped=tuple(skipped),
        body=body,
    )
