"""Finding the pull requests to combine."""

import logging

from multi_merge_prs.core.context import CombineContext
from multi_merge_prs.core.errors import CheckStatusError, QueryError
from multi_merge_prs.gateway.github.types import PullRequest
from multi_merge_prs.output import user_output, user_warning

logger = logging.getLogger(__name__)

SELECT_PROMPT = "Please select the PRs to combine"

# Substrings that mark a line of `gh pr checks` output as not passing
_NOT_PASSING_MARKERS = ("fail", "pending")


def select_pull_requests(
    ctx: CombineContext, query: str, limit: int, *, interactive: bool
) -> list[PullRequest]:
    """Search for open PRs and optionally let the user narrow them down.

    Args:
        ctx: Combine context
        query: GitHub search filter
        limit: Maximum number of PRs to fetch
        interactive: If True, prompt the user to pick a subset

    Returns:
        The selected PRs in API order. The interactive prompt filters, it never
        reorders.

    Raises:
        QueryError: If the search fails or its response cannot be decoded
    """
    logger.debug("Fetching pull requests using query: %s", query)
    try:
        prs = ctx.github.search_pull_requests(ctx.cwd, query, limit)
    except (RuntimeError, ValueError) as e:
        raise QueryError(f"failed to fetch pull requests: {e}") from e

    if not interactive or not prs:
        return prs

    chosen = set(ctx.prompter.multi_select(SELECT_PROMPT, [pr.display for pr in prs]))
    return [pr for pr in prs if pr.display in chosen]


def is_passing_checks_report(report: str) -> bool:
    """Classify a `gh pr checks` report.

    Textual heuristic: any line containing "fail" or "pending" (case-sensitive)
    marks the PR as not passing. A check whose name merely contains one of the
    words (e.g. "failover-test") is also treated as not passing.
    """
    for line in report.splitlines():
        if any(marker in line for marker in _NOT_PASSING_MARKERS):
            return False
    return True


def check_passing(ctx: CombineContext, pr: PullRequest) -> bool:
    """Return whether all of a PR's checks pass.

    Raises:
        CheckStatusError: If the check report cannot be fetched
    """
    logger.debug("Checking if #%d is passing GitHub checks", pr.number)
    try:
        report = ctx.github.get_pr_checks(ctx.cwd, pr.number)
    except RuntimeError as e:
        raise CheckStatusError(f"could not fetch checks for #{pr.number}: {e}") from e
    return is_passing_checks_report(report)


def filter_passing_checks(ctx: CombineContext, prs: list[PullRequest]) -> list[PullRequest]:
    """Drop PRs whose checks are failing, pending, or unavailable.

    Skipped entirely when the skip_pr_check option is set.

    Returns:
        The PRs that passed, in input order

    Raises:
        CheckStatusError: If PRs were given and every one of them was dropped
    """
    user_output("Selected PRs:")
    if ctx.options.skip_pr_check:
        for pr in prs:
            user_output(f"  {pr.display}")
        return list(prs)

    confirmed: list[PullRequest] = []
    for pr in prs:
        try:
            passing = check_passing(ctx, pr)
        except CheckStatusError as e:
            user_warning(f"{e}, skipping PR")
            continue

        if passing:
            user_output(f"  {pr.display}")
            confirmed.append(pr)
        else:
            user_warning(f"Not all checks are passing for #{pr.number}, skipping PR")

    if prs and not confirmed:
        raise CheckStatusError("none of the selected PRs is passing its checks")
    return confirmed
