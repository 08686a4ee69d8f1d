"""Creating the combined pull request."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from multi_merge_prs.core.context import CombineContext
from multi_merge_prs.core.errors import SubmissionError
from multi_merge_prs.output import user_output, user_success

logger = logging.getLogger(__name__)

TOOL_NAME = "gh-multi-merge-prs"
PR_LABEL = "dependencies"
PUSH_REMOTE = "origin"

# Head owner used when the authenticated user cannot be looked up
FALLBACK_HEAD_OWNER = "origin"

CONFIRM_SUBMIT_PROMPT = "Do you want to submit the combined PR?"
TITLE_PROMPT = "Do you want to change the PR title?"
BASE_PROMPT = "Which branch do you want to send the PR against?"
HEAD_PROMPT = "Which remote do you want to send the PR against?"


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of the submission step. url is None when the user declined."""

    url: str | None
    title: str | None = None
    base: str | None = None
    head: str | None = None

    @property
    def created(self) -> bool:
        return self.url is not None


def build_pr_body(invocation: str, summaries: Sequence[str], closes: Sequence[int]) -> str:
    """Build the combined PR description.

    Args:
        invocation: Command line that produced the PR
        summaries: One display line per merged PR
        closes: Numbers of the merged PRs

    Returns:
        Markdown body listing the combined PRs and the issues they close
    """
    lines = [
        f"This PR was created by the {TOOL_NAME} extension, running: `{invocation}`",
        "",
        "It combines the following PRs:",
        "",
    ]
    lines.extend(f"- {summary}" for summary in summaries)
    lines.extend(["", "## Related Issues:", ""])
    lines.extend(f"- Closes #{number}" for number in closes)
    return "\n".join(lines) + "\n"


def _current_user_login(ctx: CombineContext) -> str:
    try:
        return ctx.github.get_current_user_login(ctx.cwd)
    except RuntimeError as e:
        logger.warning("Could not determine current user, using '%s': %s", FALLBACK_HEAD_OWNER, e)
        return FALLBACK_HEAD_OWNER


def _choose_head(ctx: CombineContext, branch_name: str) -> str:
    """Let the user pick whether the PR head lives on the fork owner or the current user."""
    try:
        fork_owner = ctx.github.get_fork_owner(ctx.cwd)
    except RuntimeError as e:
        raise SubmissionError(f"failed to determine repository owner: {e}") from e
    logger.debug("Fork detected: %s", fork_owner)

    user_head = f"{_current_user_login(ctx)}:{branch_name}"
    fork_head = f"{fork_owner}:{branch_name}"
    options = [fork_head] if fork_head == user_head else [fork_head, user_head]
    return ctx.prompter.select(HEAD_PROMPT, options, default=user_head)


def submit(
    ctx: CombineContext, branch_name: str, title: str, body: str, *, default_base: str
) -> SubmitOutcome:
    """Confirm with the user, push the combined branch, and open the PR.

    Args:
        ctx: Combine context
        branch_name: Combined branch to push
        title: Suggested PR title
        body: PR body
        default_base: Suggested base branch

    Returns:
        SubmitOutcome, with url None if the user declined

    Raises:
        SubmissionError: If pushing or creating the PR fails. The local branch and
            its merges are left in place.
    """
    if not ctx.prompter.confirm(CONFIRM_SUBMIT_PROMPT, default=False):
        user_output("Combined PR not submitted.")
        return SubmitOutcome(url=None)

    pr_title = ctx.prompter.text(TITLE_PROMPT, default=title)
    base = ctx.prompter.text(BASE_PROMPT, default=default_base)

    logger.debug("Pushing branch %s", branch_name)
    try:
        ctx.git.push_branch(ctx.cwd, PUSH_REMOTE, branch_name)
    except RuntimeError as e:
        raise SubmissionError(f"failed to push {branch_name} to {PUSH_REMOTE}: {e}") from e
    user_success(f"Branch {branch_name} pushed to {PUSH_REMOTE}")

    head = _choose_head(ctx, branch_name)

    user_output("Creating combined PR:")
    user_output(f" - Head branch: {head}")
    user_output(f" - Base branch: {base}")
    user_output(f" - Title: {pr_title}")
    user_output(f" - Labels: {PR_LABEL}")
    logger.debug("Body:\n%s", body)

    try:
        url = ctx.github.create_pr(
            ctx.cwd, base=base, head=head, title=pr_title, body=body, label=PR_LABEL
        )
    except RuntimeError as e:
        raise SubmissionError(f"failed to create the combined PR: {e}") from e

    user_success(f"Done! The combined PR has been sent: {url}")
    return SubmitOutcome(url=url, title=pr_title, base=base, head=head)
