"""End-to-end combine run: select, filter, combine, submit."""

import logging
from dataclasses import dataclass

from multi_merge_prs.core.context import CombineContext
from multi_merge_prs.core.orchestrator import CombineResult, combine
from multi_merge_prs.core.selection import filter_passing_checks, select_pull_requests
from multi_merge_prs.core.submission import SubmitOutcome, submit
from multi_merge_prs.output import user_output, user_warning

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkflowResult:
    """What a run did. combine_result is None when nothing was selected."""

    combine_result: CombineResult | None
    submit_outcome: SubmitOutcome | None


def run_workflow(ctx: CombineContext) -> WorkflowResult:
    """Run the whole combine workflow.

    Raises:
        CombineError: Any fatal error from the individual steps
    """
    options = ctx.options
    logger.debug("Dry-run mode: %s", options.dry_run)

    try:
        repo = ctx.github.get_repo_info(ctx.cwd)
    except (RuntimeError, ValueError) as e:
        logger.debug("Could not determine current repository: %s", e)
    else:
        user_output(f"Current repository is {repo.owner}/{repo.name}")

    selected = select_pull_requests(
        ctx, options.query, options.limit, interactive=options.interactive
    )
    if not selected:
        user_output("No PRs selected to merge. Exiting")
        return WorkflowResult(combine_result=None, submit_outcome=None)

    confirmed = filter_passing_checks(ctx, selected)
    result = combine(ctx, confirmed)
    if not result.merged:
        user_warning(f"No PR merged into {result.branch_name}, the combined PR will be empty")

    outcome = submit(
        ctx, result.branch_name, result.title, result.body, default_base=result.default_branch
    )
    return WorkflowResult(combine_result=result, submit_outcome=outcome)
