"""Click command for combining pull requests."""

import logging
import shlex
from dataclasses import replace

import click

from multi_merge_prs.core.context import DEFAULT_LIMIT, CombineContext, CombineOptions
from multi_merge_prs.core.errors import CombineError
from multi_merge_prs.core.workflow import run_workflow
from multi_merge_prs.output import user_error, user_output

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

COMMAND_NAME = "gh multi-merge-prs"


def build_invocation(
    query: str,
    limit: int,
    *,
    interactive: bool,
    skip_pr_check: bool,
    dry_run: bool,
    verbose: bool,
) -> str:
    """Render the options as the command line quoted in the combined PR body."""
    parts = [COMMAND_NAME, "--query", shlex.quote(query), "--limit", str(limit)]
    for flag, enabled in (
        ("--interactive", interactive),
        ("--skip-pr-check", skip_pr_check),
        ("--dry-run", dry_run),
        ("--verbose", verbose),
    ):
        if enabled:
            parts.append(flag)
    return " ".join(parts)


@click.command("multi-merge-prs", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gh-multi-merge-prs")
@click.option(
    "--query",
    default="",
    help='Sets the query used to find combinable PRs, e.g. --query "author:app/dependabot" '
    "to combine Dependabot PRs. Required.",
)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=DEFAULT_LIMIT,
    show_default=True,
    help="Sets the maximum number of PRs that will be combined.",
)
@click.option(
    "--interactive",
    is_flag=True,
    help="Prompt for selecting the PRs to merge.",
)
@click.option(
    "--skip-pr-check",
    is_flag=True,
    help="Combine matching PRs even if they are not passing checks.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Do not run any mutating git or gh command. Forces verbose output.",
)
@click.option("--verbose", is_flag=True, help="Print verbose output.")
@click.pass_context
def cli(
    ctx: click.Context,
    query: str,
    limit: int,
    interactive: bool,
    skip_pr_check: bool,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Combine multiple open pull requests into a single branch and PR.

    \b
    Example:
      gh multi-merge-prs --query "author:app/dependabot" --interactive
    """
    if dry_run:
        # force verbose mode when dry-running
        verbose = True

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    if not query:
        user_output("ERROR: --query is required")
        user_output(ctx.get_help())
        raise SystemExit(1)

    options = CombineOptions(
        query=query,
        limit=limit,
        interactive=interactive,
        skip_pr_check=skip_pr_check,
        dry_run=dry_run,
        verbose=verbose,
        invocation=build_invocation(
            query,
            limit,
            interactive=interactive,
            skip_pr_check=skip_pr_check,
            dry_run=dry_run,
            verbose=verbose,
        ),
    )

    # Only create context if not already provided (e.g., by tests)
    if isinstance(ctx.obj, CombineContext):
        combine_ctx = replace(ctx.obj, options=options)
    else:
        from multi_merge_prs.core.context import create_context

        combine_ctx = create_context(options)

    try:
        run_workflow(combine_ctx)
    except CombineError as e:
        user_error(str(e))
        raise SystemExit(1) from None
    except (KeyboardInterrupt, click.Abort):
        user_output("\nCancelled.")
        raise SystemExit(1) from None
