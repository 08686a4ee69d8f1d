"""No-op GitHub wrapper for dry-run mode."""

from pathlib import Path

from multi_merge_prs.gateway.github.abc import GitHub
from multi_merge_prs.gateway.github.types import PullRequest, RepoInfo
from multi_merge_prs.output import user_output


class DryRunGitHub(GitHub):
    """No-op wrapper that prevents execution of mutating GitHub operations.

    Mutations (checkout, PR creation) print what would happen. Queries are
    delegated to the wrapped implementation so the dry run still shows which
    PRs would be combined.

    Usage:
        real_github = RealGitHub(repo_override=None)
        noop_github = DryRunGitHub(real_github)
    """

    def __init__(self, wrapped: GitHub) -> None:
        """Create a dry-run wrapper around a GitHub implementation.

        Args:
            wrapped: The GitHub implementation to wrap (usually RealGitHub)
        """
        self._wrapped = wrapped

    def checkout_pr(self, repo_root: Path, pr_number: int) -> None:
        """Print dry-run message instead of checking out the PR."""
        user_output(f"[DRY RUN] Would run: gh pr checkout {pr_number}")

    def create_pr(
        self,
        repo_root: Path,
        *,
        base: str,
        head: str,
        title: str,
        body: str,
        label: str,
    ) -> str:
        """Print dry-run message instead of creating the PR."""
        user_output(
            f"[DRY RUN] Would run: gh pr create -B {base} --head {head} "
            f"--title {title!r} --label {label}"
        )
        return "(dry run)"

    # ============================================================================
    # Query Operations (pass-through delegation)
    # ============================================================================

    def get_repo_info(self, repo_root: Path) -> RepoInfo:
        return self._wrapped.get_repo_info(repo_root)

    def search_pull_requests(self, repo_root: Path, query: str, limit: int) -> list[PullRequest]:
        return self._wrapped.search_pull_requests(repo_root, query, limit)

    def get_pr_checks(self, repo_root: Path, pr_number: int) -> str:
        return self._wrapped.get_pr_checks(repo_root, pr_number)

    def view_pr_summary(self, repo_root: Path, pr_number: int) -> str:
        return self._wrapped.view_pr_summary(repo_root, pr_number)

    def get_default_branch(self, repo_root: Path) -> str:
        return self._wrapped.get_default_branch(repo_root)

    def get_current_user_login(self, repo_root: Path) -> str:
        return self._wrapped.get_current_user_login(repo_root)

    def get_fork_owner(self, repo_root: Path) -> str:
        return self._wrapped.get_fork_owner(repo_root)
