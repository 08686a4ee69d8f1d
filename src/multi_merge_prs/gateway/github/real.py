"""Production implementation of GitHub operations using the gh CLI."""

import json
import logging
from pathlib import Path

from multi_merge_prs.gateway.github.abc import GitHub
from multi_merge_prs.gateway.github.parsing import PR_LIST_FIELDS, parse_pull_request_list
from multi_merge_prs.gateway.github.types import PullRequest, RepoInfo
from multi_merge_prs.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

_PR_SUMMARY_TEMPLATE = "{{.title}} (#{{.number}}) @{{.author.login}}"


class RealGitHub(GitHub):
    """Production implementation using gh CLI.

    All GitHub operations execute actual gh commands via subprocess.
    """

    def __init__(self, *, repo_override: str | None) -> None:
        """Create RealGitHub.

        Args:
            repo_override: "<owner>/<name>" to target instead of the repository
                inferred from the working directory (the GH_REPO setting), or None
        """
        self._repo_override = repo_override

    def _pr_cmd(self, *args: str) -> list[str]:
        """Build a `gh pr ...` command, honoring the repository override."""
        cmd = ["gh", "pr", *args]
        if self._repo_override:
            cmd.extend(["--repo", self._repo_override])
        return cmd

    def _repo_view_cmd(self, *args: str) -> list[str]:
        """Build a `gh repo view ...` command, honoring the repository override."""
        cmd = ["gh", "repo", "view"]
        if self._repo_override:
            cmd.append(self._repo_override)
        cmd.extend(args)
        return cmd

    def get_repo_info(self, repo_root: Path) -> RepoInfo:
        """Get repository owner and name via `gh repo view --json owner,name`."""
        result = run_subprocess_with_context(
            self._repo_view_cmd("--json", "owner,name"),
            operation_context="get repository info",
            cwd=repo_root,
        )
        data = json.loads(result.stdout)
        return RepoInfo(owner=data["owner"]["login"], name=data["name"])

    def search_pull_requests(self, repo_root: Path, query: str, limit: int) -> list[PullRequest]:
        cmd = self._pr_cmd(
            "list", "--search", query, "--limit", str(limit), "--json", PR_LIST_FIELDS
        )
        result = run_subprocess_with_context(
            cmd,
            operation_context=f"list pull requests matching '{query}'",
            cwd=repo_root,
        )
        return parse_pull_request_list(result.stdout)

    def get_pr_checks(self, repo_root: Path, pr_number: int) -> str:
        result = run_subprocess_with_context(
            self._pr_cmd("checks", str(pr_number)),
            operation_context=f"get checks for PR #{pr_number}",
            cwd=repo_root,
        )
        return result.stdout

    def checkout_pr(self, repo_root: Path, pr_number: int) -> None:
        run_subprocess_with_context(
            self._pr_cmd("checkout", str(pr_number)),
            operation_context=f"checkout PR #{pr_number}",
            cwd=repo_root,
        )

    def view_pr_summary(self, repo_root: Path, pr_number: int) -> str:
        cmd = self._pr_cmd(
            "view",
            str(pr_number),
            "--json",
            "title,author,number",
            "--template",
            _PR_SUMMARY_TEMPLATE,
        )
        result = run_subprocess_with_context(
            cmd,
            operation_context=f"view PR #{pr_number}",
            cwd=repo_root,
        )
        return result.stdout.strip()

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
        cmd = self._pr_cmd(
            "create",
            "-B",
            base,
            "--head",
            head,
            "--title",
            title,
            "--body",
            body,
            "--label",
            label,
        )
        logger.debug("Creating PR: base=%s head=%s title=%s label=%s", base, head, title, label)
        result = run_subprocess_with_context(
            cmd,
            operation_context=f"create pull request for '{head}' against '{base}'",
            cwd=repo_root,
        )
        # Output format: https://github.com/owner/repo/pull/123
        return result.stdout.strip()

    def get_default_branch(self, repo_root: Path) -> str:
        result = run_subprocess_with_context(
            self._repo_view_cmd("--json", "defaultBranchRef", "--jq", ".defaultBranchRef.name"),
            operation_context="get default branch",
            cwd=repo_root,
        )
        return result.stdout.strip()

    def get_current_user_login(self, repo_root: Path) -> str:
        result = run_subprocess_with_context(
            ["gh", "api", "user", "--jq", ".login"],
            operation_context="get current user login",
            cwd=repo_root,
        )
        return result.stdout.strip()

    def get_fork_owner(self, repo_root: Path) -> str:
        result = run_subprocess_with_context(
            self._repo_view_cmd("--json", "owner", "--jq", ".owner.login"),
            operation_context="get repository owner",
            cwd=repo_root,
        )
        return result.stdout.strip()
