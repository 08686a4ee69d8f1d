"""Fake GitHub operations for testing."""

from pathlib import Path

from multi_merge_prs.gateway.github.abc import GitHub
from multi_merge_prs.gateway.github.types import PullRequest, RepoInfo


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        owner: str = "test-owner",
        name: str = "test-repo",
        pull_requests: list[PullRequest] | None = None,
        search_error: Exception | None = None,
        pr_checks: dict[int, str] | None = None,
        pr_check_errors: set[int] | None = None,
        pr_summaries: dict[int, str] | None = None,
        checkout_failures: set[int] | None = None,
        default_branch: str | None = "main",
        current_user_login: str | None = "test-user",
        fork_owner: str | None = "test-owner",
        create_pr_error: str | None = None,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            owner: Repository owner returned by get_repo_info()
            name: Repository name returned by get_repo_info()
            pull_requests: Pull requests returned by search (truncated to limit)
            search_error: Exception raised by search_pull_requests(), if set
            pr_checks: Mapping of PR number -> check report (default: passing report)
            pr_check_errors: PR numbers whose check query fails
            pr_summaries: Mapping of PR number -> summary (default: derived from title)
            checkout_failures: PR numbers whose checkout fails
            default_branch: Default branch name, or None to make the lookup fail
            current_user_login: Login of the authenticated user, or None to fail
            fork_owner: Owner of the repository, or None to fail
            create_pr_error: Error message raised by create_pr(), if set
        """
        self._owner = owner
        self._name = name
        self._pull_requests = pull_requests if pull_requests is not None else []
        self._search_error = search_error
        self._pr_checks = pr_checks if pr_checks is not None else {}
        self._pr_check_errors = pr_check_errors if pr_check_errors is not None else set()
        self._pr_summaries = pr_summaries if pr_summaries is not None else {}
        self._checkout_failures = checkout_failures if checkout_failures is not None else set()
        self._default_branch = default_branch
        self._current_user_login = current_user_login
        self._fork_owner = fork_owner
        self._create_pr_error = create_pr_error

        # Mutation tracking
        self._searches: list[tuple[str, int]] = []
        self._checked_prs: list[int] = []
        self._checked_out_prs: list[int] = []
        self._viewed_prs: list[int] = []
        self._created_prs: list[tuple[str, str, str, str, str]] = []

    def get_repo_info(self, repo_root: Path) -> RepoInfo:
        return RepoInfo(owner=self._owner, name=self._name)

    def search_pull_requests(self, repo_root: Path, query: str, limit: int) -> list[PullRequest]:
        self._searches.append((query, limit))
        if self._search_error is not None:
            raise self._search_error
        return self._pull_requests[:limit]

    def get_pr_checks(self, repo_root: Path, pr_number: int) -> str:
        self._checked_prs.append(pr_number)
        if pr_number in self._pr_check_errors:
            raise RuntimeError(f"no checks reported on PR #{pr_number}")
        return self._pr_checks.get(pr_number, "build\tpass\t1m2s\thttps://example.com/run\n")

    def checkout_pr(self, repo_root: Path, pr_number: int) -> None:
        if pr_number in self._checkout_failures:
            raise RuntimeError(f"Failed to checkout PR #{pr_number}")
        self._checked_out_prs.append(pr_number)

    def view_pr_summary(self, repo_root: Path, pr_number: int) -> str:
        self._viewed_prs.append(pr_number)
        if pr_number in self._pr_summaries:
            return self._pr_summaries[pr_number]
        for pr in self._pull_requests:
            if pr.number == pr_number:
                return f"{pr.title} (#{pr.number}) @dependabot"
        raise RuntimeError(f"no pull requests found for #{pr_number}")

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
        """Record PR creation in mutation tracking list."""
        if self._create_pr_error is not None:
            raise RuntimeError(self._create_pr_error)
        self._created_prs.append((base, head, title, body, label))
        return f"https://github.com/{self._owner}/{self._name}/pull/999"

    def get_default_branch(self, repo_root: Path) -> str:
        if self._default_branch is None:
            raise RuntimeError("Failed to get default branch")
        return self._default_branch

    def get_current_user_login(self, repo_root: Path) -> str:
        if self._current_user_login is None:
            raise RuntimeError("Failed to get current user login")
        return self._current_user_login

    def get_fork_owner(self, repo_root: Path) -> str:
        if self._fork_owner is None:
            raise RuntimeError("Failed to get repository owner")
        return self._fork_owner

    @property
    def searches(self) -> list[tuple[str, int]]:
        """Read-only access to (query, limit) search calls."""
        return self._searches

    @property
    def checked_prs(self) -> list[int]:
        return self._checked_prs

    @property
    def checked_out_prs(self) -> list[int]:
        return self._checked_out_prs

    @property
    def viewed_prs(self) -> list[int]:
        return self._viewed_prs

    @property
    def created_prs(self) -> list[tuple[str, str, str, str, str]]:
        """Read-only access to tracked PR creations for test assertions.

        Returns list of (base, head, title, body, label) tuples.
        """
        return self._created_prs
