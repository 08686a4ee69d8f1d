"""Abstract base class for the GitHub operations used by the combine workflow."""

from abc import ABC, abstractmethod
from pathlib import Path

from multi_merge_prs.gateway.github.types import PullRequest, RepoInfo


class GitHub(ABC):
    """Abstract interface for GitHub operations.

    All implementations (real, fake, dry-run) must implement this interface.
    Failures of the underlying gh command surface as RuntimeError.
    """

    @abstractmethod
    def get_repo_info(self, repo_root: Path) -> RepoInfo:
        """Get repository owner and name.

        Raises:
            RuntimeError: If gh command fails
        """
        ...

    @abstractmethod
    def search_pull_requests(self, repo_root: Path, query: str, limit: int) -> list[PullRequest]:
        """List open pull requests matching a search query.

        Args:
            repo_root: Repository root directory
            query: GitHub search filter (e.g., "author:app/dependabot")
            limit: Maximum number of pull requests to return

        Returns:
            Pull requests in API order

        Raises:
            RuntimeError: If gh command fails
            ValueError: If the response cannot be decoded
        """
        ...

    @abstractmethod
    def get_pr_checks(self, repo_root: Path, pr_number: int) -> str:
        """Get the line-oriented check report for a pull request.

        Raises:
            RuntimeError: If gh command fails (including when no checks are configured)
        """
        ...

    @abstractmethod
    def checkout_pr(self, repo_root: Path, pr_number: int) -> None:
        """Check out a pull request's head branch locally.

        Raises:
            RuntimeError: If gh command fails
        """
        ...

    @abstractmethod
    def view_pr_summary(self, repo_root: Path, pr_number: int) -> str:
        """Get a one-line display summary: "<title> (#<number>) @<author>".

        Raises:
            RuntimeError: If gh command fails
        """
        ...

    @abstractmethod
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
        """Create a pull request.

        Args:
            repo_root: Repository root directory
            base: Target base branch
            head: Source branch, optionally qualified as "<owner>:<branch>"
            title: PR title
            body: PR body (markdown)
            label: Label to apply

        Returns:
            URL of the created pull request

        Raises:
            RuntimeError: If gh command fails
        """
        ...

    @abstractmethod
    def get_default_branch(self, repo_root: Path) -> str:
        """Get the repository's default branch name.

        Raises:
            RuntimeError: If gh command fails
        """
        ...

    @abstractmethod
    def get_current_user_login(self, repo_root: Path) -> str:
        """Get the login of the authenticated user.

        Raises:
            RuntimeError: If gh command fails
        """
        ...

    @abstractmethod
    def get_fork_owner(self, repo_root: Path) -> str:
        """Get the owner login of the current repository.

        Raises:
            RuntimeError: If gh command fails
        """
        ...
