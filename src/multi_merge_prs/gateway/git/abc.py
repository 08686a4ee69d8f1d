"""Abstract base class for the local Git operations used by the combine workflow."""

from abc import ABC, abstractmethod
from pathlib import Path

from multi_merge_prs.gateway.git.types import MergeError, MergeResult


class Git(ABC):
    """Abstract interface for local repository mutations.

    All implementations (real, fake, dry-run) must implement this interface.
    """

    @abstractmethod
    def checkout_branch(self, cwd: Path, branch: str) -> None:
        """Checkout a branch in the given directory.

        Args:
            cwd: Working directory to run command in
            branch: Branch name to checkout

        Raises:
            RuntimeError: If git checkout fails
        """
        ...

    @abstractmethod
    def create_branch(self, cwd: Path, branch_name: str, base: str) -> None:
        """Create a new branch from base and check it out.

        Args:
            cwd: Working directory to run command in
            branch_name: Name of the branch to create
            base: Branch to base the new branch on

        Raises:
            RuntimeError: If the branch cannot be created
        """
        ...

    @abstractmethod
    def delete_branch(self, cwd: Path, branch_name: str) -> None:
        """Force-delete a local branch.

        Raises:
            RuntimeError: If the branch does not exist or cannot be deleted
        """
        ...

    @abstractmethod
    def merge(self, cwd: Path, target: str, source: str) -> MergeResult | MergeError:
        """Merge source into target without opening an editor.

        Checks out target, then runs `git merge <source> --no-edit`.

        Args:
            cwd: Working directory
            target: Branch receiving the merge
            source: Branch being merged

        Returns:
            MergeResult on success, MergeError when the merge (or the checkout
            of target) fails. A failed merge is left in progress.
        """
        ...

    @abstractmethod
    def abort_merge(self, cwd: Path) -> None:
        """Reset the working copy to its pre-merge state.

        Raises:
            RuntimeError: If the reset fails
        """
        ...

    @abstractmethod
    def push_branch(self, cwd: Path, remote: str, branch: str) -> None:
        """Push a branch to a remote.

        Raises:
            RuntimeError: If git push fails
        """
        ...

    @abstractmethod
    def pull_branch(self, cwd: Path, remote: str, branch: str, *, ff_only: bool) -> None:
        """Pull a specific branch from a remote.

        Args:
            cwd: Working directory
            remote: Remote name (e.g., "origin")
            branch: Branch name to pull
            ff_only: If True, use --ff-only to refuse anything but a fast-forward

        Raises:
            RuntimeError: If git pull fails
        """
        ...
