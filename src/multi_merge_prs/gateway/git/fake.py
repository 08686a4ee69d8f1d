"""Fake Git operations for testing."""

from pathlib import Path

from multi_merge_prs.gateway.git.abc import Git
from multi_merge_prs.gateway.git.types import MergeError, MergeResult


class FakeGit(Git):
    """In-memory fake implementation of Git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.

    Mutation Tracking:
    -----------------
    - checked_out_branches: Branches checked out via checkout_branch() or merge()
    - created_branches: (branch_name, base) tuples from create_branch()
    - deleted_branches: Branches deleted via delete_branch()
    - merges: (target, source) tuples for every attempted merge
    - abort_merge_count: Number of abort_merge() calls
    - pushed_branches: (remote, branch) tuples from push_branch()
    - pulled_branches: (remote, branch, ff_only) tuples from pull_branch()
    """

    def __init__(
        self,
        *,
        local_branches: list[str] | None = None,
        merge_failures: dict[str, str] | None = None,
        pull_failures: set[str] | None = None,
        checkout_failures: set[str] | None = None,
        create_branch_failures: set[str] | None = None,
        push_failure: str | None = None,
        abort_merge_failure: str | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            local_branches: Existing local branches; delete_branch() fails for others
            merge_failures: Mapping of source branch -> error message for merges that fail
            pull_failures: Remote names whose pulls fail
            checkout_failures: Branch names whose checkout fails
            create_branch_failures: Branch names whose creation fails
            push_failure: Error message raised by push_branch(), if set
            abort_merge_failure: Error message raised by abort_merge(), if set
        """
        self._local_branches = list(local_branches) if local_branches is not None else ["main"]
        self._merge_failures = merge_failures if merge_failures is not None else {}
        self._pull_failures = pull_failures if pull_failures is not None else set()
        self._checkout_failures = checkout_failures if checkout_failures is not None else set()
        self._create_branch_failures = (
            create_branch_failures if create_branch_failures is not None else set()
        )
        self._push_failure = push_failure
        self._abort_merge_failure = abort_merge_failure

        self._current_branch: str | None = None
        self._checked_out_branches: list[str] = []
        self._created_branches: list[tuple[str, str]] = []
        self._deleted_branches: list[str] = []
        self._merges: list[tuple[str, str]] = []
        self._abort_merge_count = 0
        self._pushed_branches: list[tuple[str, str]] = []
        self._pulled_branches: list[tuple[str, str, bool]] = []

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        if branch in self._checkout_failures:
            raise RuntimeError(f"Failed to checkout branch '{branch}'")
        self._current_branch = branch
        self._checked_out_branches.append(branch)

    def create_branch(self, cwd: Path, branch_name: str, base: str) -> None:
        if branch_name in self._create_branch_failures:
            raise RuntimeError(f"Failed to create branch '{branch_name}' from '{base}'")
        if branch_name in self._local_branches:
            raise RuntimeError(f"fatal: a branch named '{branch_name}' already exists")
        self._local_branches.append(branch_name)
        self._current_branch = branch_name
        self._created_branches.append((branch_name, base))

    def delete_branch(self, cwd: Path, branch_name: str) -> None:
        if branch_name not in self._local_branches:
            raise RuntimeError(f"error: branch '{branch_name}' not found")
        self._local_branches.remove(branch_name)
        self._deleted_branches.append(branch_name)

    def merge(self, cwd: Path, target: str, source: str) -> MergeResult | MergeError:
        self._merges.append((target, source))
        try:
            self.checkout_branch(cwd, target)
        except RuntimeError as e:
            return MergeError(message=str(e))
        if source in self._merge_failures:
            return MergeError(message=self._merge_failures[source])
        return MergeResult()

    def abort_merge(self, cwd: Path) -> None:
        self._abort_merge_count += 1
        if self._abort_merge_failure is not None:
            raise RuntimeError(self._abort_merge_failure)

    def push_branch(self, cwd: Path, remote: str, branch: str) -> None:
        if self._push_failure is not None:
            raise RuntimeError(self._push_failure)
        self._pushed_branches.append((remote, branch))

    def pull_branch(self, cwd: Path, remote: str, branch: str, *, ff_only: bool) -> None:
        self._pulled_branches.append((remote, branch, ff_only))
        if remote in self._pull_failures:
            raise RuntimeError(f"Failed to pull branch '{branch}' from remote '{remote}'")

    @property
    def current_branch(self) -> str | None:
        return self._current_branch

    @property
    def local_branches(self) -> list[str]:
        return list(self._local_branches)

    @property
    def checked_out_branches(self) -> list[str]:
        return self._checked_out_branches

    @property
    def created_branches(self) -> list[tuple[str, str]]:
        return self._created_branches

    @property
    def deleted_branches(self) -> list[str]:
        return self._deleted_branches

    @property
    def merges(self) -> list[tuple[str, str]]:
        return self._merges

    @property
    def abort_merge_count(self) -> int:
        return self._abort_merge_count

    @property
    def pushed_branches(self) -> list[tuple[str, str]]:
        return self._pushed_branches

    @property
    def pulled_branches(self) -> list[tuple[str, str, bool]]:
        """Read-only access to attempted pulls, including failed ones.

        Returns list of (remote, branch, ff_only) tuples.
        """
        return self._pulled_branches
