"""No-op Git implementation for dry-run mode."""

from pathlib import Path

from multi_merge_prs.gateway.git.abc import Git
from multi_merge_prs.gateway.git.types import MergeError, MergeResult
from multi_merge_prs.output import user_output


class DryRunGit(Git):
    """No-op implementation that prints what would happen instead of mutating the repository.

    Every operation of this gateway mutates the working copy, so nothing is
    delegated to a real implementation. Merges are reported as successful.

    Usage:
        noop_git = DryRunGit()

        # Prints message instead of creating branch
        noop_git.create_branch(cwd, "feature", "main")
    """

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        user_output(f"[DRY RUN] Would run: git checkout {branch}")

    def create_branch(self, cwd: Path, branch_name: str, base: str) -> None:
        user_output(f"[DRY RUN] Would run: git checkout -b {branch_name} {base}")

    def delete_branch(self, cwd: Path, branch_name: str) -> None:
        user_output(f"[DRY RUN] Would run: git branch -D {branch_name}")

    def merge(self, cwd: Path, target: str, source: str) -> MergeResult | MergeError:
        """Print dry-run message and report the merge as successful."""
        user_output(f"[DRY RUN] Would run: git checkout {target}")
        user_output(f"[DRY RUN] Would run: git merge {source} --no-edit")
        return MergeResult()

    def abort_merge(self, cwd: Path) -> None:
        user_output("[DRY RUN] Would run: git merge --abort")

    def push_branch(self, cwd: Path, remote: str, branch: str) -> None:
        user_output(f"[DRY RUN] Would run: git push {remote} {branch}")

    def pull_branch(self, cwd: Path, remote: str, branch: str, *, ff_only: bool) -> None:
        ff_flag = " --ff-only" if ff_only else ""
        user_output(f"[DRY RUN] Would run: git pull {remote} {branch}{ff_flag}")
