"""Production implementation of Git operations using subprocess."""

import logging
import subprocess
from pathlib import Path

from multi_merge_prs.gateway.git.abc import Git
from multi_merge_prs.gateway.git.types import MergeError, MergeResult
from multi_merge_prs.subprocess_utils import (
    copied_env_for_git_subprocess,
    run_subprocess_with_context,
)

logger = logging.getLogger(__name__)

# Timeout in seconds for network-touching git operations (push, pull).
# Prevents indefinite hangs on network issues or credential prompts.
_GIT_NETWORK_TIMEOUT = 120


class RealGit(Git):
    """Production implementation using the git CLI.

    All operations execute actual git commands via subprocess.
    """

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        """Checkout a branch in the given directory."""
        run_subprocess_with_context(
            cmd=["git", "checkout", branch],
            operation_context=f"checkout branch '{branch}'",
            cwd=cwd,
        )

    def create_branch(self, cwd: Path, branch_name: str, base: str) -> None:
        """Create a new branch from base and check it out."""
        run_subprocess_with_context(
            cmd=["git", "checkout", "-b", branch_name, base],
            operation_context=f"create branch '{branch_name}' from '{base}'",
            cwd=cwd,
        )

    def delete_branch(self, cwd: Path, branch_name: str) -> None:
        """Force-delete a local branch."""
        run_subprocess_with_context(
            cmd=["git", "branch", "-D", branch_name],
            operation_context=f"delete branch '{branch_name}'",
            cwd=cwd,
        )

    def merge(self, cwd: Path, target: str, source: str) -> MergeResult | MergeError:
        """Checkout target and merge source into it with an auto-generated message."""
        try:
            self.checkout_branch(cwd, target)
        except RuntimeError as e:
            return MergeError(message=str(e))

        result = subprocess.run(
            ["git", "merge", source, "--no-edit"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
            env=copied_env_for_git_subprocess(),
        )
        if result.returncode != 0:
            output = (result.stderr or result.stdout or "").strip()
            return MergeError(message=f"git merge {source} into {target} failed: {output}")

        return MergeResult()

    def abort_merge(self, cwd: Path) -> None:
        """Abort an in-progress merge, or hard reset when no merge is recorded."""
        # LBYL: `git merge --abort` fails when MERGE_HEAD is absent
        merge_head = subprocess.run(
            ["git", "rev-parse", "-q", "--verify", "MERGE_HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if merge_head.returncode == 0:
            run_subprocess_with_context(
                cmd=["git", "merge", "--abort"],
                operation_context="abort merge",
                cwd=cwd,
            )
            return

        logger.debug("No merge in progress, resetting working copy to HEAD")
        run_subprocess_with_context(
            cmd=["git", "reset", "--hard", "HEAD"],
            operation_context="reset working copy after failed merge",
            cwd=cwd,
        )

    def push_branch(self, cwd: Path, remote: str, branch: str) -> None:
        """Push a branch to a remote."""
        run_subprocess_with_context(
            cmd=["git", "push", remote, branch],
            operation_context=f"push branch '{branch}' to remote '{remote}'",
            cwd=cwd,
            timeout=_GIT_NETWORK_TIMEOUT,
            env=copied_env_for_git_subprocess(),
        )

    def pull_branch(self, cwd: Path, remote: str, branch: str, *, ff_only: bool) -> None:
        """Pull a specific branch from a remote."""
        cmd = ["git", "pull", remote, branch]
        if ff_only:
            cmd.append("--ff-only")

        run_subprocess_with_context(
            cmd=cmd,
            operation_context=f"pull branch '{branch}' from remote '{remote}'",
            cwd=cwd,
            timeout=_GIT_NETWORK_TIMEOUT,
            env=copied_env_for_git_subprocess(),
        )
