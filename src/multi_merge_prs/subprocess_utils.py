"""Subprocess helpers shared by the real gateways."""

import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    *,
    operation_context: str,
    cwd: Path,
    check: bool = True,
    timeout: float | None = None,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, enriching failures with what we were trying to do.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human readable description of the operation
            (e.g., "checkout branch 'main'")
        cwd: Working directory for the command
        check: If True, a non-zero exit raises RuntimeError
        timeout: Optional timeout in seconds
        env: Optional environment for the child process

    Returns:
        The completed process with captured text output

    Raises:
        RuntimeError: If the command exits non-zero (when check=True), times out,
            or the executable is not installed
    """
    cmd_str = " ".join(cmd)
    logger.debug("Running: %s (cwd=%s)", cmd_str, cwd)
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
            env=env,
        )
    except FileNotFoundError as e:
        msg = f"Failed to {operation_context}: '{cmd[0]}' is not installed or not on PATH"
        raise RuntimeError(msg) from e
    except subprocess.TimeoutExpired as e:
        msg = f"Failed to {operation_context}: timed out after {timeout}s\nCommand: {cmd_str}"
        raise RuntimeError(msg) from e

    if check and result.returncode != 0:
        stderr = (result.stderr or "").strip()
        msg = f"Failed to {operation_context}\nCommand: {cmd_str}\nExit code: {result.returncode}"
        if stderr:
            msg += f"\nstderr: {stderr}"
        raise RuntimeError(msg)

    return result


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Return a copy of the environment that never blocks on an editor or credential prompt."""
    env = dict(os.environ)
    env["GIT_TERMINAL_PROMPT"] = "0"
    env["GIT_EDITOR"] = "true"
    return env
