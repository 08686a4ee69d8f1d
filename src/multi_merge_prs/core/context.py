"""Immutable run configuration and dependency context.

The CLI builds one CombineContext per run and threads it through every
workflow step via Click's context system. Tests build their own with
context_for_test().
"""

import os
from dataclasses import dataclass
from pathlib import Path

from multi_merge_prs.gateway.git.abc import Git
from multi_merge_prs.gateway.github.abc import GitHub
from multi_merge_prs.gateway.prompt.abc import Prompter

DEFAULT_LIMIT = 50

# Environment variable naming a repository to target instead of the one in cwd
REPO_OVERRIDE_ENV = "GH_REPO"


@dataclass(frozen=True)
class CombineOptions:
    """Flags for one run, read-only after startup."""

    query: str
    limit: int = DEFAULT_LIMIT
    interactive: bool = False
    skip_pr_check: bool = False
    dry_run: bool = False
    verbose: bool = False
    invocation: str = ""  # Command line as typed, quoted in the combined PR body


@dataclass(frozen=True)
class CombineContext:
    """Immutable context holding all dependencies for a combine run.

    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: GitHub
    prompter: Prompter
    cwd: Path  # Current working directory at CLI invocation
    options: CombineOptions

    @property
    def dry_run(self) -> bool:
        return self.options.dry_run


def create_context(options: CombineOptions, *, cwd: Path | None = None) -> CombineContext:
    """Create production context with real implementations.

    In dry-run mode the real gateways are wrapped so that no mutating command
    is executed.

    Args:
        options: Parsed command-line options
        cwd: Working directory (defaults to the process cwd)

    Returns:
        CombineContext with real (or dry-run) implementations
    """
    from multi_merge_prs.gateway.git.dry_run import DryRunGit
    from multi_merge_prs.gateway.git.real import RealGit
    from multi_merge_prs.gateway.github.dry_run import DryRunGitHub
    from multi_merge_prs.gateway.github.real import RealGitHub
    from multi_merge_prs.gateway.prompt.real import ClickPrompter

    repo_override = os.environ.get(REPO_OVERRIDE_ENV) or None
    github: GitHub = RealGitHub(repo_override=repo_override)
    git: Git = RealGit()
    if options.dry_run:
        github = DryRunGitHub(github)
        git = DryRunGit()

    return CombineContext(
        git=git,
        github=github,
        prompter=ClickPrompter(),
        cwd=cwd if cwd is not None else Path.cwd(),
        options=options,
    )


def context_for_test(
    *,
    git: Git | None = None,
    github: GitHub | None = None,
    prompter: Prompter | None = None,
    options: CombineOptions | None = None,
    cwd: Path | None = None,
) -> CombineContext:
    """Create test context with optional pre-configured implementations.

    Uses fakes by default to avoid subprocess calls.

    Example:
        >>> from multi_merge_prs.gateway.git.fake import FakeGit
        >>> git = FakeGit(merge_failures={"dependabot/npm/foo": "conflict"})
        >>> ctx = context_for_test(git=git)
    """
    from multi_merge_prs.gateway.git.fake import FakeGit
    from multi_merge_prs.gateway.github.fake import FakeGitHub
    from multi_merge_prs.gateway.prompt.fake import FakePrompter

    return CombineContext(
        git=git if git is not None else FakeGit(),
        github=github if github is not None else FakeGitHub(),
        prompter=prompter if prompter is not None else FakePrompter(),
        cwd=cwd if cwd is not None else Path("/fake/repo"),
        options=options if options is not None else CombineOptions(query="is:pr"),
    )
