"""Tests for production context construction."""

from pathlib import Path

import pytest

from multi_merge_prs.core.context import CombineOptions, create_context
from multi_merge_prs.gateway.git.dry_run import DryRunGit
from multi_merge_prs.gateway.git.real import RealGit
from multi_merge_prs.gateway.github.dry_run import DryRunGitHub
from multi_merge_prs.gateway.github.real import RealGitHub
from multi_merge_prs.gateway.prompt.real import ClickPrompter


def test_create_context_uses_real_gateways(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GH_REPO", raising=False)

    ctx = create_context(CombineOptions(query="is:pr"), cwd=Path("/repo"))

    assert isinstance(ctx.git, RealGit)
    assert isinstance(ctx.github, RealGitHub)
    assert isinstance(ctx.prompter, ClickPrompter)
    assert ctx.cwd == Path("/repo")
    assert ctx.dry_run is False


def test_dry_run_wraps_gateways() -> None:
    ctx = create_context(CombineOptions(query="is:pr", dry_run=True), cwd=Path("/repo"))

    assert isinstance(ctx.git, DryRunGit)
    assert isinstance(ctx.github, DryRunGitHub)
    assert ctx.dry_run is True


def test_repo_override_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GH_REPO", "octo/other")

    ctx = create_context(CombineOptions(query="is:pr"), cwd=Path("/repo"))

    assert isinstance(ctx.github, RealGitHub)
    assert ctx.github._pr_cmd("checks", "1") == ["gh", "pr", "checks", "1", "--repo", "octo/other"]
