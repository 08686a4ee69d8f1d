"""Tests for building the combined branch."""

import pytest

from multi_merge_prs.core.context import CombineOptions, context_for_test
from multi_merge_prs.core.errors import DefaultBranchError, LocalSyncError, QueryError
from multi_merge_prs.core.orchestrator import combine, update_default_branch
from multi_merge_prs.core.titles import combine_titles, combined_branch_name
from multi_merge_prs.gateway.git.fake import FakeGit
from multi_merge_prs.gateway.github.fake import FakeGitHub
from multi_merge_prs.gateway.github.types import PullRequest


def _pr(number: int, package: str) -> PullRequest:
    return PullRequest(
        number=number,
        title=f"chore(deps): bump {package} from 1.0.0 to 1.0.1",
        head_ref_name=f"dependabot/npm/{package}-1.0.1",
        url=f"https://github.com/test-owner/test-repo/pull/{number}",
    )


PRS = [_pr(1, "foo"), _pr(2, "bar"), _pr(3, "baz")]
BRANCH = combined_branch_name(combine_titles(PRS))


def test_combine_merges_every_pr_in_order() -> None:
    git = FakeGit()
    github = FakeGitHub(pull_requests=PRS)
    ctx = context_for_test(git=git, github=github)

    result = combine(ctx, PRS)

    assert result.default_branch == "main"
    assert result.branch_name == BRANCH
    assert result.title == (
        "chore(deps): bump foo from 1.0.0 to 1.0.1, bar from 1.0.0 to 1.0.1, baz from 1.0.0 to 1.0.1"
    )
    assert result.merged == tuple(PRS)
    assert result.skipped == ()

    assert git.pulled_branches == [("origin", "main", True)]
    assert git.created_branches == [(BRANCH, "main")]
    assert git.merges == [(BRANCH, pr.head_ref_name) for pr in PRS]
    assert github.checked_out_prs == [1, 2, 3]
    assert git.abort_merge_count == 0


def test_merge_failure_skips_only_that_pr() -> None:
    """A conflict on the second PR is aborted once and the third PR still merges."""
    git = FakeGit(merge_failures={PRS[1].head_ref_name: "CONFLICT (content)"})
    github = FakeGitHub(pull_requests=PRS)
    ctx = context_for_test(git=git, github=github)

    result = combine(ctx, PRS)

    assert result.merged == (PRS[0], PRS[2])
    assert result.skipped == (PRS[1],)
    assert git.abort_merge_count == 1
    assert [source for _, source in git.merges] == [pr.head_ref_name for pr in PRS]
    assert github.viewed_prs == [1, 3]


def test_every_merge_failing_is_not_an_error() -> None:
    git = FakeGit(merge_failures={pr.head_ref_name: "conflict" for pr in PRS})
    ctx = context_for_test(git=git, github=FakeGitHub(pull_requests=PRS))

    result = combine(ctx, PRS)

    assert result.merged == ()
    assert result.skipped == tuple(PRS)
    assert git.abort_merge_count == 3
    assert "Closes" not in result.body


def test_abort_failure_is_fatal() -> None:
    git = FakeGit(
        merge_failures={PRS[0].head_ref_name: "conflict"},
        abort_merge_failure="fatal: could not reset",
    )
    ctx = context_for_test(git=git, github=FakeGitHub(pull_requests=PRS))

    with pytest.raises(LocalSyncError, match="failed to abort merge of #1"):
        combine(ctx, PRS)


def test_pr_checkout_failure_is_fatal() -> None:
    git = FakeGit()
    github = FakeGitHub(pull_requests=PRS, checkout_failures={2})
    ctx = context_for_test(git=git, github=github)

    with pytest.raises(LocalSyncError, match="failed to checkout #2"):
        combine(ctx, PRS)

    assert [source for _, source in git.merges] == [PRS[0].head_ref_name]


def test_summary_failure_raises_query_error() -> None:
    github = FakeGitHub(pull_requests=PRS[:1], pr_summaries={})
    ctx = context_for_test(github=github)

    with pytest.raises(QueryError, match="failed to view #2"):
        combine(ctx, PRS[:2])


def test_default_branch_failure_stops_before_git() -> None:
    git = FakeGit()
    ctx = context_for_test(git=git, github=FakeGitHub(default_branch=None))

    with pytest.raises(DefaultBranchError):
        combine(ctx, PRS)

    assert git.checked_out_branches == []


def test_empty_default_branch_is_an_error() -> None:
    ctx = context_for_test(github=FakeGitHub(default_branch=""))

    with pytest.raises(DefaultBranchError, match="empty default branch"):
        combine(ctx, PRS)


def test_existing_combined_branch_is_recreated() -> None:
    git = FakeGit(local_branches=["main", BRANCH])
    ctx = context_for_test(git=git, github=FakeGitHub(pull_requests=PRS))

    combine(ctx, PRS)

    assert git.deleted_branches == [BRANCH]
    assert git.created_branches == [(BRANCH, "main")]


def test_missing_combined_branch_delete_is_ignored() -> None:
    git = FakeGit(local_branches=["main"])
    ctx = context_for_test(git=git, github=FakeGitHub(pull_requests=PRS))

    combine(ctx, PRS)

    assert git.deleted_branches == []
    assert git.created_branches == [(BRANCH, "main")]


def test_create_branch_failure_is_fatal() -> None:
    git = FakeGit(create_branch_failures={BRANCH})
    ctx = context_for_test(git=git, github=FakeGitHub(pull_requests=PRS))

    with pytest.raises(LocalSyncError, match="failed to create"):
        combine(ctx, PRS)

    assert git.merges == []


def test_body_lists_merged_prs_and_closes_them() -> None:
    github = FakeGitHub(
        pull_requests=PRS[:2],
        pr_summaries={1: "Bump foo (#1) @dependabot", 2: "Bump bar (#2) @dependabot"},
    )
    options = CombineOptions(query="is:pr", invocation="gh multi-merge-prs --query is:pr")
    ctx = context_for_test(github=github, options=options)

    result = combine(ctx, PRS[:2])

    assert "running: `gh multi-merge-prs --query is:pr`" in result.body
    assert "- Bump foo (#1) @dependabot\n- Bump bar (#2) @dependabot\n" in result.body
    assert result.body.endswith("- Closes #1\n- Closes #2\n")


class TestUpdateDefaultBranch:
    def test_falls_back_to_upstream(self) -> None:
        git = FakeGit(pull_failures={"origin"})
        ctx = context_for_test(git=git)

        update_default_branch(ctx, "main")

        assert git.checked_out_branches == ["main"]
        assert git.pulled_branches == [("origin", "main", True), ("upstream", "main", True)]

    def test_both_remotes_failing_is_fatal(self) -> None:
        git = FakeGit(pull_failures={"origin", "upstream"})
        ctx = context_for_test(git=git)

        with pytest.raises(LocalSyncError, match="failed to update main"):
            update_default_branch(ctx, "main")

    def test_checkout_failure_is_fatal(self) -> None:
        git = FakeGit(checkout_failures={"main"})
        ctx = context_for_test(git=git)

        with pytest.raises(LocalSyncError, match="failed to checkout main"):
            update_default_branch(ctx, "main")

        assert git.pulled_branches == []
