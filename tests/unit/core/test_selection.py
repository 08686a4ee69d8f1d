"""Tests for PR search, interactive selection, and check filtering."""

import pytest

from multi_merge_prs.core.context import CombineOptions, context_for_test
from multi_merge_prs.core.errors import CheckStatusError, QueryError
from multi_merge_prs.core.selection import (
    SELECT_PROMPT,
    filter_passing_checks,
    is_passing_checks_report,
    select_pull_requests,
)
from multi_merge_prs.gateway.git.fake import FakeGit
from multi_merge_prs.gateway.github.fake import FakeGitHub
from multi_merge_prs.gateway.github.types import PullRequest
from multi_merge_prs.gateway.prompt.fake import FakePrompter

FAILING_REPORT = "build\tfail\t1m2s\thttps://example.com/run/1\n"
PENDING_REPORT = "lint\tpending\t0\thttps://example.com/run/2\n"


def _pr(number: int) -> PullRequest:
    return PullRequest(
        number=number,
        title=f"chore(deps): bump pkg{number} from 1.0.0 to 1.0.1",
        head_ref_name=f"dependabot/pip/pkg{number}-1.0.1",
        url=f"https://github.com/test-owner/test-repo/pull/{number}",
    )


class TestSelectPullRequests:
    def test_non_interactive_returns_api_order(self) -> None:
        prs = [_pr(7), _pr(3), _pr(5)]
        github = FakeGitHub(pull_requests=prs)
        prompter = FakePrompter()
        ctx = context_for_test(github=github, prompter=prompter)

        selected = select_pull_requests(ctx, "author:app/dependabot", 50, interactive=False)

        assert selected == prs
        assert github.searches == [("author:app/dependabot", 50)]
        assert prompter.prompts == []

    def test_limit_is_passed_to_search(self) -> None:
        github = FakeGitHub(pull_requests=[_pr(1), _pr(2), _pr(3)])
        ctx = context_for_test(github=github)

        selected = select_pull_requests(ctx, "is:pr", 2, interactive=False)

        assert [pr.number for pr in selected] == [1, 2]
        assert github.searches == [("is:pr", 2)]

    def test_interactive_keeps_fetch_order(self) -> None:
        """Picking #4 then #2 still yields them in API order."""
        prs = [_pr(1), _pr(2), _pr(3), _pr(4), _pr(5)]
        prompter = FakePrompter(multi_select_response=[prs[3].display, prs[1].display])
        ctx = context_for_test(github=FakeGitHub(pull_requests=prs), prompter=prompter)

        selected = select_pull_requests(ctx, "is:pr", 50, interactive=True)

        assert [pr.number for pr in selected] == [2, 4]
        assert prompter.prompts == [("multi_select", SELECT_PROMPT)]
        assert prompter.select_options == [[pr.display for pr in prs]]

    def test_interactive_empty_choice_returns_nothing(self) -> None:
        prompter = FakePrompter(multi_select_response=[])
        ctx = context_for_test(github=FakeGitHub(pull_requests=[_pr(1)]), prompter=prompter)

        assert select_pull_requests(ctx, "is:pr", 50, interactive=True) == []

    def test_interactive_without_results_skips_prompt(self) -> None:
        prompter = FakePrompter()
        ctx = context_for_test(github=FakeGitHub(pull_requests=[]), prompter=prompter)

        assert select_pull_requests(ctx, "is:pr", 50, interactive=True) == []
        assert prompter.prompts == []

    def test_search_failure_raises_query_error(self) -> None:
        github = FakeGitHub(search_error=RuntimeError("gh: not logged in"))
        ctx = context_for_test(github=github)

        with pytest.raises(QueryError, match="not logged in"):
            select_pull_requests(ctx, "is:pr", 50, interactive=False)

    def test_undecodable_response_raises_query_error(self) -> None:
        github = FakeGitHub(search_error=ValueError("gh pr list returned invalid JSON"))
        ctx = context_for_test(github=github)

        with pytest.raises(QueryError, match="invalid JSON"):
            select_pull_requests(ctx, "is:pr", 50, interactive=False)


class TestIsPassingChecksReport:
    def test_all_passing(self) -> None:
        report = "build\tpass\t1m\thttps://x\nlint\tpass\t10s\thttps://y\n"
        assert is_passing_checks_report(report) is True

    def test_empty_report_is_passing(self) -> None:
        assert is_passing_checks_report("") is True

    def test_failing_line(self) -> None:
        assert is_passing_checks_report("build\tpass\t1m\thttps://x\n" + FAILING_REPORT) is False

    def test_pending_line(self) -> None:
        assert is_passing_checks_report(PENDING_REPORT) is False

    def test_check_name_containing_marker_is_not_passing(self) -> None:
        """The heuristic is textual, so a check named "failover" counts as failing."""
        assert is_passing_checks_report("failover-test\tpass\t1m\thttps://x\n") is False

    def test_marker_match_is_case_sensitive(self) -> None:
        assert is_passing_checks_report("build\tFAIL\t1m\thttps://x\n") is True


class TestFilterPassingChecks:
    def test_drops_failing_and_pending(self) -> None:
        prs = [_pr(1), _pr(2), _pr(3)]
        github = FakeGitHub(pull_requests=prs, pr_checks={2: FAILING_REPORT, 3: PENDING_REPORT})
        ctx = context_for_test(github=github)

        confirmed = filter_passing_checks(ctx, prs)

        assert confirmed == [prs[0]]
        assert github.checked_prs == [1, 2, 3]

    def test_unavailable_checks_skip_pr(self) -> None:
        prs = [_pr(1), _pr(2)]
        github = FakeGitHub(pull_requests=prs, pr_check_errors={1})
        ctx = context_for_test(github=github)

        assert filter_passing_checks(ctx, prs) == [prs[1]]

    def test_all_failing_raises_without_touching_git(self) -> None:
        prs = [_pr(1), _pr(2)]
        git = FakeGit()
        github = FakeGitHub(pull_requests=prs, pr_checks={1: FAILING_REPORT, 2: FAILING_REPORT})
        ctx = context_for_test(git=git, github=github)

        with pytest.raises(CheckStatusError, match="none of the selected PRs"):
            filter_passing_checks(ctx, prs)

        assert git.checked_out_branches == []
        assert git.created_branches == []
        assert git.merges == []

    def test_skip_pr_check_keeps_everything(self) -> None:
        prs = [_pr(1), _pr(2)]
        github = FakeGitHub(pull_requests=prs, pr_checks={1: FAILING_REPORT})
        ctx = context_for_test(
            github=github, options=CombineOptions(query="is:pr", skip_pr_check=True)
        )

        assert filter_passing_checks(ctx, prs) == prs
        assert github.checked_prs == []

    def test_empty_input_is_not_an_error(self) -> None:
        ctx = context_for_test()

        assert filter_passing_checks(ctx, []) == []
