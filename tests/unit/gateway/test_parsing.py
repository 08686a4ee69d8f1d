"""Tests for parsing `gh pr list --json` output."""

import json

import pytest

from multi_merge_prs.gateway.github.parsing import parse_pull_request_list
from multi_merge_prs.gateway.github.types import PullRequest


def _item(number: object = 12, **overrides: object) -> dict[str, object]:
    item: dict[str, object] = {
        "number": number,
        "headRefName": "dependabot/pip/requests-2.32.0",
        "title": "chore(deps): bump requests from 2.31.0 to 2.32.0",
        "url": "https://github.com/octo/repo/pull/12",
    }
    item.update(overrides)
    return item


def test_parses_fields_in_api_order() -> None:
    payload = json.dumps([_item(12), _item(3, headRefName="renovate/foo", title="Update foo")])

    prs = parse_pull_request_list(payload)

    assert [pr.number for pr in prs] == [12, 3]
    assert prs[0] == PullRequest(
        number=12,
        title="chore(deps): bump requests from 2.31.0 to 2.32.0",
        head_ref_name="dependabot/pip/requests-2.32.0",
        url="https://github.com/octo/repo/pull/12",
    )
    assert prs[1].head_ref_name == "renovate/foo"


def test_empty_list() -> None:
    assert parse_pull_request_list("[]") == []


def test_display_format() -> None:
    pr = parse_pull_request_list(json.dumps([_item(12)]))[0]

    assert pr.display == (
        "#12 - chore(deps): bump requests from 2.31.0 to 2.32.0 - "
        "https://github.com/octo/repo/pull/12"
    )


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ("not json", "invalid JSON"),
        ('{"number": 1}', "expected a JSON list"),
        ("[1]", "expected a pull request object"),
        (json.dumps([{"number": 1, "title": "x"}]), "missing fields: headRefName, url"),
        (json.dumps([_item(0)]), "invalid pull request number"),
        (json.dumps([_item("12")]), "invalid pull request number"),
        (json.dumps([_item(True)]), "invalid pull request number"),
        (json.dumps([_item(12, title=None)]), "non-string 'title'"),
    ],
)
def test_malformed_output_raises(payload: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_pull_request_list(payload)
