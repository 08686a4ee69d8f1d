"""Parsing utilities for gh CLI output."""

import json

from multi_merge_prs.gateway.github.types import PullRequest

# Fields requested from `gh pr list --json`
PR_LIST_FIELDS = "number,headRefName,title,url"


def parse_pull_request_list(json_str: str) -> list[PullRequest]:
    """Parse `gh pr list --json number,headRefName,title,url` output.

    Args:
        json_str: JSON string from gh pr list command

    Returns:
        Pull requests in the order returned by the API

    Raises:
        ValueError: If the output is not a JSON list of PR objects with the
            expected fields
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"gh pr list returned invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"expected a JSON list of pull requests, got {type(data).__name__}")

    prs: list[PullRequest] = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"expected a pull request object, got {type(item).__name__}")
        missing = [key for key in ("number", "headRefName", "title", "url") if key not in item]
        if missing:
            raise ValueError(f"pull request is missing fields: {', '.join(missing)}")

        number = item["number"]
        # bool is a subclass of int, reject it explicitly
        if not isinstance(number, int) or isinstance(number, bool) or number <= 0:
            raise ValueError(f"invalid pull request number: {number!r}")
        for key in ("headRefName", "title", "url"):
            if not isinstance(item[key], str):
                raise ValueError(f"pull request #{number} has a non-string '{key}'")

        prs.append(
            PullRequest(
                number=number,
                title=item["title"],
                head_ref_name=item["headRefName"],
                url=item["url"],
            )
        )

    return prs
