"""Combined PR title and branch naming.

All functions are pure (no I/O).
"""

from collections.abc import Sequence

from multi_merge_prs.gateway.github.types import PullRequest

BUMP_PREFIX = "chore(deps): bump"
UPDATE_PREFIX = "chore(deps): update"

COMBINED_BRANCH_PREFIX = "combined-pr-branch"

_FNV32_OFFSET_BASIS = 0x811C9DC5
_FNV32_PRIME = 0x01000193


def combine_titles(prs: Sequence[PullRequest]) -> str:
    """Combine PR titles into a single title.

    When the first title carries a dependency-bot prefix, the prefix is kept
    once and every title contributes its remainder:

        "chore(deps): bump foo from 1.0.0 to 1.0.1"
        "chore(deps): bump bar from 2.0.0 to 2.1.0"
        -> "chore(deps): bump foo from 1.0.0 to 1.0.1, bar from 2.0.0 to 2.1.0"

    Without a known prefix the titles are comma-joined unchanged.

    Args:
        prs: Non-empty sequence of pull requests, in merge order

    Returns:
        The combined title
    """
    if len(prs) == 1:
        return prs[0].title

    prefix = ""
    first_title = prs[0].title
    if first_title.startswith(BUMP_PREFIX):
        prefix = BUMP_PREFIX
    elif first_title.startswith(UPDATE_PREFIX):
        prefix = UPDATE_PREFIX

    remainders = [
        pr.title.replace(BUMP_PREFIX, "").replace(UPDATE_PREFIX, "").strip() for pr in prs
    ]
    return f"{prefix} {', '.join(remainders)}".strip()


def fnv1a_32(data: bytes) -> int:
    """32-bit FNV-1a hash.

    Examples:
        >>> fnv1a_32(b"")
        2166136261
        >>> fnv1a_32(b"a")
        3826002220
    """
    h = _FNV32_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * _FNV32_PRIME) & 0xFFFFFFFF
    return h


def combined_branch_name(title: str) -> str:
    """Derive the combined branch name from the combined title.

    The same title always yields the same branch, so re-running with the same
    selection reuses the branch name.
    """
    return f"{COMBINED_BRANCH_PREFIX}-{fnv1a_32(title.encode('utf-8'))}"
