"""gh-multi-merge-prs CLI entry point.

This package provides a Click-based CLI that combines several open pull
requests into a single branch and pull request. See
`gh-multi-merge-prs --help` for details.
"""

from multi_merge_prs.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `gh-multi-merge-prs` console script."""
    cli()
