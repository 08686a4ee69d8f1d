"""Type definitions for GitHub operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PullRequest:
    """An open pull request that is a candidate for combining."""

    number: int
    title: str
    head_ref_name: str  # Source branch, merged into the combined branch
    url: str

    @property
    def display(self) -> str:
        """One-line representation used in selection prompts and logs."""
        return f"#{self.number} - {self.title} - {self.url}"


@dataclass(frozen=True)
class RepoInfo:
    """Owner and name of the current GitHub repository."""

    owner: str
    name: str
