"""Abstract prompt operations for dependency injection."""

from abc import ABC, abstractmethod


class Prompter(ABC):
    """Abstract interface for blocking user prompts.

    Every call blocks until the user answers; there is no timeout.
    """

    @abstractmethod
    def confirm(self, message: str, *, default: bool) -> bool:
        """Ask a yes/no question."""
        ...

    @abstractmethod
    def text(self, message: str, *, default: str) -> str:
        """Ask for free text, returning default when the user just presses enter."""
        ...

    @abstractmethod
    def select(self, message: str, options: list[str], *, default: str) -> str:
        """Ask the user to pick exactly one of options.

        Args:
            message: Question to display
            options: Choices, displayed in order
            default: Choice returned when the user accepts the default

        Returns:
            The chosen option
        """
        ...

    @abstractmethod
    def multi_select(self, message: str, options: list[str]) -> list[str]:
        """Ask the user to pick any subset of options.

        Returns:
            The chosen options (possibly empty), in any order
        """
        ...
