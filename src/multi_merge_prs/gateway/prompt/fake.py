"""Fake Prompter implementation for testing.

FakePrompter answers from pre-configured responses, enabling fast and
deterministic tests of interactive flows.
"""

from multi_merge_prs.gateway.prompt.abc import Prompter


class FakePrompter(Prompter):
    """In-memory fake implementation that answers with configured responses.

    This class has NO public setup methods. All state is provided via constructor.
    When a response queue runs out, the prompt's default is used.
    """

    def __init__(
        self,
        *,
        confirm_responses: list[bool] | None = None,
        text_responses: list[str] | None = None,
        select_responses: list[str] | None = None,
        multi_select_response: list[str] | None = None,
    ) -> None:
        """Create FakePrompter with configured answers.

        Args:
            confirm_responses: Answers for successive confirm() calls
            text_responses: Answers for successive text() calls
            select_responses: Answers for successive select() calls
            multi_select_response: Options chosen by every multi_select() call,
                in the order the user "picked" them
        """
        self._confirm_responses = list(confirm_responses) if confirm_responses else []
        self._text_responses = list(text_responses) if text_responses else []
        self._select_responses = list(select_responses) if select_responses else []
        self._multi_select_response = (
            multi_select_response if multi_select_response is not None else []
        )
        self._prompts: list[tuple[str, str]] = []
        self._select_options: list[list[str]] = []

    def confirm(self, message: str, *, default: bool) -> bool:
        self._prompts.append(("confirm", message))
        if self._confirm_responses:
            return self._confirm_responses.pop(0)
        return default

    def text(self, message: str, *, default: str) -> str:
        self._prompts.append(("text", message))
        if self._text_responses:
            return self._text_responses.pop(0)
        return default

    def select(self, message: str, options: list[str], *, default: str) -> str:
        self._prompts.append(("select", message))
        self._select_options.append(list(options))
        if self._select_responses:
            return self._select_responses.pop(0)
        return default

    def multi_select(self, message: str, options: list[str]) -> list[str]:
        self._prompts.append(("multi_select", message))
        self._select_options.append(list(options))
        return [option for option in self._multi_select_response if option in options]

    @property
    def prompts(self) -> list[tuple[str, str]]:
        """Read-only access to (kind, message) tuples for every prompt shown."""
        return self._prompts

    @property
    def select_options(self) -> list[list[str]]:
        """Options offered by each select() or multi_select() call."""
        return self._select_options
