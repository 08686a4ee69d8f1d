"""Terminal prompts backed by click, with option lists rendered by rich."""

import click
from rich.console import Console
from rich.table import Table

from multi_merge_prs.gateway.prompt.abc import Prompter
from multi_merge_prs.output import user_output


def parse_selection(raw: str, option_count: int) -> list[int] | None:
    """Parse a multi-select answer into zero-based option indices.

    Accepts comma or space separated 1-based numbers and ranges ("1,3-5"),
    "all", or an empty answer for no selection.

    Args:
        raw: Text typed by the user
        option_count: Number of options that were displayed

    Returns:
        Sorted, de-duplicated indices, or None if the answer is invalid

    Examples:
        >>> parse_selection("1, 3-4", 5)
        [0, 2, 3]
        >>> parse_selection("all", 2)
        [0, 1]
        >>> parse_selection("7", 5) is None
        True
    """
    answer = raw.strip().lower()
    if not answer:
        return []
    if answer == "all":
        return list(range(option_count))

    indices: set[int] = set()
    for token in answer.replace(",", " ").split():
        start_str, sep, end_str = token.partition("-")
        if not start_str.isdigit() or (sep and not end_str.isdigit()):
            return None
        start = int(start_str)
        end = int(end_str) if sep else start
        if start < 1 or end > option_count or start > end:
            return None
        indices.update(range(start - 1, end))
    return sorted(indices)


class ClickPrompter(Prompter):
    """Production implementation prompting on the terminal."""

    def __init__(self) -> None:
        self._console = Console(stderr=True)

    def confirm(self, message: str, *, default: bool) -> bool:
        return click.confirm(message, default=default, err=True)

    def text(self, message: str, *, default: str) -> str:
        return click.prompt(message, default=default, err=True)

    def select(self, message: str, options: list[str], *, default: str) -> str:
        self._print_options(options)
        default_number = options.index(default) + 1 if default in options else 1
        selection = click.prompt(
            message,
            type=click.IntRange(1, len(options)),
            default=default_number,
            err=True,
        )
        return options[selection - 1]

    def multi_select(self, message: str, options: list[str]) -> list[str]:
        if not options:
            return []
        self._print_options(options)
        while True:
            raw = click.prompt(
                f"{message} (numbers or ranges like 1,3-5; 'all'; empty for none)",
                default="",
                show_default=False,
                err=True,
            )
            indices = parse_selection(raw, len(options))
            if indices is not None:
                return [options[i] for i in indices]
            user_output(click.style("Invalid selection: ", fg="red") + raw)

    def _print_options(self, options: list[str]) -> None:
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("#", style="dim", no_wrap=True)
        table.add_column("option")
        for i, option in enumerate(options, 1):
            table.add_row(str(i), option)
        self._console.print(table)
