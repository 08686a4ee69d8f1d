"""User-facing output helpers.

All user-facing messages go to stderr so stdout stays clean for piping.
"""

import click


def user_output(message: str = "") -> None:
    """Print a message for the user on stderr."""
    click.echo(message, err=True)


def user_success(message: str) -> None:
    user_output(click.style(message, fg="green"))


def user_warning(message: str) -> None:
    user_output(click.style(">> Warn: ", fg="yellow") + message)


def user_error(message: str) -> None:
    user_output(click.style("Error: ", fg="red") + message)
