"""Formatter implementations for terminal output."""

import click

from port.formatter import Formatter


class AnsiFormatter:
    """Formatter that wraps text in ANSI escape codes via click.style()."""

    def red(self, text: str) -> str:
        return click.style(text, fg="red")

    def cyan(self, text: str) -> str:
        return click.style(text, fg="cyan")

    def yellow(self, text: str) -> str:
        return click.style(text, fg="yellow")

    def underline(self, text: str) -> str:
        return click.style(text, underline=True)


class PlainFormatter:
    """Formatter that returns text unchanged, for pipes and tests."""

    def red(self, text: str) -> str:
        return text

    def cyan(self, text: str) -> str:
        return text

    def yellow(self, text: str) -> str:
        return text

    def underline(self, text: str) -> str:
        return text


def get_formatter(color: str, is_tty: bool) -> Formatter:
    """Pick a formatter for a ``--color`` choice (auto / always / never)."""
    if color == "always" or (color == "auto" and is_tty):
        return AnsiFormatter()
    return PlainFormatter()
