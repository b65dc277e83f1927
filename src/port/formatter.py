"""Formatter port — decorates text for display."""

from typing import Protocol


class Formatter(Protocol):
    """Port for highlighting text. Plain passthrough is a valid implementation."""

    def red(self, text: str) -> str: ...

    def cyan(self, text: str) -> str: ...

    def yellow(self, text: str) -> str: ...

    def underline(self, text: str) -> str: ...
