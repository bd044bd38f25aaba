"""Errors raised by the scoring domain."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A public entry point received a structurally invalid argument.

    Raised before any computation happens, e.g. when the job or resume is
    missing, is not a mapping, or carries a list field with a non-list value.
    """

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"{argument} {message}")
        self.argument = argument
