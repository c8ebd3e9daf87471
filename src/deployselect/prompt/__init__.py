"""Prompt backends."""

from deployselect.prompt.terminal import TerminalPrompter

__all__ = ["TerminalPrompter"]
