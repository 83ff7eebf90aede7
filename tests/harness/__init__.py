"""Test harness utilities for driving the input collector."""

from .scripted_prompter import ScriptedPrompter

__all__ = ["ScriptedPrompter"]
