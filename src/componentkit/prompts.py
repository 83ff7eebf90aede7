"""Interactive collection of the component names and options."""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar

import questionary
from questionary import Choice

from .errors import NameValidationError, UserCancellation
from .models import ComponentSpec, derive
from .naming import validate_camel_name, validate_dashed_name

__all__ = [
    "InputCollector",
    "Prompter",
    "QuestionaryPrompter",
    "summarize",
]


CAMEL_NAME_QUESTION = "What is the name of the component (lowerCamelCase)?"
DASHED_NAME_QUESTION = "What is the name of the component (with-dashes-all-lowercase)?"
STYLES_QUESTION = "Do you want to include styles?"
SCRIPT_QUESTION = "Do you want to include javascript?"
CONFIRM_QUESTION = "Does this look correct?"

WELCOME = "Welcome to componentkit! I create stub files for new AEM components."

T = TypeVar("T")


class Prompter(Protocol):
    """Operator interaction used by :class:`InputCollector`."""

    def ask_text(self, message: str) -> str:
        """Return free text typed by the operator."""

    def ask_choice(self, message: str) -> bool:
        """Return the operator's Yes/No selection."""

    def ask_confirm(self, message: str, *, default: bool = False) -> bool:
        """Return the operator's answer to a confirmation question."""

    def say(self, message: str, *, style: str | None = None) -> None:
        """Show ``message`` to the operator."""


def _answered(answer: T | None) -> T:
    # questionary returns None when the prompt is interrupted with Ctrl-C.
    if answer is None:
        raise UserCancellation("prompt interrupted")
    return answer


class QuestionaryPrompter:
    """Terminal prompts rendered with :mod:`questionary`."""

    def ask_text(self, message: str) -> str:
        return _answered(questionary.text(message).ask())

    def ask_choice(self, message: str) -> bool:
        choices = [
            Choice(title=[("fg:ansigreen", "Yes")], value=True),
            Choice(title=[("fg:ansired", "No")], value=False),
        ]
        return _answered(questionary.select(message, choices=choices).ask())

    def ask_confirm(self, message: str, *, default: bool = False) -> bool:
        return _answered(questionary.confirm(message, default=default).ask())

    def say(self, message: str, *, style: str | None = None) -> None:
        questionary.print(message, style=style)


def summarize(spec: ComponentSpec) -> list[str]:
    """Return the summary lines shown before confirmation."""

    lines = [f"folderName:\t\t{spec.folder_name}"]
    if spec.script_file_name is not None:
        lines.append(f"jsFileName:\t\t{spec.script_file_name}")
    lines.append(f"contentTitle:\t\t{spec.display_title}")
    lines.append(f"htlName:\t\t{spec.markup_name}")
    lines.append(f"htlTemplateName:\t{spec.markup_entry_point_name}")
    if spec.style_file_name is not None:
        lines.append(f"lessName:\t\t{spec.style_selector_name}")
        lines.append(f"lessFileName:\t\t{spec.style_file_name}")
    return lines


class InputCollector:
    """Ask the operator for a component and build its :class:`ComponentSpec`."""

    def __init__(self, prompter: Prompter | None = None) -> None:
        self.prompter = prompter or QuestionaryPrompter()

    def _ask_valid(self, question: str, validate: Callable[[str], str]) -> str:
        while True:
            answer = self.prompter.ask_text(question)
            try:
                return validate(answer)
            except NameValidationError as exc:
                self.prompter.say(str(exc), style="fg:ansired")

    def welcome(self) -> None:
        self.prompter.say(WELCOME, style="bold")

    def collect_names(self) -> tuple[str, str]:
        """Return ``(camel_name, dashed_name)``, asking again until both are valid."""

        camel_name = self._ask_valid(CAMEL_NAME_QUESTION, validate_camel_name)
        dashed_name = self._ask_valid(DASHED_NAME_QUESTION, validate_dashed_name)
        return camel_name, dashed_name

    def collect_flags(self) -> tuple[bool, bool]:
        """Return ``(include_styles, include_script)``."""

        include_styles = self.prompter.ask_choice(STYLES_QUESTION)
        include_script = self.prompter.ask_choice(SCRIPT_QUESTION)
        return include_styles, include_script

    def collect(self) -> ComponentSpec:
        camel_name, dashed_name = self.collect_names()
        include_styles, include_script = self.collect_flags()
        return derive(
            camel_name,
            dashed_name,
            include_styles=include_styles,
            include_script=include_script,
        )

    def confirm(self, spec: ComponentSpec) -> bool:
        """Show the summary of ``spec`` and return the operator's decision."""

        self.prompter.say("Look at what you made:", style="fg:ansicyan")
        for line in summarize(spec):
            self.prompter.say(line)
        return self.prompter.ask_confirm(CONFIRM_QUESTION, default=False)
