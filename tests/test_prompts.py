from __future__ import annotations

import pytest

from componentkit.errors import UserCancellation
from componentkit.models import derive
from componentkit.prompts import InputCollector, QuestionaryPrompter, summarize
from tests.harness import ScriptedPrompter


def test_collect_names_loops_until_valid():
    prompter = ScriptedPrompter(["MyButton", "my-button", "myButton", "myButton", "my-button"])
    collector = InputCollector(prompter)

    assert collector.collect_names() == ("myButton", "my-button")
    assert prompter.messages == [
        "Invalid name [MyButton], name must be lowerCamelCase.",
        "Invalid name [my-button], name must be lowerCamelCase.",
        "Invalid name [myButton], all lowercase and dashes.",
    ]
    assert len(prompter.questions) == 5


def test_collect_builds_derived_spec():
    collector = InputCollector(ScriptedPrompter(["heroBanner", "hero-banner", True, False]))
    spec = collector.collect()
    assert spec == derive("heroBanner", "hero-banner", include_styles=True, include_script=False)


def test_summarize_lists_optional_names_only_when_requested():
    full = summarize(derive("heroBanner", "hero-banner", include_styles=True, include_script=True))
    assert full == [
        "folderName:\t\theroBanner",
        "jsFileName:\t\theroBanner",
        "contentTitle:\t\thero banner",
        "htlName:\t\theroBanner",
        "htlTemplateName:\trenderHeroBanner",
        "lessName:\t\thero-banner",
        "lessFileName:\t\theroBanner",
    ]

    bare = summarize(derive("heroBanner", "hero-banner", include_styles=False, include_script=False))
    assert not any(line.startswith(("jsFileName", "lessName", "lessFileName")) for line in bare)


@pytest.mark.parametrize("answer", [True, False])
def test_confirm_returns_decision(answer):
    prompter = ScriptedPrompter([answer])
    spec = derive("heroBanner", "hero-banner", include_styles=True, include_script=True)

    assert InputCollector(prompter).confirm(spec) is answer
    assert prompter.messages[0] == "Look at what you made:"
    assert prompter.questions == ["Does this look correct?"]


def test_questionary_prompter_treats_interrupt_as_cancellation(monkeypatch: pytest.MonkeyPatch):
    class _Interrupted:
        def ask(self):
            return None

    monkeypatch.setattr("componentkit.prompts.questionary.text", lambda message: _Interrupted())

    with pytest.raises(UserCancellation):
        QuestionaryPrompter().ask_text("name?")


def test_questionary_prompter_returns_answers(monkeypatch: pytest.MonkeyPatch):
    class _Answered:
        def __init__(self, value):
            self.value = value

        def ask(self):
            return self.value

    monkeypatch.setattr(
        "componentkit.prompts.questionary.select", lambda message, choices: _Answered(choices[1].value)
    )
    monkeypatch.setattr(
        "componentkit.prompts.questionary.confirm", lambda message, default: _Answered(default)
    )

    prompter = QuestionaryPrompter()
    assert prompter.ask_choice("styles?") is False
    assert prompter.ask_confirm("ok?", default=False) is False
