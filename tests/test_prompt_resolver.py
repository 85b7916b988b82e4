"""Tests for prompt resolution."""

import pytest

from chatgptx.core.models.action import ONE_SHOT_ACTIONS, ActionName
from chatgptx.core.services.prompt_resolver import DEFAULT_PROMPTS, PromptResolver


def test_override_line_wins_regardless_of_others() -> None:
    custom = "\n".join(
        [
            "[revise]Rewrite it",
            "not a prompt line",
            "[translate]Translate to French",
            "[summarize]Shorten",
        ]
    )

    assert PromptResolver().resolve("translate", custom) == "Translate to French"


def test_first_matching_override_wins() -> None:
    custom = "[polish]First\n[polish]Second"

    assert PromptResolver().resolve(ActionName.POLISH, custom) == "First"


def test_override_name_must_match_exactly() -> None:
    custom = "[translate-fr]Translate to French\n[Translate]Shouting"

    result = PromptResolver().resolve(ActionName.TRANSLATE, custom)

    assert result == DEFAULT_PROMPTS[ActionName.TRANSLATE]


@pytest.mark.parametrize("action", ONE_SHOT_ACTIONS)
def test_defaults_without_overrides(action: ActionName) -> None:
    resolver = PromptResolver()

    assert resolver.resolve(action, "") == DEFAULT_PROMPTS[action]
    assert resolver.resolve(action, "[chat]be nice") == DEFAULT_PROMPTS[action]


def test_chat_has_no_prompt() -> None:
    with pytest.raises(KeyError):
        PromptResolver().resolve(ActionName.CHAT)


def test_render_fills_language() -> None:
    prompt = PromptResolver.render(DEFAULT_PROMPTS[ActionName.TRANSLATE], "German")

    assert prompt.startswith("Please translate the text into German and")


def test_render_keeps_other_dollar_text() -> None:
    assert PromptResolver.render("It costs $5 in ${language}", "Dutch") == "It costs $5 in Dutch"
    assert PromptResolver.render("Translate to French", "Dutch") == "Translate to French"
