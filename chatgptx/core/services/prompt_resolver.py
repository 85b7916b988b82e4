"""Prompt resolver - instruction text for one-shot actions."""

import logging
from string import Template

from ..models.action import ActionName

logger = logging.getLogger(__name__)

LANGUAGE_PLACEHOLDER = "${language}"

DEFAULT_PROMPTS = {
    ActionName.REVISE: (
        "Please revise the text for improved clarity, brevity, and coherence. "
        "List the changes made and provide a brief explanation for each "
        "(IMPORTANT: reply with ${language} language)."
    ),
    ActionName.POLISH: (
        "Please correct any grammatical errors and enhance the text while "
        "maintaining the original intent and tone as closely as possible "
        "(IMPORTANT: reply with ${language} language)."
    ),
    ActionName.TRANSLATE: (
        "Please translate the text into ${language} and only provide me with "
        "the translated content without formating."
    ),
    ActionName.SUMMARIZE: (
        "Please provide a concise summary of the text, ensuring that all "
        "significant points are included (IMPORTANT: reply with ${language} language)."
    ),
}


class PromptResolver:
    """Resolves prompts from user overrides, falling back to built-ins.

    Overrides are lines of ``[action]prompt text``. The first line whose
    bracketed name equals the action wins.
    """

    def __init__(self, defaults: dict[ActionName, str] | None = None):
        self._defaults = defaults or DEFAULT_PROMPTS

    def resolve(self, action: ActionName | str, custom_prompts: str = "") -> str:
        """Pick the prompt template for an action.

        Args:
            action: One-shot action.
            custom_prompts: Newline-delimited override table.

        Returns:
            Matching override, else the built-in default.

        Raises:
            KeyError: No built-in prompt exists for the action.
        """
        action = ActionName(action)
        for line in (custom_prompts or "").splitlines():
            name, sep, prompt = line.partition("]")
            if not sep:
                continue
            if name.strip().lstrip("[").strip() == action.value:
                logger.info(f"Using custom prompt for '{action.value}'")
                return prompt.strip()

        if action not in self._defaults:
            raise KeyError(f"No prompt for action '{action.value}'")
        return self._defaults[action]

    @staticmethod
    def render(prompt: str, language: str) -> str:
        """Fill the ``${language}`` placeholder, leaving other ``$`` text alone."""
        return Template(prompt).safe_substitute(language=language)
