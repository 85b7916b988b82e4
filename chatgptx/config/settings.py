from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    api_type: str = "openai"
    api_base: str = "https://api.openai.com/v1"
    api_key: str = ""
    api_version: str = ""
    model: str = "gpt-3.5-turbo"
    temperature: float | None = 1.0
    request_timeout: float = 30.0

    chat_history_ttl_minutes: float = 20.0

    # One-shot actions
    revise_enabled: bool = True
    revise_primary_language: str = "English"
    revise_secondary_language: str = "Chinese Simplified"
    polish_enabled: bool = True
    polish_primary_language: str = "English"
    polish_secondary_language: str = "Chinese Simplified"
    translate_enabled: bool = True
    translate_primary_language: str = "Chinese Simplified"
    translate_secondary_language: str = "English"
    summarize_enabled: bool = True
    summarize_primary_language: str = "Chinese Simplified"
    summarize_secondary_language: str = "English"

    # Lines of "[action]prompt text"
    custom_prompts: str = ""

    terminal_apps: list[str] = ["iTerm2", "Terminal"]

    class Config:
        env_file = ".env"
        env_prefix = "CHATGPTX_"
        extra = "ignore"

    def is_enabled(self, action: str) -> bool:
        """Whether a one-shot action is switched on."""
        return bool(getattr(self, f"{action}_enabled", False))

    def language_for(self, action: str, secondary: bool = False) -> str:
        """Target language of a one-shot action.

        Args:
            action: One-shot action name.
            secondary: Use the secondary language instead of the primary one.

        Returns:
            Human-readable language name.
        """
        slot = "secondary" if secondary else "primary"
        return getattr(self, f"{action}_{slot}_language")


settings = Settings()
