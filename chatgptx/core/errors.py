"""Errors raised by the action pipeline."""


class ChatGPTxError(Exception):
    """Base error."""


class ConfigurationError(ChatGPTxError):
    """Options cannot be turned into a working client."""


class CompletionError(ChatGPTxError):
    """The completions backend call failed or returned an unusable body."""


class ActionWiringError(ChatGPTxError):
    """A strategy was asked to build a request for an action it does not serve."""
