"""LLM protocol for dependency injection."""
from typing import Protocol, runtime_checkable

from ..models.action import ActionRequest
from ..models.chat import ChatMessage


@runtime_checkable
class LLMProtocol(Protocol):
    """Protocol for a chat-completions client."""

    async def complete(self, request: ActionRequest) -> ChatMessage:
        """Send one chat-completions request.

        Args:
            request: Request body.

        Returns:
            Message of the first choice, untrimmed.

        Raises:
            CompletionError: Transport failure, non-2xx status, timeout
                or malformed response.
        """
        ...

    async def aclose(self) -> None:
        """Release the underlying HTTP resources."""
        ...
