import logging
from typing import Optional

import httpx
from openai import AsyncAzureOpenAI, AsyncOpenAI, OpenAIError

from ...config.settings import Settings
from ...core.errors import CompletionError, ConfigurationError
from ...core.models.action import ActionRequest
from ...core.models.chat import ChatMessage
from .client_config import ClientConfig, build_client_config

logger = logging.getLogger(__name__)


class OpenAICompletionsClient:
    """Chat-completions client over the OpenAI SDK (OpenAI or Azure)."""

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize client.

        Args:
            config: Endpoint, auth and timeout.
            http_client: Custom HTTP client (proxies, tests).
        """
        self._config = config
        try:
            self._client = self._build_sdk_client(config, http_client)
        except OpenAIError as e:
            raise ConfigurationError(str(e)) from e

    @staticmethod
    def _build_sdk_client(
        config: ClientConfig, http_client: Optional[httpx.AsyncClient]
    ) -> AsyncOpenAI:
        if config.dialect == "azure":
            return AsyncAzureOpenAI(
                base_url=config.base_url,
                api_key=config.api_key,
                api_version=config.api_version,
                default_headers=config.headers,
                timeout=config.timeout,
                max_retries=0,
                http_client=http_client,
            )
        return AsyncOpenAI(
            base_url=config.base_url,
            api_key=config.api_key,
            default_headers=config.headers,
            default_query=config.params or None,
            timeout=config.timeout,
            max_retries=0,
            http_client=http_client,
        )

    async def complete(self, request: ActionRequest) -> ChatMessage:
        """Send the request and return the first choice's message.

        Args:
            request: Request body.

        Returns:
            Assistant message, content untrimmed.

        Raises:
            CompletionError: Any transport, status or response-shape problem.
        """
        try:
            response = await self._client.chat.completions.create(**request.to_payload())
        except OpenAIError as e:
            raise CompletionError(str(e)) from e

        choices = getattr(response, "choices", None)
        if not isinstance(choices, list) or not choices:
            raise CompletionError("malformed response: no choices")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            raise CompletionError("malformed response: no message content")

        role = getattr(message, "role", None)
        if not isinstance(role, str) or not role:
            role = "assistant"
        logger.debug(f"Received {len(content)} chars from {self._config.base_url}")
        return ChatMessage(role=role, content=content)

    async def aclose(self) -> None:
        await self._client.close()


def create_completions_client(
    options: Settings, http_client: Optional[httpx.AsyncClient] = None
) -> OpenAICompletionsClient:
    """Build a client for the options' dialect.

    Raises:
        ConfigurationError: Options cannot be turned into a client config.
    """
    return OpenAICompletionsClient(build_client_config(options), http_client=http_client)
