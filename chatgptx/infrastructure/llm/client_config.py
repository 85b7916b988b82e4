"""Client configuration - transport parameters per API dialect."""

import logging
from dataclasses import dataclass, field
from urllib.parse import parse_qs, urlsplit, urlunsplit

from ...config.settings import Settings
from ...core.errors import ConfigurationError

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_SUFFIX = "/chat/completions"


@dataclass
class ClientConfig:
    """Endpoint, auth and timeout for one completions call."""
    dialect: str  # "openai" | "azure"
    base_url: str
    api_key: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    timeout: float = 30.0

    @property
    def api_version(self) -> str | None:
        return self.params.get("api-version")


def _split_azure_base(api_base: str) -> tuple[str, str | None]:
    """Strip query and chat/completions suffix from an Azure URL.

    Returns:
        Tuple of (base URL, api-version found in the query or None).
    """
    parts = urlsplit(api_base)
    versions = parse_qs(parts.query).get("api-version")

    path = parts.path.rstrip("/")
    if path.endswith(CHAT_COMPLETIONS_SUFFIX):
        path = path[: -len(CHAT_COMPLETIONS_SUFFIX)]

    base_url = urlunsplit((parts.scheme, parts.netloc, path, "", ""))
    return base_url, versions[0] if versions else None


def build_client_config(options: Settings) -> ClientConfig:
    """Translate options into client parameters.

    Args:
        options: User options.

    Returns:
        Client configuration for the selected dialect.

    Raises:
        ConfigurationError: Unsupported dialect or missing Azure API version.
    """
    if options.api_type == "openai":
        return ClientConfig(
            dialect="openai",
            base_url=options.api_base,
            api_key=options.api_key,
            headers={"Authorization": f"Bearer {options.api_key}"},
            timeout=options.request_timeout,
        )

    if options.api_type == "azure":
        base_url, url_version = _split_azure_base(options.api_base)
        api_version = url_version or options.api_version
        if not api_version:
            raise ConfigurationError(
                "missing api version: add ?api-version=... to the API base URL "
                "or set the API version option"
            )
        logger.debug(f"Azure endpoint {base_url} (api-version={api_version})")
        return ClientConfig(
            dialect="azure",
            base_url=base_url,
            api_key=options.api_key,
            headers={"api-key": options.api_key},
            params={"api-version": api_version},
            timeout=options.request_timeout,
        )

    raise ConfigurationError(f"unsupported api type: {options.api_type}")
